"""Configuration and command cache kept as JSON beside the program."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from llmterm.model import Model


@dataclass
class Config:
    """Which model to ask and how many tokens it may answer with."""

    model: Model
    max_tokens: int

    def to_json(self) -> dict[str, Any]:
        return {"model": self.model.to_json(), "max_tokens": self.max_tokens}

    @classmethod
    def from_json(cls, data: Any) -> Config:
        """Build a config from parsed JSON; raise ValueError if it is invalid."""
        if not isinstance(data, dict):
            raise ValueError("configuration must be a JSON object")
        try:
            model_value = data["model"]
            max_tokens = data["max_tokens"]
        except KeyError as exc:
            raise ValueError(f"missing configuration field {exc.args[0]!r}") from exc
        if not isinstance(max_tokens, int) or isinstance(max_tokens, bool):
            raise ValueError("max_tokens must be an integer")
        return cls(Model.from_json(model_value), max_tokens)


def _program_dir() -> Path:
    program = sys.argv[0] if sys.argv and sys.argv[0] else "."
    return Path(program).resolve().parent


def default_config_path() -> Path:
    """Return the config file next to the running program."""
    return _program_dir() / "config.json"


def default_cache_path() -> Path:
    """Return the cache file next to the running program."""
    return _program_dir() / "cache.json"


def load_config(path: Path) -> Config:
    """Read a config file; OSError if unreadable, ValueError if invalid."""
    return Config.from_json(json.loads(Path(path).read_text(encoding="utf-8")))


def save_config(path: Path, config: Config) -> None:
    Path(path).write_text(json.dumps(config.to_json(), indent=2), encoding="utf-8")


def load_cache(path: Path) -> dict[str, str]:
    """Read the prompt-to-command cache; an unreadable file gives an empty cache."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError:
        return {}
    data = json.loads(content)
    if not isinstance(data, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in data.items()
    ):
        raise ValueError("cache must map prompts to commands")
    return data


def save_cache(path: Path, cache: dict[str, str]) -> None:
    Path(path).write_text(json.dumps(cache, indent=2), encoding="utf-8")