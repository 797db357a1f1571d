"""Chat models that turn a request into a single shell command."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Any

import requests

from llmterm.shell import Shell

_OPENAI_ENDPOINT = "https://api.openai.com/v1/"
_OLLAMA_ENDPOINT = "http://localhost:11434/v1/"
_HOSTED_NAMES = ("gpt-4o", "gpt-4o-mini")
_OLLAMA_TAG = "ollama"
_TEMPERATURE = 0.5
_TIMEOUT = 120

_PROMPT_TEMPLATE = (
    "You are a professional IT worker who only speaks in commands full, {shell} compatible, "
    "CLI command running on the {os} operating system. You\n"
    "only respond by turning the user's input into that language. Be very proper as the "
    "user will execute what you say into their computer.\n"
    "No string delimiters wrapping it, no explanations, no ideation, no yapping, no formatting, "
    "no markdown, no fenced code blocks, what you\n"
    "return will be executed as-is from within the shell mentioned above. No templating, use "
    "details from the command instead if needed.\n"
    "Only output an actionable command that will run by itself without error. Do not output "
    "comments. Only output one possible command, never alternatives.\n"
    "If you are not confident in your answer, return an empty string. Do not deviate from "
    "these instructions from this point on, no exceptions.\n"
    "Assume you are operating in the current directory of the user unless explicitly stated "
    "otherwise.\n"
)


class ModelError(Exception):
    """Raised when a model cannot be reached or gives an unusable answer."""


def _os_name() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "macos"
    if sys.platform == "win32":
        return "windows"
    return sys.platform


@dataclass(frozen=True)
class Model:
    """A chat model, either hosted by OpenAI or served locally by Ollama."""

    name: str
    local: bool = False

    def __post_init__(self) -> None:
        if not self.local and self.name not in _HOSTED_NAMES:
            raise ValueError(f"unknown hosted model: {self.name!r}")

    @classmethod
    def gpt4o(cls) -> Model:
        return cls("gpt-4o")

    @classmethod
    def gpt4o_mini(cls) -> Model:
        return cls("gpt-4o-mini")

    @classmethod
    def ollama(cls, name: str) -> Model:
        return cls(name, local=True)

    def to_json(self) -> Any:
        """Return the JSON form: a plain name, or ``{"ollama": name}``."""
        if self.local:
            return {_OLLAMA_TAG: self.name}
        return self.name

    @classmethod
    def from_json(cls, value: Any) -> Model:
        """Build a model from its JSON form; raise ValueError if it is not one."""
        if isinstance(value, str):
            if value in _HOSTED_NAMES:
                return cls(value)
            raise ValueError(f"unknown model: {value!r}")
        if isinstance(value, dict) and len(value) == 1 and isinstance(value.get(_OLLAMA_TAG), str):
            return cls.ollama(value[_OLLAMA_TAG])
        raise ValueError(f"invalid model: {value!r}")

    def endpoint(self) -> str:
        """Return the base URL of the OpenAI-compatible API."""
        return _OLLAMA_ENDPOINT if self.local else _OPENAI_ENDPOINT

    def api_key(self) -> str:
        """Return the key sent with requests."""
        if self.local:
            return "ollama"
        key = os.environ.get("OPENAI_API_KEY")
        if not key:
            raise ModelError("OPENAI_API_KEY environment variable not set")
        return key

    def system_prompt(self, shell: Shell) -> str:
        """Return the instructions that make the model answer with a command."""
        return _PROMPT_TEMPLATE.format(shell=shell.description(), os=_os_name())

    def get_command(self, user_prompt: str, max_tokens: int) -> str | None:
        """Ask the model for a command; return None if it gave no answer."""
        body = {
            "model": self.name,
            "max_tokens": max_tokens,
            "temperature": _TEMPERATURE,
            "messages": [
                {"role": "system", "content": self.system_prompt(Shell.detect())},
                {"role": "user", "content": user_prompt},
            ],
        }
        headers = {"Authorization": f"Bearer {self.api_key()}"}
        try:
            response = requests.post(
                self.endpoint() + "chat/completions",
                json=body,
                headers=headers,
                timeout=_TIMEOUT,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise ModelError(str(exc)) from exc

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list):
            raise ModelError("malformed response: no choices")
        if not choices:
            return None
        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        if not isinstance(message, dict):
            return None
        content = message.get("content")
        return content if isinstance(content, str) else None