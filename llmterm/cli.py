"""Command line: turn a description into a shell command and optionally run it."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
from pathlib import Path
from typing import Callable

from termcolor import colored

from llmterm.model import Model, ModelError
from llmterm.shell import Shell
from llmterm.storage import (
    Config,
    default_cache_path,
    default_config_path,
    load_cache,
    load_config,
    save_cache,
    save_config,
)

Reader = Callable[[], str]

_MODEL_MENU = "Select model:\n 1 for gpt-4o-mini\n 2 for gpt-4o\n 3 for ollama (llama3.1)"
_MODEL_CHOICES = {
    "1": Model.gpt4o_mini,
    "2": Model.gpt4o,
    "3": lambda: Model.ollama("llama3.1"),
}
_INTEGER = re.compile(r"[+-]?\d+")
_MAX_TOKENS = 4096


def _reader(read: Reader | None) -> Reader:
    return read if read is not None else input


def _confirmed(read: Reader) -> bool:
    return read().strip().lower() == "y"


def ask_config(read: Reader | None = None) -> Config:
    """Ask the user for a model and a token limit until both are valid."""
    read = _reader(read)
    while True:
        print(colored(_MODEL_MENU, "cyan"), flush=True)
        factory = _MODEL_CHOICES.get(read().strip())
        if factory is not None:
            model = factory()
            break
        print(colored("Invalid choice. Please try again.", "red"))

    while True:
        print(colored(f"Enter max tokens (1-{_MAX_TOKENS}): ", "cyan"), end="", flush=True)
        answer = read().strip()
        if _INTEGER.fullmatch(answer) and 0 < int(answer) <= _MAX_TOKENS:
            max_tokens = int(answer)
            break
        print(colored(f"Invalid input. Please enter a number between 1 and {_MAX_TOKENS}.", "red"))

    return Config(model, max_tokens)


def load_or_create_config(path: Path, read: Reader | None = None) -> Config:
    """Load the config, asking for and saving a new one if the file is unreadable."""
    try:
        return load_config(path)
    except OSError:
        config = ask_config(read)
        save_config(path, config)
        return config


def execute_command(command: str) -> None:
    """Run a command line through the user's shell and show what it printed."""
    program, flag = Shell.detect().invocation()
    try:
        result = subprocess.run([program, flag, command], capture_output=True, check=False)
    except OSError as exc:
        print(colored(f"Failed to execute command: {exc}", "red"), file=sys.stderr)
        return
    print(colored("Command output:", "green", attrs=["bold"]))
    sys.stdout.write(result.stdout.decode(errors="replace"))
    sys.stdout.flush()
    sys.stderr.write(result.stderr.decode(errors="replace"))
    sys.stderr.flush()


def fetch_command(
    config: Config,
    cache: dict[str, str],
    cache_path: Path,
    prompt: str,
    read: Reader | None = None,
) -> str | None:
    """Ask the model for a command, offer to run it and cache it.

    Returns the command, or None if none was generated.
    """
    read = _reader(read)
    try:
        command = config.model.get_command(prompt, config.max_tokens)
    except ModelError as exc:
        print(colored(f"Error: {exc}", "red"), file=sys.stderr)
        return None
    if command is None:
        print(colored("No command could be generated.", "yellow"))
        return None

    print(colored(command, "cyan", attrs=["bold"]))
    print(colored("Do you want to execute this command? (y/n)", "yellow"), flush=True)
    if _confirmed(read):
        execute_command(command)
    else:
        print(colored("Command execution cancelled.", "yellow"))

    cache[prompt] = command
    save_cache(cache_path, cache)
    return command


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llm-term",
        description="Generate terminal commands using OpenAI or local Ollama models",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 1.0")
    parser.add_argument("prompt", nargs="?", help="The prompt describing the desired command")
    parser.add_argument(
        "-c", "--config", action="store_true", help="Run configuration setup"
    )
    parser.add_argument(
        "--disable-cache",
        action="store_true",
        help="Disable cache and always query the LLM",
    )
    return parser


def _run_cached(
    config: Config, cache: dict[str, str], cache_path: Path, prompt: str, read: Reader
) -> None:
    cached = cache[prompt]
    print(colored("This command exists in cache", "yellow"))
    print(colored(cached, "cyan", attrs=["bold"]))
    print(colored("Do you want to execute this command? (y/n)", "yellow"), flush=True)
    if _confirmed(read):
        execute_command(cached)
        return
    print(colored("Do you want to invalidate the cache? (y/n)", "yellow"), flush=True)
    if _confirmed(read):
        del cache[prompt]
        save_cache(cache_path, cache)
        fetch_command(config, cache, cache_path, prompt, read)
    else:
        print(colored("Command execution cancelled.", "yellow"))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    read = _reader(None)
    config_path = default_config_path()
    try:
        if args.config:
            save_config(config_path, ask_config(read))
            print(colored("Configuration saved successfully.", "green"))
            return 0

        config = load_or_create_config(config_path, read)
        cache_path = default_cache_path()
        cache = load_cache(cache_path)

        if args.prompt is None:
            print(
                colored(
                    "Please provide a prompt or use --config to set up the configuration.",
                    "yellow",
                )
            )
        elif not args.disable_cache and args.prompt in cache:
            _run_cached(config, cache, cache_path, args.prompt, read)
        else:
            fetch_command(config, cache, cache_path, args.prompt, read)
    except (OSError, ValueError, EOFError) as exc:
        print(colored(f"Error: {exc}", "red"), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())