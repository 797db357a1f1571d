"""Detection of the user's shell and how to run a command line through it."""

from __future__ import annotations

import os
import sys
from enum import Enum


class Shell(Enum):
    """A command shell the generated commands are meant for."""

    POWERSHELL = "powershell"
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    DASH = "dash"
    KSH = "ksh"
    CSH = "csh"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> Shell:
        """Classify a shell from its name or path, e.g. ``/usr/bin/zsh``."""
        for needle, shell in _NAME_MATCHES:
            if needle in name:
                return shell
        return cls.UNKNOWN

    @classmethod
    def detect(cls) -> Shell:
        """Return the shell of the current user.

        Windows always uses PowerShell; elsewhere ``$SHELL`` decides,
        defaulting to ``sh``.
        """
        if sys.platform == "win32":
            return cls.POWERSHELL
        return cls.from_name(os.environ.get("SHELL", "sh"))

    def invocation(self) -> tuple[str, str]:
        """Return the program and the flag that make it run one command line."""
        return _INVOCATIONS[self]

    def description(self) -> str:
        """Return a human-readable name of the shell, empty when unknown."""
        return _DESCRIPTIONS[self]


_NAME_MATCHES = (
    ("powershell", Shell.POWERSHELL),
    ("bash", Shell.BASH),
    ("zsh", Shell.ZSH),
    ("fish", Shell.FISH),
    ("dash", Shell.DASH),
    ("ksh", Shell.KSH),
    ("csh", Shell.CSH),
    ("sh", Shell.BASH),
)

_INVOCATIONS = {
    Shell.POWERSHELL: ("powershell", "-Command"),
    Shell.BASH: ("sh", "-c"),
    Shell.ZSH: ("zsh", "-c"),
    Shell.FISH: ("fish", "-c"),
    Shell.DASH: ("dash", "-c"),
    Shell.KSH: ("ksh", "-c"),
    Shell.CSH: ("csh", "-c"),
    Shell.UNKNOWN: ("sh", "-c"),
}

_DESCRIPTIONS = {
    Shell.POWERSHELL: "Windows PowerShell",
    Shell.BASH: "Bourne Again Shell (bash / sh)",
    Shell.ZSH: "Z Shell (zsh)",
    Shell.FISH: "Friendly Interactive Shell (fish)",
    Shell.DASH: "Debian Almquist Shell (dash)",
    Shell.KSH: "Korn Shell (ksh)",
    Shell.CSH: "C Shell (csh)",
    Shell.UNKNOWN: "",
}