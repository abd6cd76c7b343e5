#!/usr/bin/env python3
# forge/commands/errors.py
from __future__ import annotations

"""Exceptions raised by the command dispatcher."""


class CommandError(Exception):
    """Base class for command registry and dispatch failures."""


class CommandNotFoundError(CommandError, LookupError):
    """No command is registered under the requested name."""

    def __init__(self, name: str, suggestions: list[str] | None = None) -> None:
        self.name = name
        self.suggestions = list(suggestions or [])
        super().__init__(f'Command "{name}" not found.')


class DuplicateCommandError(CommandError, ValueError):
    """Two command classes declare the same name."""

    def __init__(self, name: str, existing: type, duplicate: type) -> None:
        self.name = name
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(
            f"Command '{name}' already registered by "
            f"{existing.__module__}.{existing.__qualname__}; "
            f"cannot register {duplicate.__module__}.{duplicate.__qualname__}."
        )
