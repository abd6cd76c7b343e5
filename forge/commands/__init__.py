#!/usr/bin/env python3
# forge/commands/__init__.py
from __future__ import annotations

"""
Package for the command contract and dispatch.

Provides:
- The command contract (`BaseCommand`, `CommandMetadata`) and the capability
  protocols it consumes.
- The registry/dispatcher (`Commands`, `CommandInfo`).
- Dispatch errors (`CommandError`, `CommandNotFoundError`, `DuplicateCommandError`).

Built-in commands live in `forge.commands.builtin` and are discovered at boot.
"""


from .errors import CommandError, CommandNotFoundError, DuplicateCommandError
from .command_types import (
    METADATA_FIELDS,
    BaseCommand,
    CommandMetadata,
    Dispatcher,
    ErrorView,
    Output,
    Translator,
)
from .commands import CommandInfo, Commands

__all__ = [
    "BaseCommand",
    "CommandMetadata",
    "METADATA_FIELDS",
    "Dispatcher",
    "ErrorView",
    "Output",
    "Translator",
    "CommandInfo",
    "Commands",
    "CommandError",
    "CommandNotFoundError",
    "DuplicateCommandError",
]
