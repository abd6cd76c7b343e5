#!/usr/bin/env python3
# forge/__init__.py
from __future__ import annotations
"""
forge: a small framework for building command-line commands.

Write a command by subclassing `BaseCommand`, declare its metadata as class
attributes, and implement `execute`. Commands are discovered from the
packages listed in COMMAND_PACKAGES and run by name.
"""

__version__ = "0.1.0"

from forge.commands import BaseCommand, Commands, CommandNotFoundError  # noqa: E402

__all__ = ["BaseCommand", "Commands", "CommandNotFoundError", "__version__"]
