#!/usr/bin/env python3
# forge/interface/__init__.py
from __future__ import annotations

"""
Package for the command-line front door.

Provides:
- Parser utilities for segmenting a command line.
- The runner that dispatches one command and surfaces its failures.
- Dynamic command loader for command packages.
"""


# Parser utilities
from .parser import tokenize, split_help_flag, HELP_FLAGS

# Loader
from .loader import load_commands

# Runner
from .handler import handle, handle_line

__all__ = [
    # parser
    "tokenize",
    "split_help_flag",
    "HELP_FLAGS",
    # loader
    "load_commands",
    # handler
    "handle",
    "handle_line",
]
