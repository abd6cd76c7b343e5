#!/usr/bin/env python3
# forge/interface/parser.py
from __future__ import annotations

"""
Command line segmentation helpers.

Responsibilities:
- Tokenize a raw command line into shell-like tokens.
- Detect and remove the help flag so the runner can show help instead of executing.

Everything else in the segment list is handed to the command untouched.
"""

import shlex
from typing import Sequence

HELP_FLAGS = frozenset({"--help", "-h"})


def tokenize(command_line: str) -> list[str]:
    """Split a raw command line into tokens using POSIX rules."""
    return shlex.split(command_line, posix=True)


def split_help_flag(params: Sequence[str]) -> tuple[list[str], bool]:
    """Return (params without help flags, whether a help flag was present)."""
    remaining = [p for p in params if p not in HELP_FLAGS]
    return remaining, len(remaining) != len(params)
