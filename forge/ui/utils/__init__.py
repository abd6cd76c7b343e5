#!/usr/bin/env python3
# forge/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
    ANSI,
    BACKGROUND_COLORS,
    FOREGROUND_COLORS,
    strip_ansi,
    enable_windows_vt,
    colorize,
)
from .console import CONSOLE, PRINT_MUTEX, Console, print_line, get_terminal_columns

__all__ = [
    "ANSI",
    "BACKGROUND_COLORS",
    "FOREGROUND_COLORS",
    "strip_ansi",
    "enable_windows_vt",
    "colorize",
    "CONSOLE",
    "PRINT_MUTEX",
    "Console",
    "print_line",
    "get_terminal_columns",
]
