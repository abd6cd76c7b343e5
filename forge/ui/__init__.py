#!/usr/bin/env python3
# forge/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    BACKGROUND_COLORS,
    FOREGROUND_COLORS,
    strip_ansi,
    enable_windows_vt,
    colorize,
    CONSOLE,
    PRINT_MUTEX,
    Console,
    print_line,
    get_terminal_columns,
)
from .static import (
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

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
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
