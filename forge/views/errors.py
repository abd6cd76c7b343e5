#!/usr/bin/env python3
# forge/views/errors.py
from __future__ import annotations

"""
Plain-text exception page for the command line.

Layout:

    An uncaught Exception was encountered

    Type:        ValueError
    Message:     bad input
    Filename:    /path/to/module.py
    Line Number: 42

        Backtrace:
            -12 - /path/to/caller.py::execute
            -42 - /path/to/module.py::parse

The backtrace section is only written when SHOW_DEBUG_BACKTRACE (or the
`backtrace` argument) is true.
"""

import traceback
from typing import Callable

from forge.language import lang
from forge.ui import CONSOLE, Console

# Set at boot from AppConfig.show_debug_backtrace
SHOW_DEBUG_BACKTRACE = False

_LABEL_WIDTH = 13


def _label(translate: Callable[..., str], key: str) -> str:
    return translate(f"Errors.{key}").ljust(_LABEL_WIDTH - 1) + " "


def render_exception(
    exception: BaseException,
    message: str,
    *,
    output: Console | None = None,
    backtrace: bool | None = None,
    translate: Callable[..., str] | None = None,
) -> None:
    """Write the exception page for `exception` through `output`."""
    out = output or CONSOLE
    tr = translate or lang
    show_backtrace = SHOW_DEBUG_BACKTRACE if backtrace is None else backtrace

    frames = traceback.extract_tb(exception.__traceback__)
    unknown = tr("Errors.unknown")
    filename = frames[-1].filename if frames else unknown
    line_number = str(frames[-1].lineno) if frames else unknown

    out.write(tr("Errors.uncaughtException"))
    out.new_line()
    out.write(_label(tr, "type") + type(exception).__qualname__)
    out.write(_label(tr, "message") + message)
    out.write(_label(tr, "filename") + filename)
    out.write(_label(tr, "lineNumber") + line_number)

    if show_backtrace and frames:
        out.new_line()
        out.write("    " + tr("Errors.backtrace"))
        for frame in frames:
            out.write(f"        -{frame.lineno} - {frame.filename}::{frame.name}".rstrip())
