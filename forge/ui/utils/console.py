#!/usr/bin/env python3
# forge/ui/utils/console.py
from __future__ import annotations

"""
Terminal output primitive used by commands.

`Console` is the capability commands write through: single lines with an
optional color, blank lines, inline color formatting, and prompts. A process
wide instance lives in `CONSOLE`; tests construct their own with StringIO
streams.
"""

import os
import shutil
import sys
import threading
from typing import Sequence, TextIO

from .ansi import colorize, enable_windows_vt, strip_ansi

# Single shared print mutex for all UI output (console and logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=sys.stdout, flush: bool = False) -> None:
    """Thread-safe single-line print."""
    with PRINT_MUTEX:
        file.write(f"{text}\n")
        if flush:
            file.flush()


def get_terminal_columns(default: int = 80) -> int:
    """Return current terminal column width with a sensible default."""
    try:
        return shutil.get_terminal_size((default, 20)).columns
    except Exception:
        return default


def _stream_supports_color(stream: TextIO) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    return enable_windows_vt()


class Console:
    """Line-oriented writer with optional ANSI coloring."""

    def __init__(
        self,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        *,
        use_color: bool | None = None,
    ) -> None:
        self._stdout = stdout
        self._stderr = stderr
        # None means "detect from the stream on first use"
        self._use_color = use_color

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    @property
    def use_color(self) -> bool:
        if self._use_color is None:
            self._use_color = _stream_supports_color(self.stdout)
        return self._use_color

    @use_color.setter
    def use_color(self, value: bool) -> None:
        self._use_color = value

    # ---------------- Writing ----------------

    def write(self, text: str = "", foreground: str | None = None, background: str | None = None) -> None:
        """Write a single line to stdout, colored when a color is given."""
        if foreground is not None or background is not None:
            text = self.color(text, foreground, background)
        print_line(text, file=self.stdout)

    def error(self, text: str, foreground: str = "bright_red", background: str | None = None) -> None:
        """Write a single line to stderr."""
        print_line(self.color(text, foreground, background), file=self.stderr)

    def new_line(self, count: int = 1) -> None:
        for _ in range(count):
            self.write("")

    def color(
        self,
        text: str,
        foreground: str | None,
        background: str | None = None,
        underline: bool = False,
    ) -> str:
        """
        Return `text` wrapped in SGR codes without writing it.

        Color names are validated even when colors are disabled, so a typo
        fails the same way on every terminal.
        """
        styled = colorize(text, foreground, background, underline=underline)
        return styled if self.use_color else strip_ansi(styled)

    # ---------------- Input ----------------

    def prompt(
        self,
        field: str,
        options: Sequence[str] | None = None,
        default: str | None = None,
    ) -> str:
        """
        Ask the user for a line of input.

        With `options`, completion is offered on them and the question is
        repeated until the answer is one of them. An empty answer returns
        `default` when one is set.
        """
        from prompt_toolkit import prompt
        from prompt_toolkit.completion import WordCompleter

        completer = WordCompleter(list(options), sentence=True) if options else None
        suffix = f" [{', '.join(options)}]" if options else ""
        if default is not None:
            suffix += f" ({default})"

        while True:
            answer = prompt(f"{field}{suffix}: ", completer=completer).strip()
            if not answer and default is not None:
                answer = default
            if not options or answer in options:
                return answer
            self.error(f"Please choose one of: {', '.join(options)}")

    def get_width(self, default: int = 80) -> int:
        return get_terminal_columns(default)


# Process-wide console used when no other is injected
CONSOLE = Console()
