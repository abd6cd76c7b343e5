#!/usr/bin/env python3
# forge/interface/handler.py
from __future__ import annotations

"""
Top-level command runner.

Turns a list of command-line segments into one dispatch:
  forge                    -> runs the default command (list)
  forge make:model User    -> Commands.run("make:model", ["make:model", "User"])
  forge make:model --help  -> shows the help screen of make:model

This is the only place that catches command failures: unknown names are
reported with suggestions, anything else is logged and rendered with the
exception view.
"""

from typing import Any, Sequence

from forge.commands import Commands, CommandNotFoundError
from forge.interface.parser import split_help_flag, tokenize
from forge.views import render_exception


def handle(argv: Sequence[str], commands: Commands, *, default_command: str = "list") -> Any:
    """Run the command named by `argv[0]` (or `default_command`)."""
    params, wants_help = split_help_flag(argv)
    command_name = params[0] if params else default_command
    segments = params if params else [command_name]

    try:
        if wants_help:
            commands.make(command_name).show_help()
            return None
        return commands.run(command_name, segments)
    except CommandNotFoundError as exc:
        commands.logger.debug("Unknown command %s", exc.name)
        commands.report_not_found(exc)
        return None
    except Exception as exc:
        commands.logger.error("%s failed: %s: %s", command_name, type(exc).__name__, exc)
        view = commands.error_view
        if view is not None:
            view(exc, str(exc))
        else:
            render_exception(exc, str(exc), output=commands.output, translate=commands.translate)  # type: ignore[arg-type]
        return None


def handle_line(input_line: str, commands: Commands, *, default_command: str = "list") -> Any:
    """Tokenize a raw line and run it through `handle`."""
    return handle(tokenize(input_line), commands, default_command=default_command)
