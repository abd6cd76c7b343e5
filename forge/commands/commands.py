#!/usr/bin/env python3
# forge/commands/commands.py
from __future__ import annotations

"""
Command registry and dispatcher.

This module provides:
- CommandInfo: what the registry knows about a command class without instantiating it.
- Commands: registers command classes, resolves names, and runs commands.
"""

import difflib
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from forge.commands.command_types import BaseCommand, ErrorView, Output, Translator
from forge.commands.errors import CommandNotFoundError, DuplicateCommandError
from forge.language import lang
from forge.ui import CONSOLE

# Group used for commands that do not declare one
DEFAULT_GROUP = "general"


@dataclass(slots=True, frozen=True)
class CommandInfo:
    """Registry entry for one command class."""
    name: str
    group: str
    description: str
    command_class: type[BaseCommand]

    @property
    def module(self) -> str:
        return self.command_class.__module__


class Commands:
    """Holds all command classes and runs them by name."""

    def __init__(
        self,
        logger: logging.Logger,
        *,
        output: Output | None = None,
        translate: Translator | None = None,
        error_view: ErrorView | None = None,
    ) -> None:
        self.logger = logger
        self.output: Output = output if output is not None else CONSOLE
        self.translate: Translator = translate if translate is not None else lang
        self.error_view = error_view
        # Lower-cased name -> CommandInfo, in registration order
        self._commands: dict[str, CommandInfo] = {}

    # ---------------- Registration ----------------

    def register(self, command_class: type[BaseCommand]) -> CommandInfo:
        """Register a concrete command class under its declared name."""
        if not (inspect.isclass(command_class) and issubclass(command_class, BaseCommand)):
            raise ValueError(f"{command_class!r} is not a BaseCommand subclass.")
        if inspect.isabstract(command_class):
            raise ValueError(
                f"{command_class.__qualname__} is abstract and cannot be registered.")
        if not command_class.name:
            raise ValueError(f"{command_class.__qualname__} does not declare a name.")

        key = command_class.name.lower()
        existing = self._commands.get(key)
        if existing is not None:
            if existing.command_class is command_class:
                return existing
            raise DuplicateCommandError(command_class.name, existing.command_class, command_class)

        info = CommandInfo(
            name=command_class.name,
            group=command_class.group or DEFAULT_GROUP,
            description=command_class.description or "",
            command_class=command_class,
        )
        self._commands[key] = info
        self.logger.debug("Registered command %s (%s)", info.name, info.module)
        return info

    def discover(self, packages: Iterable[str]) -> int:
        """Import the given packages and register every command class found."""
        from forge.interface.loader import load_commands

        found = load_commands(packages, logger=self.logger)
        for command_class in found:
            self.register(command_class)
        return len(found)

    # ---------------- Lookup ----------------

    def get_commands(self) -> dict[str, CommandInfo]:
        """Return name -> CommandInfo for every registered command."""
        return {info.name: info for info in self._commands.values()}

    def get(self, name: str) -> CommandInfo | None:
        return self._commands.get(name.lower())

    def names(self) -> list[str]:
        return [info.name for info in self._commands.values()]

    def groups(self) -> dict[str, list[CommandInfo]]:
        """Group commands by their `group`, each list sorted by name."""
        grouped: dict[str, list[CommandInfo]] = {}
        for info in self._commands.values():
            grouped.setdefault(info.group, []).append(info)
        return {group: sorted(items, key=lambda i: i.name) for group, items in sorted(grouped.items())}

    def suggest(self, name: str) -> list[str]:
        """Return registered names that look like a misspelling of `name`."""
        return difflib.get_close_matches(name, self.names(), n=3, cutoff=0.6)

    def verify_command(self, name: str) -> bool:
        """
        True if `name` is registered. Otherwise writes the not-found message
        and any suggestions through the output and returns False.
        """
        if self.get(name) is not None:
            return True
        self.report_not_found(CommandNotFoundError(name, self.suggest(name)))
        return False

    def report_not_found(self, error: CommandNotFoundError) -> None:
        self.output.write(self.translate("CLI.commandNotFound", error.name), "red")
        if error.suggestions:
            self.output.new_line()
            key = "CLI.altCommandPlural" if len(error.suggestions) > 1 else "CLI.altCommandSingular"
            self.output.write(self.translate(key), "yellow")
            for suggestion in error.suggestions:
                self.output.write("    " + suggestion, "cyan")

    # ---------------- Execution ----------------

    def make(self, name: str) -> BaseCommand:
        """Instantiate the command registered as `name`, wired to this dispatcher."""
        info = self.get(name)
        if info is None:
            raise CommandNotFoundError(name, self.suggest(name))
        return info.command_class(
            self.logger,
            self,
            output=self.output,
            translate=self.translate,
            error_view=self.error_view,
        )

    def run(self, command: str, params: Sequence[str]) -> Any:
        """
        Resolve `command`, instantiate it, and return what `execute` returns.

        `params` are command-line segments: when the first one is the command
        name itself (as `BaseCommand.call` and the runner send them) it is
        dropped before `execute` sees the list.
        """
        instance = self.make(command)
        segments = list(params)
        if segments and segments[0].lower() == command.lower():
            segments = segments[1:]
        self.logger.debug("Running %s with %r", command, segments)
        return instance.execute(segments)
