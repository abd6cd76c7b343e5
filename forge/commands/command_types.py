#!/usr/bin/env python3
# forge/commands/command_types.py
from __future__ import annotations

"""
Command contract and the capabilities it is wired with.

This module defines:
- Dispatcher / Output / Translator / ErrorView: the protocols a command consumes.
- CommandMetadata: the descriptive fields of one command instance.
- BaseCommand: the abstract base every concrete command extends, including
  command-to-command calls, error display and help rendering.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Mapping, Protocol, Sequence

from forge.language import lang
from forge.ui import CONSOLE
from forge.views import render_exception


class Dispatcher(Protocol):
    """Anything that can resolve a command name and run it."""

    def run(self, command: str, params: list[str]) -> Any:  # pragma: no cover - signature only
        ...


class Output(Protocol):
    """Line-oriented terminal writer."""

    def write(self, text: str = "", foreground: str | None = None,
              background: str | None = None) -> None:  # pragma: no cover - signature only
        ...

    def new_line(self, count: int = 1) -> None:  # pragma: no cover - signature only
        ...

    def color(self, text: str, foreground: str | None, background: str | None = None,
              underline: bool = False) -> str:  # pragma: no cover - signature only
        ...


class Translator(Protocol):
    def __call__(self, key: str, *args: Any) -> str:  # pragma: no cover - signature only
        ...


class ErrorView(Protocol):
    def __call__(self, exception: BaseException, message: str) -> None:  # pragma: no cover - signature only
        ...


@dataclass(slots=True)
class CommandMetadata:
    """
    Descriptive fields of a command.

    Attributes:
        group: Bucket the command is listed under.
        name: Unique invocation name.
        usage: Full usage line; derived from `name` when empty.
        description: One-paragraph summary.
        options: Flag name -> description, in display order.
        arguments: Positional argument name -> description, in display order.
    """
    group: str | None = None
    name: str | None = None
    usage: str | None = None
    description: str | None = None
    options: dict[str, str] = field(default_factory=dict)
    arguments: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_command(cls, command: Any) -> "CommandMetadata":
        """Snapshot the fields of a command class or instance, copying the mappings."""
        return cls(
            group=getattr(command, "group", None),
            name=getattr(command, "name", None),
            usage=getattr(command, "usage", None),
            description=getattr(command, "description", None),
            options=dict(getattr(command, "options", None) or {}),
            arguments=dict(getattr(command, "arguments", None) or {}),
        )


METADATA_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(CommandMetadata))
_MAPPING_FIELDS = ("options", "arguments")


class BaseCommand(ABC):
    """
    Base class for every command.

    Concrete commands declare their metadata as class attributes and
    implement `execute`:

        class MakeModel(BaseCommand):
            group = "Generators"
            name = "make:model"
            description = "Creates a new model file."
            arguments = {"name": "Model class name"}

            def execute(self, params):
                ...

    Metadata may also be assigned on the instance, before or after
    `super().__init__()`. The instance attributes are the only store: `get`,
    `has`, `metadata` and `show_help` all read them. Each instance gets its
    own copy of `options` and `arguments`, so commands can adjust them at
    runtime without touching the class.
    """

    group: str | None = None
    name: str | None = None
    usage: str | None = None
    description: str | None = None
    options: Mapping[str, str] = {}
    arguments: Mapping[str, str] = {}

    def __init__(
        self,
        logger: logging.Logger,
        commands: Dispatcher,
        *,
        output: Output | None = None,
        translate: Translator | None = None,
        error_view: ErrorView | None = None,
    ) -> None:
        self.logger = logger
        self.commands = commands
        self.output: Output = output if output is not None else CONSOLE
        self.translate: Translator = translate if translate is not None else lang
        self.error_view: ErrorView = (
            error_view if error_view is not None
            else lambda exc, message: render_exception(
                exc, message, output=self.output, translate=self.translate,  # type: ignore[arg-type]
            )
        )

        # Values assigned before super().__init__() win over the class declarations
        for key in METADATA_FIELDS:
            value = self.__dict__[key] if key in self.__dict__ else getattr(type(self), key, None)
            if key in _MAPPING_FIELDS:
                value = dict(value or {})
            setattr(self, key, value)

        self._accessors: dict[str, Callable[[], Any]] = {
            key: (lambda key=key: getattr(self, key, None)) for key in METADATA_FIELDS
        }

    @property
    def metadata(self) -> CommandMetadata:
        """Snapshot of the current metadata fields."""
        return CommandMetadata.from_command(self)

    # ---------------- Contract ----------------

    @abstractmethod
    def execute(self, params: list[str]) -> Any:
        """Run the command with its positional parameters."""

    def call(self, command: str, params: Sequence[str] | None = None) -> Any:
        """
        Run another command through the dispatcher and return its result.

        The dispatcher expects the command name as the first element of the
        parameter list. Dispatch failures propagate to the caller.
        """
        forwarded = [command, *(params or [])]
        self.logger.debug("Command %s calling %s", self.name, command)
        return self.commands.run(command, forwarded)

    def show_error(self, exception: BaseException) -> None:
        """Render `exception` through the error view instead of raising it."""
        message = str(exception)
        self.error_view(exception, message)

    # ---------------- Metadata access ----------------

    def get(self, key: str) -> Any:
        """Return a metadata field by name, or None when unknown or unset."""
        accessor = self._accessors.get(key)
        return accessor() if accessor is not None else None

    def has(self, key: str) -> bool:
        """True when `key` is a metadata field with a value set."""
        return self.get(key) is not None

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    # ---------------- Help ----------------

    def show_help(self) -> None:
        """Write Usage, Description, Arguments and Options blocks."""
        meta = CommandMetadata.from_command(self)

        self.output.write(self.translate("CLI.helpUsage"), "yellow")
        if meta.usage:
            usage = meta.usage
        else:
            usage = meta.name or ""
            if meta.arguments:
                usage += " [arguments]"
        self.output.write(self.set_pad(usage, 0, 0, 2))

        if meta.description:
            self.output.new_line()
            self.output.write(self.translate("CLI.helpDescription"), "yellow")
            self.output.write(self.set_pad(meta.description, 0, 0, 2))

        if meta.arguments:
            self.output.new_line()
            self.output.write(self.translate("CLI.helpArguments"), "yellow")
            self._write_columns(meta.arguments)

        if meta.options:
            self.output.new_line()
            self.output.write(self.translate("CLI.helpOptions"), "yellow")
            self._write_columns(meta.options)

    def _write_columns(self, rows: Mapping[str, str]) -> None:
        width = self.get_pad(rows, 0)
        for key, description in rows.items():
            self.output.write(self.output.color(self.set_pad(key, width, 2, 2), "green") + description)

    @staticmethod
    def set_pad(item: str, max: int, extra: int = 2, indent: int = 0) -> str:
        """
        Indent `item` and pad it with spaces to at least max + extra + indent.

        Longer items are returned whole.
        """
        return (" " * indent + item).ljust(max + extra + indent)

    @staticmethod
    def get_pad(rows: Mapping[str, Any], pad: int) -> int:
        """Longest key length in `rows` (0 when empty) plus `pad`."""
        return max((len(key) for key in rows), default=0) + pad
