"""Pytest configuration and fixtures for forge tests."""

import io
import logging

import pytest

from forge.commands import BaseCommand, Commands
from forge.ui import Console


class RecordingOutput:
    """Output capability that records lines instead of printing them."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.colors: list[str | None] = []
        self.colored: list[tuple[str, str]] = []

    def write(self, text: str = "", foreground: str | None = None, background: str | None = None) -> None:
        self.lines.append(text)
        self.colors.append(foreground)

    def new_line(self, count: int = 1) -> None:
        for _ in range(count):
            self.write("")

    def color(self, text: str, foreground: str, background: str | None = None, underline: bool = False) -> str:
        self.colored.append((text, foreground))
        return text


class FakeDispatcher:
    """Dispatcher that records every run() call."""

    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, list[str]]] = []
        self.result = result
        self.error = error

    def run(self, command: str, params: list[str]):
        self.calls.append((command, params))
        if self.error is not None:
            raise self.error
        return self.result


def translate(key: str, *args) -> str:
    """Deterministic translator: the key itself, with args appended."""
    return key if not args else f"{key}({', '.join(map(str, args))})"


class MakeModel(BaseCommand):
    group = "Generators"
    name = "make:model"
    description = "Creates a new model file."
    arguments = {"name": "Model class name"}
    options = {"-n": "Set root namespace", "--force": "Overwrite existing files"}

    def execute(self, params):
        return ("make:model", params)


class Greet(BaseCommand):
    group = "Demo"
    name = "greet"
    description = "Says hello."

    def execute(self, params):
        self.output.write("hello " + " ".join(params))
        return "greeted"


class Chain(BaseCommand):
    group = "Demo"
    name = "chain"

    def execute(self, params):
        return self.call("greet", params)


class Explode(BaseCommand):
    group = "Demo"
    name = "explode"

    def execute(self, params):
        raise RuntimeError("boom")


@pytest.fixture
def logger():
    return logging.getLogger("forge_tests")


@pytest.fixture
def output():
    return RecordingOutput()


@pytest.fixture
def dispatcher():
    return FakeDispatcher()


@pytest.fixture
def make_command(logger, dispatcher, output):
    """Build a command instance wired to the recording fakes."""

    def _make(command_class, **kwargs):
        kwargs.setdefault("output", output)
        kwargs.setdefault("translate", translate)
        return command_class(logger, kwargs.pop("commands", dispatcher), **kwargs)

    return _make


@pytest.fixture
def commands(logger, output):
    """Real dispatcher with the demo commands registered."""
    registry = Commands(logger, output=output, translate=translate)
    for command_class in (MakeModel, Greet, Chain, Explode):
        registry.register(command_class)
    return registry


@pytest.fixture
def console():
    """Console writing to in-memory streams with colors off."""
    return Console(io.StringIO(), io.StringIO(), use_color=False)
