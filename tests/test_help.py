"""Tests for help screen rendering and column padding."""

import pytest

from forge.commands import BaseCommand

from conftest import MakeModel


def _command(**attrs):
    """Build a throwaway command class with the given metadata."""
    attrs.setdefault("name", "demo")
    attrs["execute"] = lambda self, params: None
    return type("Demo", (BaseCommand,), attrs)


class TestSetPad:
    """Test the padding helper."""

    @pytest.mark.parametrize(
        ("item", "width", "extra", "indent"),
        [("name", 4, 2, 2), ("", 0, 0, 0), ("abc", 10, 2, 4), ("longer-than-width", 3, 2, 2)],
    )
    def test_length_and_prefix(self, item, width, extra, indent):
        """Result is at least width + extra + indent and starts with indent then item."""
        padded = BaseCommand.set_pad(item, width, extra, indent)

        assert len(padded) >= width + extra + indent
        assert padded.startswith(" " * indent + item)
        assert padded[indent:].startswith(item)
        assert padded.strip() == item.strip()

    def test_pads_to_column(self):
        assert BaseCommand.set_pad("name", 4, 2, 2) == "  name  "

    def test_never_truncates(self):
        assert BaseCommand.set_pad("verylongitem", 3, 0, 0) == "verylongitem"

    def test_default_extra_and_indent(self):
        assert BaseCommand.set_pad("ab", 4) == "ab    "

    def test_indent_only(self):
        assert BaseCommand.set_pad("usage line", 0, 0, 2) == "  usage line"


class TestGetPad:
    """Test column width computation."""

    def test_longest_key(self):
        assert BaseCommand.get_pad({"abc": "", "abcdefg": "", "ab": ""}, 0) == 7

    def test_adds_pad(self):
        assert BaseCommand.get_pad({"abc": ""}, 2) == 5

    def test_empty_mapping(self):
        assert BaseCommand.get_pad({}, 3) == 3

    def test_empty_key(self):
        assert BaseCommand.get_pad({"": "nameless"}, 0) == 0


class TestShowHelp:
    """Test the help screen blocks."""

    def test_make_model_scenario(self, make_command, output):
        """Usage and arguments blocks, aligned row, no options block."""
        command_class = _command(name="make:model", arguments={"name": "Model class name"})

        make_command(command_class).show_help()

        assert output.lines == [
            "CLI.helpUsage",
            "  make:model [arguments]",
            "",
            "CLI.helpArguments",
            "  name  Model class name",
        ]
        assert output.colors[0] == "yellow"
        assert output.colors[3] == "yellow"
        assert output.colored == [("  name  ", "green")]

    def test_usage_only(self, make_command, output):
        """No description, arguments or options: exactly one block."""
        make_command(_command(name="bare")).show_help()

        assert output.lines == ["CLI.helpUsage", "  bare"]

    def test_explicit_usage_wins(self, make_command, output):
        command_class = _command(
            name="make:model",
            usage="make:model <name> [options]",
            arguments={"name": "Model class name"},
        )

        make_command(command_class).show_help()

        assert output.lines[1] == "  make:model <name> [options]"

    def test_name_without_arguments_has_no_suffix(self, make_command, output):
        make_command(_command(name="cache:clear", options={"--all": "Everything"})).show_help()

        assert output.lines[1] == "  cache:clear"

    def test_all_blocks_in_order(self, make_command, output):
        make_command(MakeModel).show_help()

        assert output.lines == [
            "CLI.helpUsage",
            "  make:model [arguments]",
            "",
            "CLI.helpDescription",
            "  Creates a new model file.",
            "",
            "CLI.helpArguments",
            "  name  Model class name",
            "",
            "CLI.helpOptions",
            "  -n       Set root namespace",
            "  --force  Overwrite existing files",
        ]

    def test_rows_align_descriptions(self, make_command, output):
        """Keys of lengths 3, 7 and 2 put every description at the same offset."""
        options = {"abc": "first", "abcdefg": "second", "ab": "third"}
        make_command(_command(options=options)).show_help()

        rows = output.lines[-3:]
        offsets = {row.index(description) for row, description in zip(rows, options.values())}
        assert offsets == {2 + 7 + 2}

    def test_options_keep_insertion_order(self, make_command, output):
        options = {"--zeta": "z", "--alpha": "a", "--mid": "m"}
        make_command(_command(options=options)).show_help()

        assert [row.split()[0] for row in output.lines[-3:]] == ["--zeta", "--alpha", "--mid"]

    def test_empty_key_renders(self, make_command, output):
        make_command(_command(arguments={"": "nameless"})).show_help()

        assert output.lines[-1] == "    nameless"

    def test_help_does_not_mutate_metadata(self, make_command):
        command = make_command(MakeModel)
        before = (dict(command.metadata.options), dict(command.metadata.arguments))

        command.show_help()

        assert (command.metadata.options, command.metadata.arguments) == before

    def test_fields_assigned_after_init_are_rendered(self, make_command, output):
        class Configured(BaseCommand):
            name = "after"

            def __init__(self, *args, **kwargs):
                super().__init__(*args, **kwargs)
                self.description = "Set at construction."
                self.arguments = {"path": "Target path"}

            def execute(self, params):
                return None

        make_command(Configured).show_help()

        assert output.lines == [
            "CLI.helpUsage",
            "  after [arguments]",
            "",
            "CLI.helpDescription",
            "  Set at construction.",
            "",
            "CLI.helpArguments",
            "  path  Target path",
        ]

    def test_fields_assigned_before_init_are_rendered(self, make_command, output):
        class Early(BaseCommand):
            def __init__(self, *args, **kwargs):
                self.name = "before"
                super().__init__(*args, **kwargs)

            def execute(self, params):
                return None

        make_command(Early).show_help()

        assert output.lines == ["CLI.helpUsage", "  before"]


class TestShowHelpOnConsole:
    """Test help rendering through the real console."""

    def test_plain_console_output(self, logger, dispatcher, console):
        command = MakeModel(logger, dispatcher, output=console)

        command.show_help()

        text = console.stdout.getvalue()
        assert text.startswith("Usage:\n  make:model [arguments]\n\nDescription:\n")
        assert "  --force  Overwrite existing files\n" in text

    def test_colored_console_output(self, logger, dispatcher, console):
        console.use_color = True
        command = MakeModel(logger, dispatcher, output=console)

        command.show_help()

        text = console.stdout.getvalue()
        assert "\x1b[33mUsage:\x1b[0m" in text
        assert "\x1b[32m  name  \x1b[0mModel class name" in text
