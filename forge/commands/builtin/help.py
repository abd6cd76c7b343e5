#!/usr/bin/env python3
# forge/commands/builtin/help.py
from __future__ import annotations

from forge.commands import BaseCommand


class Help(BaseCommand):
    """Show the help screen of another command."""

    group = "forge"
    name = "help"
    description = "Displays basic usage information."
    usage = "help command_name"
    arguments = {
        "command_name": 'The command name [default: "help"]',
    }

    def execute(self, params: list[str]) -> None:
        command = params[0] if params else "help"

        if not self.commands.verify_command(command):
            return

        self.commands.make(command).show_help()
