#!/usr/bin/env python3
# forge/commands/builtin/list_commands.py
from __future__ import annotations

from forge.commands import BaseCommand


class ListCommands(BaseCommand):
    """List every registered command, grouped and aligned."""

    group = "forge"
    name = "list"
    description = "Lists the available commands."
    usage = "list"

    def execute(self, params: list[str]) -> None:
        groups = self.commands.groups()
        width = self.get_pad(self.commands.get_commands(), 0)

        self.output.write(self.translate("CLI.listCommands"), "yellow")
        for group, infos in groups.items():
            self.output.new_line()
            self.output.write(group, "yellow")
            for info in infos:
                self.output.write(
                    self.output.color(self.set_pad(info.name, width, 2, 2), "green")
                    + info.description
                )
