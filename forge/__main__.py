#!/usr/bin/env python3
# forge/__main__.py
from __future__ import annotations

import sys
from typing import Sequence

from forge.boot import boot_sequence
from forge.interface import handle


def main(argv: Sequence[str] | None = None) -> None:
    """Console entry point: boot, then run one command."""
    state = boot_sequence()
    args = list(sys.argv[1:] if argv is None else argv)
    handle(args, state.commands, default_command=state.config.default_command)


if __name__ == "__main__":
    main()
