#!/usr/bin/env python3
# forge/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: Startup pipeline (config, logger, locale, console, commands).
- BootState: Dataclass containing config, logger, console, dispatcher and command count.
"""


from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState"]
