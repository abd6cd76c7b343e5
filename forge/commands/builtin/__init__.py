#!/usr/bin/env python3
# forge/commands/builtin/__init__.py
from __future__ import annotations

"""Commands that ship with forge: help and list."""
