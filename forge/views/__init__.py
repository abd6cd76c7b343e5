#!/usr/bin/env python3
# forge/views/__init__.py
from __future__ import annotations

"""Renderers for text pages shown outside of a command's own output."""

from .errors import render_exception

__all__ = ["render_exception"]
