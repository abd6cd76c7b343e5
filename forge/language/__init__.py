#!/usr/bin/env python3
# forge/language/__init__.py
from __future__ import annotations

"""
Message lookup for user-facing text.

Keys are written as `File.line`, for example `CLI.helpUsage`. Each locale is a
module in this package (`en.py`, ...) holding one dict per message file.

Lookup rules:
- Unknown locales fall back to the default locale, then to `en`.
- Unknown keys return the key itself so a missing message is visible but harmless.
- Positional placeholders `{0}`, `{1}` are filled from the extra arguments.
"""

import importlib
from functools import lru_cache
from types import ModuleType
from typing import Any

FALLBACK_LOCALE = "en"

_current_locale = FALLBACK_LOCALE


@lru_cache(maxsize=None)
def _load_locale(locale: str) -> ModuleType | None:
    if not locale.isidentifier():
        return None
    try:
        return importlib.import_module(f"{__name__}.{locale}")
    except ModuleNotFoundError:
        return None


def _lookup(locale: str, file: str, line: str) -> str | None:
    module = _load_locale(locale)
    if module is None:
        return None
    messages = getattr(module, file, None)
    if not isinstance(messages, dict):
        return None
    value = messages.get(line)
    return value if isinstance(value, str) else None


def set_locale(locale: str) -> None:
    """Change the process default locale used by `lang`."""
    global _current_locale
    _current_locale = locale


def get_locale() -> str:
    return _current_locale


def lang(key: str, *args: Any, locale: str | None = None) -> str:
    """Return the localized message for `key`, formatted with `args`."""
    file, sep, line = key.partition(".")
    if not sep or not line:
        return key

    message = None
    for candidate in dict.fromkeys((locale or _current_locale, _current_locale, FALLBACK_LOCALE)):
        message = _lookup(candidate, file, line)
        if message is not None:
            break

    if message is None:
        return key
    if args:
        try:
            return message.format(*args)
        except (IndexError, KeyError):
            return message
    return message


__all__ = ["FALLBACK_LOCALE", "lang", "set_locale", "get_locale"]
