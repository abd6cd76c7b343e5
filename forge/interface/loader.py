#!/usr/bin/env python3
# forge/interface/loader.py
from __future__ import annotations

"""
Dynamic command loader.

Features:
- Imports all modules under the given packages (subpackages included).
- Collects concrete BaseCommand subclasses that declare a name.
- Skips private modules (leading underscore) and logs missing packages.
"""

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Iterable

from forge.commands import BaseCommand

_log = logging.getLogger("forge.loader")


def _command_classes(module: ModuleType) -> list[type[BaseCommand]]:
    """Return command classes defined in `module` itself (not imported into it)."""
    found: list[type[BaseCommand]] = []
    for _, obj in inspect.getmembers(module, inspect.isclass):
        if obj.__module__ != module.__name__:
            continue
        if not issubclass(obj, BaseCommand) or obj is BaseCommand:
            continue
        if inspect.isabstract(obj) or not obj.name:
            continue
        found.append(obj)
    return found


def _walk_package(package: ModuleType) -> Iterable[ModuleType]:
    """Yield every public module below `package`, depth first."""
    package_paths = [str(p) for p in getattr(package, "__path__", [])]
    for modinfo in pkgutil.iter_modules(package_paths):
        if modinfo.name.startswith("_"):
            continue
        module = importlib.import_module(f"{package.__name__}.{modinfo.name}")
        yield module
        if modinfo.ispkg:
            yield from _walk_package(module)


def load_commands(
    packages: Iterable[str],
    *,
    logger: logging.Logger | None = None,
) -> list[type[BaseCommand]]:
    """
    Import all modules under each package and return the command classes.

    A name may also point to a single module. Packages that cannot be
    imported are skipped with a warning; errors raised while importing a
    module inside an existing package propagate.
    """
    log = logger or _log
    found: list[type[BaseCommand]] = []

    for package_name in packages:
        try:
            package = importlib.import_module(package_name)
        except ModuleNotFoundError as exc:
            if exc.name is not None and package_name.startswith(exc.name):
                log.warning("Command package '%s' not found; skipping.", package_name)
                continue
            raise

        modules = [package]
        if hasattr(package, "__path__"):
            modules.extend(_walk_package(package))

        for module in modules:
            for command_class in _command_classes(module):
                if command_class not in found:
                    found.append(command_class)

        log.debug("Loaded %d module(s) from %s", len(modules), package_name)

    return found
