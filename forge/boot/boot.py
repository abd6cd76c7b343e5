#!/usr/bin/env python3
# forge/boot/boot.py
from __future__ import annotations
"""
Boot sequence for forge.

Each step is logged as a Linux-style [  OK  ] / [FAILED] line at DEBUG level,
so `FORGE_LOG_LEVEL=DEBUG forge` shows where startup time goes and what broke.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import forge.views.errors as error_views
from forge.commands import Commands
from forge.config import AppConfig, load_config
from forge.language import set_locale
from forge.ui import Console, init_logger


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    console: Console
    commands: Commands
    loaded_count: int


def _step(logger: logging.Logger, label: str, fn: Callable[[], Any]) -> Any:
    """Run a boot step with status logging."""
    try:
        out = fn()
    except Exception as exc:
        logger.error("[FAILED] %s (%s: %s)", label, type(exc).__name__, exc)
        raise
    logger.debug("[  OK  ] %s", label)
    return out


def boot_sequence(
    *,
    cwd: Path | None = None,
    console: Console | None = None,
    config: AppConfig | None = None,
) -> BootState:
    """Load config, create the logger, and discover commands."""
    cfg = config or load_config(cwd)

    logger = init_logger(
        "forge",
        level=cfg.log_level,
        logfile=str(cfg.log_file_path) if cfg.log_file_path else None,
    )
    logger.debug("[  OK  ] Load configuration")

    _step(logger, f"Set locale ({cfg.locale})", lambda: set_locale(cfg.locale))

    def _console() -> Console:
        out = console or Console()
        if cfg.enable_color is not None:
            out.use_color = cfg.enable_color
        error_views.SHOW_DEBUG_BACKTRACE = cfg.show_debug_backtrace
        return out

    out = _step(logger, "Prepare console", _console)

    commands = Commands(logger, output=out)
    loaded_count = _step(
        logger,
        f"Discover commands ({', '.join(cfg.command_packages)})",
        lambda: commands.discover(cfg.command_packages),
    )

    return BootState(
        config=cfg,
        logger=logger,
        console=out,
        commands=commands,
        loaded_count=loaded_count,
    )
