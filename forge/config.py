#!/usr/bin/env python3
# forge/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: .env (FORGE_ keys), config.toml (bare or nested keys)
  3) Environment variables prefixed with FORGE_ (e.g. FORGE_LOCALE=fr)

Validation:
  - COMMAND_PACKAGES: comma separated list (or TOML array) of importable packages
  - DEFAULT_COMMAND: non-empty command name run when none is given
  - LOCALE: identifier-like locale name
  - LOG_LEVEL: one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - LOG_FILE_PATH: None or normalized path
  - SHOW_DEBUG_BACKTRACE: bool
  - ENABLE_COLOR: 'auto' or bool
"""

from dataclasses import dataclass, field
from typing import Any, Mapping
from pathlib import Path
import os
import re
import tomllib

ENV_PREFIX = "FORGE_"

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "COMMAND_PACKAGES": "forge.commands.builtin",
    "DEFAULT_COMMAND": "list",
    "LOCALE": "en",
    "LOG_LEVEL": "WARNING",
    "LOG_FILE_PATH": None,
    "SHOW_DEBUG_BACKTRACE": False,
    "ENABLE_COLOR": "auto",
}


class ConfigError(ValueError):
    """Raised when a configuration value fails validation."""


# ---------- data model ----------

@dataclass(frozen=True)
class AppConfig:
    command_packages: tuple[str, ...]
    default_command: str
    locale: str
    log_level: str
    log_file_path: Path | None
    show_debug_backtrace: bool
    enable_color: bool | None  # None means auto-detect

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders (stdlib) ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if (v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"')):
            v = v[1:-1]
        out[k] = v
    return out


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'log': {'level': 'DEBUG'}} -> {'LOG_LEVEL': 'DEBUG'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _strip_prefix(d: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only FORGE_-prefixed keys, without the prefix."""
    return {
        k[len(ENV_PREFIX):]: v
        for k, v in d.items()
        if k.startswith(ENV_PREFIX) and len(k) > len(ENV_PREFIX)
    }


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ConfigError(f"Expected boolean, got: {val!r}")


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_str_list(val: Any) -> tuple[str, ...]:
    if isinstance(val, (list, tuple)):
        items = [str(v).strip() for v in val]
    else:
        items = [part.strip() for part in str(val or "").split(",")]
    return tuple(item for item in items if item)


def _as_log_level(val: Any) -> str:
    up = (_as_opt_str(val) or "WARNING").upper()
    if up not in _LOG_LEVELS:
        raise ConfigError(
            f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {val!r}")
    return up


def _as_color(val: Any) -> bool | None:
    if val is None or str(val).strip().lower() == "auto":
        return None
    return _as_bool(val)


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    return Path(os.path.expandvars(os.path.expanduser(v))).resolve()


# ---------- merge & load ----------

def _merge_sources(cwd: Path | None = None, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    base = cwd or Path.cwd()
    merged: dict[str, Any] = dict(DEFAULTS)

    # .env shares the FORGE_ prefix with the environment; config.toml does not
    merged.update(_strip_prefix(_normalize_keys(_load_env_file(base / ".env"))))
    merged.update(_flatten_mapping(_load_toml_file(base / "config.toml")))

    # Environment variables override all
    merged.update(_strip_prefix(_normalize_keys(os.environ if environ is None else environ)))
    return merged


def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


# ---------- validation ----------

def _validate_and_build(config: dict[str, Any]) -> AppConfig:
    command_packages = _as_str_list(config.get("COMMAND_PACKAGES", DEFAULTS["COMMAND_PACKAGES"]))
    if not command_packages:
        raise ConfigError("COMMAND_PACKAGES must name at least one package")

    default_command = (_as_opt_str(config.get("DEFAULT_COMMAND")) or "").strip()
    if not default_command:
        raise ConfigError("DEFAULT_COMMAND must not be empty")

    locale = (_as_opt_str(config.get("LOCALE")) or DEFAULTS["LOCALE"]).strip()
    if not locale.isidentifier():
        raise ConfigError(f"LOCALE must be a simple name like 'en', got {locale!r}")

    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return AppConfig(
        command_packages=command_packages,
        default_command=default_command,
        locale=locale,
        log_level=_as_log_level(config.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"])),
        log_file_path=_as_opt_path(config.get("LOG_FILE_PATH")),
        show_debug_backtrace=_as_bool(
            config.get("SHOW_DEBUG_BACKTRACE", DEFAULTS["SHOW_DEBUG_BACKTRACE"])),
        enable_color=_as_color(config.get("ENABLE_COLOR", DEFAULTS["ENABLE_COLOR"])),
        extra=extra,
    )


# ---------- public API ----------

def load_config(cwd: Path | None = None, environ: Mapping[str, str] | None = None) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects.
    """
    return _validate_and_build(_merge_sources(cwd, environ))
