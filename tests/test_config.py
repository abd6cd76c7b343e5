"""Tests for the layered configuration loader."""

from pathlib import Path

import pytest

from forge.config import AppConfig, ConfigError, load_config


def test_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path, environ={})

    assert isinstance(cfg, AppConfig)
    assert cfg.command_packages == ("forge.commands.builtin",)
    assert cfg.default_command == "list"
    assert cfg.locale == "en"
    assert cfg.log_level == "WARNING"
    assert cfg.log_file_path is None
    assert cfg.show_debug_backtrace is False
    assert cfg.enable_color is None


def test_toml_nested_keys_are_flattened(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text(
        'command_packages = ["forge.commands.builtin", "plugins"]\n'
        "[log]\n"
        'level = "debug"\n',
        encoding="utf-8",
    )

    cfg = load_config(tmp_path, environ={})

    assert cfg.command_packages == ("forge.commands.builtin", "plugins")
    assert cfg.log_level == "DEBUG"


def test_env_file_then_environment(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "# comment\nFORGE_LOCALE='fr'\nFORGE_ENABLE_COLOR=no\nUNRELATED=1\n",
        encoding="utf-8",
    )

    cfg = load_config(tmp_path, environ={"FORGE_LOCALE": "de", "HOME": "/tmp"})

    assert cfg.locale == "de"
    assert cfg.enable_color is False
    assert "UNRELATED" not in cfg.extra


def test_comma_separated_packages(tmp_path: Path) -> None:
    cfg = load_config(tmp_path, environ={"FORGE_COMMAND_PACKAGES": "a, b,,c"})

    assert cfg.command_packages == ("a", "b", "c")


def test_extra_keys_preserved(tmp_path: Path) -> None:
    cfg = load_config(tmp_path, environ={"FORGE_APP_NAME": "demo"})

    assert cfg.extra == {"APP_NAME": "demo"}


@pytest.mark.parametrize(
    "environ",
    [
        {"FORGE_LOG_LEVEL": "LOUD"},
        {"FORGE_SHOW_DEBUG_BACKTRACE": "maybe"},
        {"FORGE_COMMAND_PACKAGES": " , "},
        {"FORGE_DEFAULT_COMMAND": ""},
        {"FORGE_LOCALE": "en-US"},
    ],
)
def test_invalid_values_raise(tmp_path: Path, environ) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path, environ=environ)


def test_invalid_toml_raises(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("locale = \n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path, environ={})
