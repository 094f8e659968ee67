"""Persistent config loader/saver for Stache."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from ..constants import STACHE_DIR_NAME
from ..theme import DEFAULT_THEME, THEMES

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """User-facing configuration."""

    theme: str = DEFAULT_THEME
    target_dir: str = STACHE_DIR_NAME
    include_directories: bool = False
    dotfiles_only: bool = True


def default_config_path() -> Path:
    """Return default config path (~/.config/stache/config.toml)."""
    return Path.home() / ".config" / "stache" / "config.toml"


def _coerce_bool(value, default=False):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in ("1", "true", "yes", "on"):
            return True
        if lower in ("0", "false", "no", "off"):
            return False
    return default


def _section(raw: dict, name: str) -> dict:
    value = raw.get(name, {})
    return value if isinstance(value, dict) else {}


def _normalize_config(raw: dict) -> AppConfig:
    ui = _section(raw, "ui")
    stache = _section(raw, "stache")

    theme = str(ui.get("theme", DEFAULT_THEME)).strip().lower() or DEFAULT_THEME
    if theme not in THEMES:
        LOGGER.debug("unknown theme %r, using %s", theme, DEFAULT_THEME)
        theme = DEFAULT_THEME

    target_dir = stache.get("target_dir", STACHE_DIR_NAME)
    if not isinstance(target_dir, str) or not target_dir.strip():
        target_dir = STACHE_DIR_NAME

    return AppConfig(
        theme=theme,
        target_dir=target_dir.strip(),
        include_directories=_coerce_bool(stache.get("include_directories"), default=False),
        dotfiles_only=_coerce_bool(stache.get("dotfiles_only"), default=True),
    )


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from TOML file; return defaults when missing/invalid."""
    cfg_path = Path(path) if path is not None else default_config_path()
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError:
        return AppConfig()
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError:
        LOGGER.warning("ignoring invalid config file %s", cfg_path, exc_info=True)
        return AppConfig()
    return _normalize_config(raw)


def _toml_string(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def serialize_config(config: AppConfig) -> str:
    """Serialize AppConfig as TOML text."""
    return (
        "# Stache user configuration\n"
        "[ui]\n"
        f"theme = {_toml_string(config.theme)}\n"
        "\n"
        "[stache]\n"
        f"target_dir = {_toml_string(config.target_dir)}\n"
        f"include_directories = {'true' if config.include_directories else 'false'}\n"
        f"dotfiles_only = {'true' if config.dotfiles_only else 'false'}\n"
    )


def save_config(config: AppConfig, path: str | Path | None = None) -> Path:
    """Persist config and return written path."""
    cfg_path = Path(path) if path is not None else default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(serialize_config(config), encoding="utf-8", newline="\n")
    return cfg_path
