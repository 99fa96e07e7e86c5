"""Application settings switches for the receipt editor.

Values come from environment variables first, then from an optional
read-only INI at ``data/app.ini`` (directory overridable with
``POSTAL_DATA_DIR``), then from the defaults below.  The INI may contain::

    [app]
    dev = true
    logo = /logo.svg

    [print]
    enabled = true
    settle_delay_ms = 250
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class AppSettings:
    dev_mode: bool = False
    print_enabled: bool = True
    print_delay_ms: int = 250
    logo_src: str = "/logo.svg"


def _read_ini(data_dir: Path) -> configparser.ConfigParser:
    cp = configparser.ConfigParser()
    ini_path = data_dir / "app.ini"
    if ini_path.exists():
        try:
            cp.read(ini_path, encoding="utf-8")
        except configparser.Error as e:
            logger.warning("[settings] ignoring unreadable %s: %s", ini_path, e)
            return configparser.ConfigParser()
    return cp


def _flag(raw: Optional[str], default: bool, name: str) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    logger.warning("[settings] %s=%r is not a boolean; using %s", name, raw, default)
    return default


def _int(raw: Optional[str], default: int, name: str) -> int:
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("[settings] %s=%r is not an integer; using %s", name, raw, default)
        return default
    if value < 0:
        logger.warning("[settings] %s=%r is negative; using %s", name, raw, default)
        return default
    return value


def load_settings(
    environ: Mapping[str, str] | None = None,
    data_dir: Path | None = None,
) -> AppSettings:
    env = os.environ if environ is None else environ
    if data_dir is None:
        data_dir = Path(env.get("POSTAL_DATA_DIR", "data"))
    cp = _read_ini(data_dir)

    def pick(env_key: str, section: str, option: str) -> Optional[str]:
        if env_key in env:
            return env[env_key]
        return cp.get(section, option, fallback=None)

    defaults = AppSettings()
    return AppSettings(
        dev_mode=_flag(pick("POSTAL_DEV", "app", "dev"), defaults.dev_mode, "dev"),
        print_enabled=_flag(
            pick("POSTAL_PRINT_ENABLED", "print", "enabled"), defaults.print_enabled, "print.enabled"
        ),
        print_delay_ms=_int(
            pick("POSTAL_PRINT_DELAY_MS", "print", "settle_delay_ms"),
            defaults.print_delay_ms,
            "print.settle_delay_ms",
        ),
        logo_src=pick("POSTAL_LOGO_SRC", "app", "logo") or defaults.logo_src,
    )


__all__ = ["AppSettings", "load_settings"]
