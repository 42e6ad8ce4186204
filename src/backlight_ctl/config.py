from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from backlight_ctl.paths import DEFAULT_SYSFS_DIR
from backlight_ctl.policy import DEFAULT_PRECISION

MAX_PRECISION = 3

_KEYS = {"device", "report", "warn_on_clamp"}


class ConfigError(ValueError):
    pass


def _require(cfg: dict[str, Any], key: str) -> Any:
    if key not in cfg:
        raise ConfigError(f"Missing required config key: {key}")
    return cfg[key]


def _section(cfg: dict[str, Any], key: str) -> dict[str, Any]:
    if cfg.get(key) is None:
        cfg[key] = {}
    value = cfg[key]
    if not isinstance(value, dict):
        raise ConfigError(f"{key} must be a mapping")
    return value


def defaults() -> dict[str, Any]:
    cfg: dict[str, Any] = {}
    normalize(cfg)
    return cfg


def load(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config {p} ({e.strerror or e})") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    normalize(data)
    validate(data)
    return data


def normalize(cfg: dict[str, Any]) -> None:
    """Fill in defaults in place."""

    device = _section(cfg, "device")
    sysfs_dir = device.get("sysfs_dir")
    if sysfs_dir is None:
        device["sysfs_dir"] = str(DEFAULT_SYSFS_DIR)
    elif isinstance(sysfs_dir, str):
        device["sysfs_dir"] = sysfs_dir.strip()

    report = _section(cfg, "report")
    report.setdefault("precision", DEFAULT_PRECISION)
    report.setdefault("verbose", False)

    cfg.setdefault("warn_on_clamp", True)


def validate(cfg: dict[str, Any]) -> None:
    unknown = sorted(set(cfg) - _KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    device = _require(cfg, "device")
    sysfs_dir = _require(device, "sysfs_dir")
    if not isinstance(sysfs_dir, str) or not sysfs_dir:
        raise ConfigError("device.sysfs_dir must be a non-empty path")

    report = _require(cfg, "report")
    precision = _require(report, "precision")
    if (
        isinstance(precision, bool)
        or not isinstance(precision, int)
        or not 0 <= precision <= MAX_PRECISION
    ):
        raise ConfigError(f"report.precision must be an integer in 0..{MAX_PRECISION}")

    if not isinstance(report.get("verbose", False), bool):
        raise ConfigError("report.verbose must be true or false")

    if not isinstance(cfg.get("warn_on_clamp", True), bool):
        raise ConfigError("warn_on_clamp must be true or false")
