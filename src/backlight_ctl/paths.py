from __future__ import annotations

import os
from pathlib import Path

DEFAULT_SYSFS_DIR = Path("/sys/class/backlight/intel_backlight")


def default_config_path(app_name: str = "backlight-ctl") -> Path:
    """Return the per-user config file location.

    Uses XDG_CONFIG_HOME when available, else ~/.config. The file is
    optional; callers check for its existence.
    """

    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        root = Path(base)
    else:
        root = Path.home() / ".config"
    return root / app_name / "config.yaml"
