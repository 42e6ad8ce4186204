from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from backlight_ctl.errors import (
    DeviceDecodeError,
    DeviceOpenError,
    DevicePermissionError,
    DeviceReadError,
    DeviceValueError,
    DeviceWriteError,
)

log = logging.getLogger(__name__)

U32_MAX = 2**32 - 1

_UINT = re.compile(r"[0-9]+")

PERMISSION_HINT = (
    "run as root, or add a udev rule granting the 'video' group write access, e.g. "
    'ACTION=="add", SUBSYSTEM=="backlight", '
    'RUN+="/bin/chgrp video /sys/class/backlight/%k/brightness", '
    'RUN+="/bin/chmod g+w /sys/class/backlight/%k/brightness"'
)


def read_uint(path: str | Path) -> int:
    p = Path(path)
    try:
        f = p.open("rb")
    except OSError as e:
        raise DeviceOpenError(p, f"cannot open {p}", e.strerror or e) from e

    try:
        with f:
            raw = f.read()
    except OSError as e:
        raise DeviceReadError(p, f"cannot read {p}", e.strerror or e) from e

    try:
        text = raw.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise DeviceDecodeError(p, f"cannot read {p}", e) from e

    if not _UINT.fullmatch(text):
        raise DeviceValueError(
            p, f"unexpected content in {p}", f"not an unsigned integer: {text!r}"
        )
    value = int(text)
    if value > U32_MAX:
        raise DeviceValueError(p, f"unexpected content in {p}", f"{value} is out of range")

    log.debug("read %s = %d", p, value)
    return value


def write_uint(path: str | Path, value: int) -> None:
    if value < 0:
        raise ValueError(f"brightness level must be non-negative: {value}")

    p = Path(path)
    try:
        f = p.open("w", encoding="ascii")
    except PermissionError as e:
        raise DevicePermissionError(
            p, value, f"cannot write {value} to {p}: permission denied", PERMISSION_HINT
        ) from e
    except OSError as e:
        raise DeviceWriteError(p, value, f"cannot open {p} for writing", e.strerror or e) from e

    try:
        with f:
            f.write(str(value))
    except OSError as e:
        raise DeviceWriteError(p, value, f"cannot write {value} to {p}", e.strerror or e) from e

    log.debug("wrote %d to %s", value, p)


@dataclass(frozen=True)
class Backlight:
    sysfs_dir: Path

    @property
    def _brightness(self) -> Path:
        return self.sysfs_dir / "brightness"

    @property
    def _max_brightness(self) -> Path:
        return self.sysfs_dir / "max_brightness"

    def max_brightness(self) -> int:
        return read_uint(self._max_brightness)

    def brightness(self) -> int:
        return read_uint(self._brightness)

    def set_brightness(self, value: int) -> None:
        write_uint(self._brightness, int(value))
