from __future__ import annotations

from pathlib import Path

import pytest

from backlight_ctl.errors import (
    DeviceDecodeError,
    DeviceOpenError,
    DevicePermissionError,
    DeviceReadError,
    DeviceValueError,
    DeviceWriteError,
)
from backlight_ctl.system.backlight import Backlight, read_uint, write_uint


def test_read_uint_trims_whitespace(tmp_path: Path) -> None:
    p = tmp_path / "brightness"
    p.write_text("  4321\n", encoding="utf-8")
    assert read_uint(p) == 4321


def test_read_uint_missing_file(tmp_path: Path) -> None:
    p = tmp_path / "missing"
    with pytest.raises(DeviceOpenError) as exc:
        read_uint(p)
    assert exc.value.path == p
    assert str(p) in str(exc.value)
    assert exc.value.cause


def test_read_uint_directory(tmp_path: Path) -> None:
    with pytest.raises(DeviceReadError):
        read_uint(tmp_path)


@pytest.mark.parametrize("content", ["", "abc", "-5", "1.5", "+5", "4294967296"])
def test_read_uint_rejects_non_numeric(tmp_path: Path, content: str) -> None:
    p = tmp_path / "max_brightness"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(DeviceValueError):
        read_uint(p)


def test_read_uint_rejects_non_utf8(tmp_path: Path) -> None:
    p = tmp_path / "brightness"
    p.write_bytes(b"\xff\xfe12")
    with pytest.raises(DeviceDecodeError):
        read_uint(p)


def test_write_uint_truncates_without_newline(tmp_path: Path) -> None:
    p = tmp_path / "brightness"
    p.write_text("123456\n", encoding="utf-8")
    write_uint(p, 42)
    assert p.read_text(encoding="utf-8") == "42"


def test_write_uint_rejects_negative(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        write_uint(tmp_path / "brightness", -1)


def test_write_uint_permission_denied(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def deny(self: Path, *_args: object, **_kw: object) -> None:
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "open", deny)
    p = tmp_path / "brightness"
    with pytest.raises(DevicePermissionError) as exc:
        write_uint(p, 10)
    assert exc.value.path == p
    assert exc.value.value == 10
    assert "permission denied" in str(exc.value)
    assert "udev" in str(exc.value)


def test_write_uint_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(DeviceWriteError) as exc:
        write_uint(tmp_path / "nope" / "brightness", 10)
    assert not isinstance(exc.value, DevicePermissionError)


def test_backlight_reads_and_writes_sysfs(tmp_path: Path) -> None:
    (tmp_path / "max_brightness").write_text("800\n", encoding="utf-8")
    (tmp_path / "brightness").write_text("300\n", encoding="utf-8")

    bl = Backlight(tmp_path)
    assert bl.max_brightness() == 800
    assert bl.brightness() == 300

    bl.set_brightness(123)
    assert (tmp_path / "brightness").read_text(encoding="utf-8") == "123"
    assert bl.brightness() == 123
