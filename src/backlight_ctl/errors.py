from __future__ import annotations

from pathlib import Path


class BacklightError(Exception):
    """Base error: a message plus an optional, already-rendered cause."""

    def __init__(self, message: str, cause: object | None = None):
        super().__init__(message)
        self.message = message
        self.cause = None if cause is None else str(cause)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} ({self.cause})"
        return self.message


class ActionParseError(BacklightError, ValueError):
    def __init__(self, text: str, message: str, cause: object | None = None):
        super().__init__(message, cause)
        self.text = text


class InvalidMagnitudeError(ActionParseError):
    pass


class MagnitudeOutOfRangeError(ActionParseError):
    pass


class DeviceReadError(BacklightError):
    def __init__(self, path: Path, message: str, cause: object | None = None):
        super().__init__(message, cause)
        self.path = path


class DeviceOpenError(DeviceReadError):
    pass


class DeviceDecodeError(DeviceReadError):
    pass


class DeviceValueError(DeviceReadError):
    pass


class DeviceWriteError(BacklightError):
    def __init__(self, path: Path, value: int, message: str, cause: object | None = None):
        super().__init__(message, cause)
        self.path = path
        self.value = value


class DevicePermissionError(DeviceWriteError):
    pass
