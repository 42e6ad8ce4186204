from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from backlight_ctl.errors import InvalidMagnitudeError, MagnitudeOutOfRangeError

MAX_MAGNITUDE = 100

_DIGITS = re.compile(r"[0-9]+")


class SetMode(enum.Enum):
    ABSOLUTE = "absolute"
    RELATIVE_UP = "up"
    RELATIVE_DOWN = "down"


_PREFIX = {SetMode.ABSOLUTE: "", SetMode.RELATIVE_UP: "+", SetMode.RELATIVE_DOWN: "-"}


@dataclass(frozen=True)
class Get:
    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class Set:
    magnitude: int
    mode: SetMode = SetMode.ABSOLUTE

    def __post_init__(self) -> None:
        if not 0 <= self.magnitude <= MAX_MAGNITUDE:
            raise ValueError(f"magnitude must be within 0..{MAX_MAGNITUDE}: {self.magnitude}")

    def __str__(self) -> str:
        return f"{_PREFIX[self.mode]}{self.magnitude}%"


Action = Get | Set


def parse(text: str) -> Action:
    """Parse an action string.

    Grammar: ``[+|-]N[%]`` with ``N`` an integer in 0..100, or the empty
    string for a plain read. A leading ``+``/``-`` makes the change relative.
    """

    if not text:
        return Get()

    if text[0] == "+":
        mode, rest = SetMode.RELATIVE_UP, text[1:]
    elif text[0] == "-":
        mode, rest = SetMode.RELATIVE_DOWN, text[1:]
    else:
        mode, rest = SetMode.ABSOLUTE, text

    if rest.endswith("%"):
        rest = rest[:-1]

    if not _DIGITS.fullmatch(rest):
        raise InvalidMagnitudeError(text, f"invalid brightness value '{text}'", "not an integer")

    magnitude = int(rest)
    if magnitude > MAX_MAGNITUDE:
        raise MagnitudeOutOfRangeError(
            text, f"invalid brightness value '{text}'", f"{magnitude} is above {MAX_MAGNITUDE}"
        )
    return Set(magnitude, mode)
