from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from backlight_ctl.action import Action, Get, Set, SetMode
from backlight_ctl.errors import BacklightError

DEFAULT_PRECISION = 1


@dataclass(frozen=True)
class Reading:
    level: int
    max_level: int

    @property
    def fraction(self) -> float:
        return self.level / self.max_level

    @property
    def percent(self) -> float:
        return 100.0 * self.fraction

    def format(self, precision: int = DEFAULT_PRECISION, verbose: bool = False) -> str:
        text = f"{self.percent:.{precision}f}%"
        if verbose:
            text += f" ({self.level}/{self.max_level})"
        return text


def _print_reading(reading: Reading) -> None:
    print(reading.format())


def compute(
    action: Action,
    max_level: int,
    get_current: Callable[[], int],
    report: Callable[[Reading], None] | None = None,
) -> float | None:
    """Return the target brightness as a fraction of ``max_level``.

    ``None`` means nothing should be written (a plain read, which is passed
    to ``report`` instead). ``get_current`` is called at most once, and only
    when the action depends on the current level. Relative results are not
    clamped here.
    """

    if max_level <= 0:
        raise BacklightError("device reports no usable brightness range", f"max={max_level}")

    if isinstance(action, Get):
        (report or _print_reading)(Reading(get_current(), max_level))
        return None

    if not isinstance(action, Set):
        raise TypeError(f"unsupported action: {action!r}")

    delta = action.magnitude / 100.0
    if action.mode is SetMode.ABSOLUTE:
        return delta

    current = get_current() / max_level
    if action.mode is SetMode.RELATIVE_UP:
        return current + delta
    if action.mode is SetMode.RELATIVE_DOWN:
        return current - delta
    raise TypeError(f"unsupported set mode: {action.mode!r}")


def clamp_fraction(fraction: float) -> float:
    return min(max(fraction, 0.0), 1.0)


def fraction_to_level(fraction: float, max_level: int) -> int:
    # round() rounds half to even.
    return round(clamp_fraction(fraction) * max_level)
