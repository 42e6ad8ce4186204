from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from backlight_ctl.action import Action
from backlight_ctl.policy import Reading, clamp_fraction, compute, fraction_to_level
from backlight_ctl.system.backlight import Backlight

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    written: int | None = None
    max_level: int | None = None
    requested: float | None = None
    applied: float | None = None

    @property
    def clamped(self) -> bool:
        return self.requested is not None and self.requested != self.applied


def run(
    action: Action,
    backlight: Backlight,
    *,
    report: Callable[[Reading], None] | None = None,
    warn_on_clamp: bool = True,
) -> Outcome:
    """Apply one action to the device. At most one write happens."""

    max_level = backlight.max_brightness()
    log.debug("action %r against max level %d", str(action), max_level)

    requested = compute(action, max_level, backlight.brightness, report)
    if requested is None:
        return Outcome()

    applied = clamp_fraction(requested)
    if warn_on_clamp and applied != requested:
        log.warning(
            "requested %.1f%% is out of range, applied %.1f%%", 100 * requested, 100 * applied
        )

    level = fraction_to_level(applied, max_level)
    log.debug("target fraction %.4f -> level %d/%d", applied, level, max_level)
    backlight.set_brightness(level)
    return Outcome(written=level, max_level=max_level, requested=requested, applied=applied)
