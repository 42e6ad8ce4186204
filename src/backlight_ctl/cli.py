from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from backlight_ctl import __version__
from backlight_ctl.action import parse
from backlight_ctl.config import ConfigError, defaults, load
from backlight_ctl.controller import run
from backlight_ctl.errors import ActionParseError, BacklightError
from backlight_ctl.paths import default_config_path
from backlight_ctl.policy import Reading
from backlight_ctl.system.backlight import Backlight

PROG = "backlight-ctl"

_EPILOG = """\
action:
  (none)   print the current brightness
  N[%]     set brightness to N percent (0-100)
  +N[%]    raise brightness by N percentage points
  -N[%]    lower brightness by N percentage points
"""


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=PROG,
        add_help=False,
        description="Read or change the display backlight brightness.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("action", nargs="?", help="brightness change, see below")
    ap.add_argument("-h", "--help", action="store_true", help="show this help and exit")
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument("-c", "--config", help=f"config file (default: {default_config_path()})")
    ap.add_argument("--device", help="backlight sysfs directory")
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="also show the raw level, e.g. 40.0%% (320/800)",
    )
    ap.add_argument("--debug", action="store_true", help="log device access to stderr")
    return ap


def _load_config(path: str | None) -> dict[str, Any]:
    if path:
        return load(path)
    default = default_config_path()
    if default.is_file():
        return load(default)
    return defaults()


def main(argv: list[str] | None = None) -> int:
    ap = _build_parser()
    # "-10%" looks like an unknown option to argparse; it ends up in extras.
    args, extras = ap.parse_known_args(argv)

    if args.help:
        ap.print_help(sys.stderr)
        return 2

    words = ([args.action] if args.action is not None else []) + extras
    if len(words) > 1:
        ap.error(f"expected at most one action, got {len(words)}: {' '.join(words)}")

    try:
        action = parse(words[0] if words else "")
    except ActionParseError as e:
        ap.error(str(e))

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format=f"{PROG}: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        cfg = _load_config(args.config)
        if args.device:
            cfg["device"]["sysfs_dir"] = args.device
        precision = int(cfg["report"]["precision"])
        verbose = bool(args.verbose or cfg["report"]["verbose"])

        def report(reading: Reading) -> None:
            print(reading.format(precision, verbose))

        backlight = Backlight(Path(cfg["device"]["sysfs_dir"]))
        outcome = run(action, backlight, report=report, warn_on_clamp=cfg["warn_on_clamp"])
    except (BacklightError, ConfigError, OSError) as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1

    if verbose and outcome.written is not None and outcome.max_level is not None:
        report(Reading(outcome.written, outcome.max_level))
    return 0
