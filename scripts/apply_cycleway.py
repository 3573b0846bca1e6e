#!/usr/bin/env python3
"""Apply a cycleway answer to the tags of a road and show what changed.

Usage
-----
    python scripts/apply_cycleway.py tags.json --right track
    python scripts/apply_cycleway.py tags.json --left exclusive_lane --left-direction both
    echo '{"highway": "residential", "oneway": "yes"}' | python scripts/apply_cycleway.py - --left none_no_oneway

Handedness and the check-date time zone come from ``PYCYCLEWAY_*``
environment variables unless given on the command line.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pycycleway import (  # noqa: E402
    Cycleway,
    CyclewayAndDirection,
    CyclewayError,
    Direction,
    LeftAndRightCycleway,
    TaggingConfig,
    Tags,
    apply_cycleway,
)
from pycycleway._tools.tag_diff import format_changes, load_tags  # noqa: E402

_CHOICES = [c.value for c in Cycleway if c != Cycleway.INVALID]


def _side(
    cycleway: str | None,
    direction: str | None,
    is_right: bool,
    config: TaggingConfig,
) -> CyclewayAndDirection | None:
    if cycleway is None:
        return None
    resolved = Direction(direction) if direction else Direction.default(is_right, config.left_hand_traffic)
    return CyclewayAndDirection(cycleway=Cycleway(cycleway), direction=resolved)


def main() -> int:
    parser = argparse.ArgumentParser(description="Apply a cycleway answer to OSM tags.")
    parser.add_argument("tags", help="JSON file with the road's tags, or - for stdin")
    parser.add_argument("--left", choices=_CHOICES, help="Cycleway on the left side")
    parser.add_argument("--right", choices=_CHOICES, help="Cycleway on the right side")
    parser.add_argument("--left-direction", choices=[d.value for d in Direction])
    parser.add_argument("--right-direction", choices=[d.value for d in Direction])
    parser.add_argument("--left-hand-traffic", action="store_true", default=None, help="Traffic drives on the left")
    parser.add_argument("--json", action="store_true", help="Print the resulting tags as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        overrides = {} if args.left_hand_traffic is None else {"left_hand_traffic": True}
        config = TaggingConfig.from_env(**overrides)
        text = sys.stdin.read() if args.tags == "-" else Path(args.tags).read_text(encoding="utf-8")
        tags = Tags(load_tags(text))
        answer = LeftAndRightCycleway(
            left=_side(args.left, args.left_direction, False, config),
            right=_side(args.right, args.right_direction, True, config),
        )
        apply_cycleway(answer, tags, config.left_hand_traffic, today=config.today())
    except CyclewayError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(tags.to_dict(), indent=2, sort_keys=True))
    else:
        print(format_changes(tags.changes()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
