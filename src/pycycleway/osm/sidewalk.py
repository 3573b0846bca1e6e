"""Sidewalk tagging.

Sidewalks are commonly tagged with a shortcut on the bare key
(``sidewalk=both|left|right|no|separate``) instead of one value per side.
Applying an answer for one side therefore first spells the shortcut out per
side, writes the answer and then folds the result back into the shortest
form that expresses it.
"""

from __future__ import annotations

import logging
from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from pycycleway._constants import SIDEWALK
from pycycleway.osm.check_date import has_check_date_for_key, update_check_date_for_key
from pycycleway.osm.sides import Side, side_key
from pycycleway.osm.tags import Tags

_logger = logging.getLogger(__name__)

_BOTH_KEY = f"{SIDEWALK}:both"
_LEFT_KEY = side_key(SIDEWALK, Side.LEFT)
_RIGHT_KEY = side_key(SIDEWALK, Side.RIGHT)


class Sidewalk(StrEnum):
    YES = "yes"
    NO = "no"
    SEPARATE = "separate"


class LeftAndRightSidewalk(BaseModel):
    """Sidewalk answer per side; ``None`` leaves that side as tagged."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    left: Sidewalk | None = None
    right: Sidewalk | None = None


_SHORTCUT_TO_SIDES: dict[str, tuple[str, str]] = {
    "both": ("yes", "yes"),
    "left": ("yes", "no"),
    "right": ("no", "yes"),
    "no": ("no", "no"),
    "none": ("no", "no"),
    "separate": ("separate", "separate"),
}

_SIDES_TO_SHORTCUT: dict[tuple[str, str], str] = {
    ("yes", "yes"): "both",
    ("yes", "no"): "left",
    ("no", "yes"): "right",
    ("no", "no"): "no",
    ("separate", "separate"): "separate",
}


def _expand(tags: Tags) -> None:
    both = tags.get(_BOTH_KEY)
    if both is not None:
        tags.setdefault(_LEFT_KEY, both)
        tags.setdefault(_RIGHT_KEY, both)
        del tags[_BOTH_KEY]

    shortcut = tags.get(SIDEWALK)
    if shortcut is None:
        return
    sides = _SHORTCUT_TO_SIDES.get(shortcut)
    if sides is not None:
        tags.setdefault(_LEFT_KEY, sides[0])
        tags.setdefault(_RIGHT_KEY, sides[1])
    else:
        # e.g. "yes": a sidewalk on some side, superseded by the per-side answer
        _logger.debug("Dropping %s=%s in favour of per-side tags", SIDEWALK, shortcut)
    del tags[SIDEWALK]


def _collapse(tags: Tags) -> None:
    left = tags.get(_LEFT_KEY)
    right = tags.get(_RIGHT_KEY)
    if left is None or right is None:
        return
    shortcut = _SIDES_TO_SHORTCUT.get((left, right))
    if shortcut is None:
        return
    tags[SIDEWALK] = shortcut
    del tags[_LEFT_KEY]
    del tags[_RIGHT_KEY]


def apply_sidewalk(sidewalk: LeftAndRightSidewalk, tags: Tags, today: date | None = None) -> None:
    """Write the sidewalk answer into *tags*."""
    if sidewalk.left is None and sidewalk.right is None:
        return

    _expand(tags)
    if sidewalk.left is not None:
        tags[_LEFT_KEY] = sidewalk.left.value
    if sidewalk.right is not None:
        tags[_RIGHT_KEY] = sidewalk.right.value
    _collapse(tags)

    if not tags.has_changes or has_check_date_for_key(tags, SIDEWALK):
        update_check_date_for_key(tags, SIDEWALK, today)
    _logger.debug("Applied sidewalk left=%s right=%s", sidewalk.left, sidewalk.right)
