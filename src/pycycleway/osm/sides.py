"""Split and join tag families that describe the two sides of a way.

A family such as ``cycleway:lane`` is either tagged *unsided*
(``cycleway:lane=exclusive``, valid for both sides) or *sided*
(``cycleway:left:lane=exclusive`` / ``cycleway:right:lane=advisory``).
Editors expand a family to its sided form before touching one side, so that
editing one side never changes the other, and merge it back afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from enum import StrEnum

_logger = logging.getLogger(__name__)


class Side(StrEnum):
    LEFT = "left"
    RIGHT = "right"


def unsided_key(base: str, infix: str | None = None) -> str:
    """``base`` or ``base:infix``."""
    return f"{base}:{infix}" if infix else base


def side_key(base: str, side: Side, infix: str | None = None) -> str:
    """``base:side`` or ``base:side:infix``."""
    key = f"{base}:{side.value}"
    return f"{key}:{infix}" if infix else key


def expand_sides(tags: MutableMapping[str, str], base: str, infix: str | None = None) -> None:
    """Copy an unsided value into both sided keys and drop the unsided key.

    Nothing happens if the unsided key is missing or if any sided key already
    exists: a per-side value is never overwritten by a value for both sides.
    """
    key = unsided_key(base, infix)
    value = tags.get(key)
    if value is None:
        return
    left_key = side_key(base, Side.LEFT, infix)
    right_key = side_key(base, Side.RIGHT, infix)
    if left_key in tags or right_key in tags:
        _logger.debug("Not expanding %s, sided keys already present", key)
        return
    tags[left_key] = value
    tags[right_key] = value
    del tags[key]


def merge_sides(tags: MutableMapping[str, str], base: str, infix: str | None = None) -> None:
    """Replace two equal sided values with one unsided value.

    A family with only one sided key stays sided: the other side is unknown,
    which is not the same as being equal to the known side.
    """
    left_key = side_key(base, Side.LEFT, infix)
    right_key = side_key(base, Side.RIGHT, infix)
    left = tags.get(left_key)
    right = tags.get(right_key)
    if left is None or left != right:
        return
    tags[unsided_key(base, infix)] = left
    del tags[left_key]
    del tags[right_key]
