"""Oneway exemption policy for cyclists.

Decides whether a oneway road is two-way for cyclists given the cycleway
answer. The creator only consumes the boolean; callers may pass their own
policy with the same signature.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from pycycleway._constants import ONEWAY_BICYCLE, ONEWAY_BICYCLE_EXEMPT
from pycycleway.cycleway.models import Cycleway, CyclewayAndDirection, Direction, LeftAndRightCycleway
from pycycleway.osm.oneway import is_forward_oneway, is_reversed_oneway

ExemptionPolicy = Callable[[LeftAndRightCycleway, Mapping[str, str], bool], bool]
"""``(cycleway, tags, is_left_hand_traffic) -> is exempt``"""


def _allows_contraflow(side: CyclewayAndDirection, oneway_direction: Direction) -> bool:
    if side.cycleway == Cycleway.NONE_NO_ONEWAY:
        return True
    if not side.cycleway.is_physical:
        return False
    return side.direction in (Direction.BOTH, oneway_direction.reverse())


def is_not_oneway_for_cyclists(
    cycleway: LeftAndRightCycleway,
    tags: Mapping[str, str],
    is_left_hand_traffic: bool,
) -> bool:
    """Default policy.

    Cyclists are exempt when either answered side lets them ride against the
    oneway: no cycleway but explicitly allowed, or a cycleway usable in both
    directions or in the contraflow direction. A side that was not answered
    keeps a previously tagged exemption.
    """
    if is_forward_oneway(tags):
        oneway_direction = Direction.FORWARD
    elif is_reversed_oneway(tags):
        oneway_direction = Direction.BACKWARD
    else:
        return False

    sides = (cycleway.left, cycleway.right)
    if any(side is not None and _allows_contraflow(side, oneway_direction) for side in sides):
        return True
    if any(side is None for side in sides):
        return tags.get(ONEWAY_BICYCLE) == ONEWAY_BICYCLE_EXEMPT
    return False
