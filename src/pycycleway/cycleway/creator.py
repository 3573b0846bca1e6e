"""Write a cycleway answer into OSM tags.

The pipeline for one answer is:

- split every ``cycleway*`` family that holds a value for both sides into
  per-side keys, so that a side can be edited without touching the other
- tag ``oneway:bicycle`` for the whole road
- tag each answered side
- join per-side keys back where both sides ended up equal
- refresh ``check_date:cycleway`` when the answer confirmed the tags
- tag a sidewalk on each side answered as a shared foot and cycle path
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import assert_never

from pycycleway._constants import CYCLEWAY, CYCLEWAY_INFIXES, ONEWAY_BICYCLE, ONEWAY_BICYCLE_EXEMPT
from pycycleway.cycleway.models import Cycleway, CyclewayAndDirection, Direction, LeftAndRightCycleway
from pycycleway.cycleway.policy import ExemptionPolicy, is_not_oneway_for_cyclists
from pycycleway.osm.check_date import has_check_date_for_key, update_check_date_for_key
from pycycleway.osm.oneway import is_in_contraflow_of_oneway, is_oneway
from pycycleway.osm.sidewalk import LeftAndRightSidewalk, Sidewalk, apply_sidewalk
from pycycleway.osm.sides import Side, expand_sides, merge_sides, side_key
from pycycleway.osm.tags import Tags

_logger = logging.getLogger(__name__)

SidewalkSink = Callable[[LeftAndRightSidewalk, Tags], None]
"""Receives the sidewalk facts implied by the cycleway answer."""


def _apply_sidewalk_today(today: date | None) -> SidewalkSink:
    def sink(sidewalk: LeftAndRightSidewalk, tags: Tags) -> None:
        apply_sidewalk(sidewalk, tags, today)

    return sink


def apply_cycleway(
    cycleway: LeftAndRightCycleway,
    tags: Tags,
    is_left_hand_traffic: bool,
    *,
    exemption_policy: ExemptionPolicy = is_not_oneway_for_cyclists,
    sidewalk_sink: SidewalkSink | None = None,
    today: date | None = None,
) -> None:
    """Apply the cycleway answer to *tags* in place.

    Parameters
    ----------
    cycleway
        The answer. Sides that are ``None`` keep their current tags.
    tags
        Tags of the road, opened for this edit.
    is_left_hand_traffic
        Whether traffic drives on the left where the road is.
    exemption_policy
        Decides whether a oneway road is two-way for cyclists.
    sidewalk_sink
        Receives sidewalk facts; defaults to :func:`apply_sidewalk`.
    today
        Date to use for check dates; defaults to the current UTC date.
    """
    if cycleway.left is None and cycleway.right is None:
        return
    # checked up front so that an invalid side leaves the tags untouched
    for side in (cycleway.left, cycleway.right):
        if side is not None and side.cycleway == Cycleway.INVALID:
            raise AssertionError("Invalid cycleway")

    for infix in CYCLEWAY_INFIXES:
        expand_sides(tags, CYCLEWAY, infix)

    apply_oneway_not_for_cyclists(cycleway, tags, is_left_hand_traffic, exemption_policy)
    if cycleway.left is not None:
        apply_cycleway_side(cycleway.left, tags, False, is_left_hand_traffic)
    if cycleway.right is not None:
        apply_cycleway_side(cycleway.right, tags, True, is_left_hand_traffic)

    for infix in CYCLEWAY_INFIXES:
        merge_sides(tags, CYCLEWAY, infix)

    if not tags.has_changes or has_check_date_for_key(tags, CYCLEWAY):
        update_check_date_for_key(tags, CYCLEWAY, today)

    # after the check date, so that an unchanged answer confirms the cycleway, not the sidewalk
    sidewalk = LeftAndRightSidewalk(
        left=Sidewalk.YES if _is_sidewalk(cycleway.left) else None,
        right=Sidewalk.YES if _is_sidewalk(cycleway.right) else None,
    )
    sink = sidewalk_sink if sidewalk_sink is not None else _apply_sidewalk_today(today)
    sink(sidewalk, tags)


def _is_sidewalk(side: CyclewayAndDirection | None) -> bool:
    return side is not None and side.cycleway == Cycleway.SIDEWALK_EXPLICIT


def apply_oneway_not_for_cyclists(
    cycleway: LeftAndRightCycleway,
    tags: Tags,
    is_left_hand_traffic: bool,
    exemption_policy: ExemptionPolicy = is_not_oneway_for_cyclists,
) -> None:
    """Tag ``oneway:bicycle=no`` if cyclists may ride both ways on a oneway.

    Only removes ``oneway:bicycle`` if it is ``no``; other values state
    something this answer does not cover.
    """
    if is_oneway(tags) and exemption_policy(cycleway, tags, is_left_hand_traffic):
        tags[ONEWAY_BICYCLE] = ONEWAY_BICYCLE_EXEMPT
    elif tags.get(ONEWAY_BICYCLE) == ONEWAY_BICYCLE_EXEMPT:
        _logger.debug("Removing %s=%s", ONEWAY_BICYCLE, ONEWAY_BICYCLE_EXEMPT)
        del tags[ONEWAY_BICYCLE]


def _primary_tags(cycleway: Cycleway) -> tuple[str, str | None]:
    """``cycleway:<side>`` value and ``cycleway:<side>:lane`` value.

    A lane value of ``None`` keeps whatever lane detail is tagged: the
    unspecified answers must not remove more precise data.
    """
    match cycleway:
        case Cycleway.NONE | Cycleway.NONE_NO_ONEWAY:
            return "no", None
        case Cycleway.UNSPECIFIED_LANE:
            return "lane", None
        case Cycleway.ADVISORY_LANE:
            return "lane", "advisory"
        case Cycleway.EXCLUSIVE_LANE:
            return "lane", "exclusive"
        case Cycleway.TRACK | Cycleway.SIDEWALK_EXPLICIT:
            return "track", None
        case Cycleway.PICTOGRAMS:
            return "shared_lane", "pictogram"
        case Cycleway.SUGGESTION_LANE:
            return "shared_lane", "advisory"
        case Cycleway.UNSPECIFIED_SHARED_LANE:
            return "shared_lane", None
        case Cycleway.BUSWAY:
            return "share_busway", None
        case Cycleway.SHOULDER:
            return "shoulder", None
        case Cycleway.SEPARATE:
            return "separate", None
        case Cycleway.INVALID:
            raise AssertionError("Invalid cycleway")
        case _:
            assert_never(cycleway)


def apply_cycleway_side(
    side: CyclewayAndDirection,
    tags: Tags,
    is_right: bool,
    is_left_hand_traffic: bool,
) -> None:
    """Tag one side of the road.

    Only ``cycleway:<side>``, ``cycleway:<side>:lane``,
    ``cycleway:<side>:oneway`` and ``cycleway:<side>:segregated`` are
    written or removed.
    """
    cycleway = side.cycleway
    which = Side.RIGHT if is_right else Side.LEFT
    cycleway_key = side_key(CYCLEWAY, which)
    lane_key = side_key(CYCLEWAY, which, "lane")
    oneway_key = side_key(CYCLEWAY, which, "oneway")
    segregated_key = side_key(CYCLEWAY, which, "segregated")

    value, lane = _primary_tags(cycleway)
    tags[cycleway_key] = value
    if lane is not None:
        tags[lane_key] = lane
    elif not cycleway.is_lane:
        tags.remove(lane_key)

    if cycleway == Cycleway.TRACK:
        # segregated=yes is implied for tracks, so it is only updated, never added
        if segregated_key in tags:
            tags[segregated_key] = "yes"
    elif cycleway == Cycleway.SIDEWALK_EXPLICIT:
        tags[segregated_key] = "no"
    else:
        tags.remove(segregated_key)

    if not cycleway.is_physical:
        tags.remove(oneway_key)
        return

    # tag the direction explicitly if it is not the one assumed by default, if the
    # cycleway runs against a oneway, or if it is already tagged (so it gets corrected)
    is_default_direction = side.direction == Direction.default(is_right, is_left_hand_traffic)
    if (
        not is_default_direction
        or is_in_contraflow_of_oneway(is_right, tags, is_left_hand_traffic)
        or oneway_key in tags
    ):
        tags[oneway_key] = side.direction.oneway_value
