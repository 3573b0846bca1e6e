"""Structured cycleway answers.

These models describe what a surveyor selected for each side of a road.
They carry no tags themselves; :mod:`pycycleway.cycleway.creator` turns them
into OSM tags.
"""

from __future__ import annotations

import enum
from typing import assert_never

from pydantic import BaseModel, ConfigDict

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class Direction(enum.StrEnum):
    """Direction(s) cyclists may ride, relative to the way's drawing direction."""

    FORWARD = "forward"
    BACKWARD = "backward"
    BOTH = "both"

    @property
    def oneway_value(self) -> str:
        """Value of the ``cycleway:<side>:oneway`` key."""
        match self:
            case Direction.FORWARD:
                return "yes"
            case Direction.BACKWARD:
                return "-1"
            case Direction.BOTH:
                return "no"
            case _:
                assert_never(self)

    def reverse(self) -> Direction:
        match self:
            case Direction.FORWARD:
                return Direction.BACKWARD
            case Direction.BACKWARD:
                return Direction.FORWARD
            case Direction.BOTH:
                return Direction.BOTH
            case _:
                assert_never(self)

    @classmethod
    def default(cls, is_right: bool, is_left_hand_traffic: bool) -> Direction:
        """Direction assumed for a cycleway when none is tagged.

        A cycleway runs with the traffic on its side of the road: forward on
        the right side in right-hand traffic, forward on the left side in
        left-hand traffic.
        """
        return cls.FORWARD if is_right != is_left_hand_traffic else cls.BACKWARD


class Cycleway(enum.StrEnum):
    """Kind of cycling infrastructure on one side of a road."""

    NONE = "none"
    # no cycleway, but cyclists may ride against the oneway
    NONE_NO_ONEWAY = "none_no_oneway"

    UNSPECIFIED_LANE = "unspecified_lane"
    ADVISORY_LANE = "advisory_lane"
    EXCLUSIVE_LANE = "exclusive_lane"

    TRACK = "track"
    # shared foot and cycle path next to the road
    SIDEWALK_EXPLICIT = "sidewalk_explicit"

    PICTOGRAMS = "pictograms"
    SUGGESTION_LANE = "suggestion_lane"
    UNSPECIFIED_SHARED_LANE = "unspecified_shared_lane"

    BUSWAY = "busway"
    SHOULDER = "shoulder"
    SEPARATE = "separately_mapped"

    # only ever the result of a programming error
    INVALID = "invalid"

    @property
    def is_lane(self) -> bool:
        """Whether this is a (shared) lane, which may carry ``cycleway:lane`` detail."""
        return self in _LANES

    @property
    def is_physical(self) -> bool:
        """Whether there is cycling infrastructure with a direction of travel on the road."""
        return self not in _NOT_PHYSICAL


_LANES = frozenset(
    {
        Cycleway.UNSPECIFIED_LANE,
        Cycleway.ADVISORY_LANE,
        Cycleway.EXCLUSIVE_LANE,
        Cycleway.PICTOGRAMS,
        Cycleway.SUGGESTION_LANE,
        Cycleway.UNSPECIFIED_SHARED_LANE,
    }
)

_NOT_PHYSICAL = frozenset({Cycleway.NONE, Cycleway.NONE_NO_ONEWAY, Cycleway.SEPARATE, Cycleway.INVALID})


# ------------------------------------------------------------------
# Answers
# ------------------------------------------------------------------


class CyclewayAndDirection(BaseModel):
    """Cycleway of one side and the direction(s) it may be used in.

    ``direction`` is ignored for categories that are not physical
    infrastructure on the road (none, separately mapped).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cycleway: Cycleway
    direction: Direction


class LeftAndRightCycleway(BaseModel):
    """Answer for both sides; a side that is ``None`` is left as tagged."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    left: CyclewayAndDirection | None = None
    right: CyclewayAndDirection | None = None
