"""Oneway predicates for ways.

Side and direction are relative to the direction the way is drawn in.
"""

from __future__ import annotations

from collections.abc import Mapping

_IMPLIED_ONEWAY_JUNCTIONS = frozenset({"roundabout", "circular"})


def is_forward_oneway(tags: Mapping[str, str]) -> bool:
    """Oneway in the direction the way is drawn, explicitly or implied."""
    oneway = tags.get("oneway")
    if oneway == "yes":
        return True
    if oneway is not None:
        return False
    return tags.get("junction") in _IMPLIED_ONEWAY_JUNCTIONS or tags.get("highway") == "motorway"


def is_reversed_oneway(tags: Mapping[str, str]) -> bool:
    return tags.get("oneway") == "-1"


def is_oneway(tags: Mapping[str, str]) -> bool:
    """Whether general traffic may only travel in one direction."""
    return is_forward_oneway(tags) or is_reversed_oneway(tags)


def is_in_contraflow_of_oneway(is_right: bool, tags: Mapping[str, str], is_left_hand_traffic: bool) -> bool:
    """Whether the given side runs against the flow of a oneway.

    On a forward oneway in right-hand traffic that is the left side; on a
    reversed oneway it is the right side. Left-hand traffic mirrors both.
    """
    runs_forward = is_right != is_left_hand_traffic
    if is_forward_oneway(tags):
        return not runs_forward
    if is_reversed_oneway(tags):
        return runs_forward
    return False
