"""Cycleway answers and their OSM tagging."""

from pycycleway.cycleway.creator import apply_cycleway, apply_cycleway_side, apply_oneway_not_for_cyclists
from pycycleway.cycleway.models import Cycleway, CyclewayAndDirection, Direction, LeftAndRightCycleway
from pycycleway.cycleway.policy import ExemptionPolicy, is_not_oneway_for_cyclists

__all__ = [
    "Cycleway",
    "CyclewayAndDirection",
    "Direction",
    "ExemptionPolicy",
    "LeftAndRightCycleway",
    "apply_cycleway",
    "apply_cycleway_side",
    "apply_oneway_not_for_cyclists",
    "is_not_oneway_for_cyclists",
]
