"""pycycleway - Encode structured cycleway answers into OpenStreetMap tags."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycycleway")
except PackageNotFoundError:
    __version__ = "0+local"
from pycycleway.config import TaggingConfig
from pycycleway.cycleway import (
    Cycleway,
    CyclewayAndDirection,
    Direction,
    ExemptionPolicy,
    LeftAndRightCycleway,
    apply_cycleway,
    is_not_oneway_for_cyclists,
)
from pycycleway.exceptions import CyclewayConfigError, CyclewayError, TagsInputError, TagValueError
from pycycleway.osm.sidewalk import LeftAndRightSidewalk, Sidewalk, apply_sidewalk
from pycycleway.osm.tags import TagChange, TagChangeKind, Tags

__all__ = [
    "__version__",
    "Cycleway",
    "CyclewayAndDirection",
    "CyclewayConfigError",
    "CyclewayError",
    "Direction",
    "ExemptionPolicy",
    "LeftAndRightCycleway",
    "LeftAndRightSidewalk",
    "Sidewalk",
    "TagChange",
    "TagChangeKind",
    "TagValueError",
    "Tags",
    "TaggingConfig",
    "TagsInputError",
    "apply_cycleway",
    "apply_sidewalk",
    "is_not_oneway_for_cyclists",
]
