"""Internal constants shared across the library."""

CYCLEWAY = "cycleway"
SIDEWALK = "sidewalk"

# Infixes of the cycleway key families that are expanded and merged per side.
CYCLEWAY_INFIXES: tuple[str | None, ...] = (None, "lane", "oneway", "segregated")

ONEWAY_BICYCLE = "oneway:bicycle"
ONEWAY_BICYCLE_EXEMPT = "no"

# ------------------------------------------------------------------
# Check date (staleness marker) keys
# ------------------------------------------------------------------

SURVEY_MARK_KEY = "check_date"

#: Every prefix/suffix that has been used to record when a key was last surveyed.
LAST_CHECK_DATE_KEYS: tuple[str, ...] = (
    SURVEY_MARK_KEY,
    "lastcheck",
    "last_checked",
    "survey:date",
    "survey_date",
)
