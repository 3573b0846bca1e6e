"""Check date (survey date) handling.

A check date records when a surveyor last confirmed a tag, e.g.
``check_date:cycleway=2026-10-19``. Older data uses other spellings
(``cycleway:check_date``, ``lastcheck:cycleway``, ...); they are all
recognised, and replaced by the canonical ``check_date:<key>`` on refresh.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from datetime import UTC, date, datetime

from pycycleway._constants import LAST_CHECK_DATE_KEYS, SURVEY_MARK_KEY

_logger = logging.getLogger(__name__)


def _today() -> date:
    return datetime.now(UTC).date()


def check_date_key(key: str) -> str:
    return f"{SURVEY_MARK_KEY}:{key}"


def last_check_date_keys(key: str) -> list[str]:
    """All keys that may hold a check date for *key*."""
    keys: list[str] = []
    for mark in LAST_CHECK_DATE_KEYS:
        keys.append(f"{mark}:{key}")
        keys.append(f"{key}:{mark}")
    return keys


def has_check_date_for_key(tags: MutableMapping[str, str], key: str) -> bool:
    return any(k in tags for k in last_check_date_keys(key))


def remove_check_dates_for_key(tags: MutableMapping[str, str], key: str) -> None:
    for k in last_check_date_keys(key):
        tags.pop(k, None)


def update_check_date_for_key(tags: MutableMapping[str, str], key: str, today: date | None = None) -> None:
    """Set the canonical check date of *key* to *today*, dropping other spellings."""
    value = (today or _today()).isoformat()
    remove_check_dates_for_key(tags, key)
    tags[check_date_key(key)] = value
    _logger.debug("Check date of %s set to %s", key, value)


def update_with_check_date(
    tags: MutableMapping[str, str],
    key: str,
    value: str,
    today: date | None = None,
) -> None:
    """Set ``key=value`` and keep its check date current.

    An unchanged value is confirmed by refreshing the check date. A changed
    value only refreshes a check date that already existed, so that it does
    not keep an outdated one.
    """
    previous = tags.get(key)
    tags[key] = value
    if previous == value or has_check_date_for_key(tags, key):
        update_check_date_for_key(tags, key, today)
