"""Helpers for reading tag files and printing tag changes."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from pycycleway.exceptions import TagsInputError
from pycycleway.osm.tags import TagChange

MAX_VAL_WIDTH = 60
MISSING = "<missing>"


def _truncate(val: Any, width: int = MAX_VAL_WIDTH) -> str:
    s = str(val)
    if len(s) <= width:
        return s
    return s[: width - 3] + "..."


def load_tags(text: str) -> dict[str, str]:
    """Parse a JSON object of string tags."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TagsInputError(f"tags are not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise TagsInputError("tags must be a JSON object")
    for key, value in data.items():
        if not isinstance(value, str) or not value:
            raise TagsInputError(f"value of tag {key!r} must be a non-empty string")
    return data


def format_changes(changes: Sequence[TagChange]) -> str:
    """Render tag changes as a Key/Old/New table."""
    if not changes:
        return "No changes."

    rows = [
        (
            change.key,
            _truncate(change.old_value if change.old_value is not None else MISSING),
            _truncate(change.new_value if change.new_value is not None else MISSING),
        )
        for change in changes
    ]

    key_w = max(4, *(len(r[0]) for r in rows))
    old_w = max(3, *(len(r[1]) for r in rows))
    new_w = max(3, *(len(r[2]) for r in rows))

    header = f"{'Key':<{key_w}}  {'Old':<{old_w}}  {'New':<{new_w}}"
    lines = [header, "─" * len(header)]
    lines.extend(f"{key:<{key_w}}  {old:<{old_w}}  {new:<{new_w}}" for key, old, new in rows)
    lines.append(f"\n{len(changes)} change(s).")
    return "\n".join(lines)
