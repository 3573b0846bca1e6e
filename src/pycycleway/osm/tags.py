"""Flat OSM tag store with change tracking.

A :class:`Tags` instance is opened on the tags of one map element for the
duration of one edit. Encoders mutate it in place; the snapshot it was opened
with is kept so that callers (and the check-date logic) can tell whether the
edit actually changed anything.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from pycycleway.exceptions import TagValueError


class TagChangeKind(StrEnum):
    ADD = "add"
    MODIFY = "modify"
    DELETE = "delete"


class TagChange(BaseModel):
    """A single difference between the opened snapshot and the current tags."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: TagChangeKind
    key: str
    old_value: str | None = None
    new_value: str | None = None


def _check_key(key: object) -> str:
    if not isinstance(key, str) or not key:
        raise TagValueError(f"tag key must be a non-empty string, got {key!r}", key=str(key))
    return key


def _check_value(key: str, value: object) -> str:
    # Absence of a fact is expressed by removing the key, never by an empty value.
    if not isinstance(value, str) or not value:
        raise TagValueError(f"value of tag {key!r} must be a non-empty string, got {value!r}", key=key)
    return value


class Tags(MutableMapping[str, str]):
    """Mutable tag map of one element, remembering the state it was opened with."""

    def __init__(self, original: Mapping[str, str] | None = None) -> None:
        snapshot: dict[str, str] = {}
        for key, value in (original or {}).items():
            snapshot[_check_key(key)] = _check_value(key, value)
        self._original = snapshot
        self._tags = dict(snapshot)

    def __getitem__(self, key: str) -> str:
        return self._tags[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._tags[_check_key(key)] = _check_value(key, value)

    def __delitem__(self, key: str) -> None:
        del self._tags[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"Tags({self._tags!r})"

    def remove(self, key: str) -> None:
        """Remove *key* if present."""
        self._tags.pop(key, None)

    @property
    def original(self) -> dict[str, str]:
        """Copy of the tags as they were when this store was opened."""
        return dict(self._original)

    @property
    def has_changes(self) -> bool:
        """Whether the tags differ from the opened snapshot.

        Setting a key back to its original value does not count as a change.
        """
        return self._tags != self._original

    def changes(self) -> list[TagChange]:
        """All differences to the opened snapshot, sorted by key."""
        result: list[TagChange] = []
        for key in sorted(set(self._original) | set(self._tags)):
            old = self._original.get(key)
            new = self._tags.get(key)
            if old == new:
                continue
            if old is None:
                result.append(TagChange(kind=TagChangeKind.ADD, key=key, new_value=new))
            elif new is None:
                result.append(TagChange(kind=TagChangeKind.DELETE, key=key, old_value=old))
            else:
                result.append(TagChange(kind=TagChangeKind.MODIFY, key=key, old_value=old, new_value=new))
        return result

    def to_dict(self) -> dict[str, str]:
        return dict(self._tags)
