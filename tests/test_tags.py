from __future__ import annotations

import pytest

from pycycleway.exceptions import TagValueError
from pycycleway.osm.tags import TagChange, TagChangeKind, Tags


def test_tags_behave_like_a_mapping() -> None:
    tags = Tags({"highway": "residential", "name": "Main Street"})

    assert tags["highway"] == "residential"
    assert tags.get("surface") is None
    assert "name" in tags
    assert len(tags) == 2
    assert tags == {"highway": "residential", "name": "Main Street"}


def test_opening_copies_the_input() -> None:
    source = {"highway": "residential"}
    tags = Tags(source)
    tags["highway"] = "primary"

    assert source == {"highway": "residential"}
    assert tags.original == {"highway": "residential"}


@pytest.mark.parametrize("value", ["", None, 5])
def test_invalid_values_are_rejected(value: object) -> None:
    tags = Tags()
    with pytest.raises(TagValueError):
        tags["cycleway"] = value  # type: ignore[assignment]


def test_invalid_value_in_snapshot_is_rejected() -> None:
    with pytest.raises(ValueError):
        Tags({"cycleway": ""})


def test_empty_key_is_rejected() -> None:
    with pytest.raises(TagValueError):
        Tags()[""] = "yes"


def test_remove_is_a_no_op_for_missing_keys() -> None:
    tags = Tags({"cycleway": "no"})
    tags.remove("sidewalk")
    tags.remove("cycleway")

    assert tags == {}


def test_del_missing_key_raises() -> None:
    with pytest.raises(KeyError):
        del Tags()["cycleway"]


class TestHasChanges:
    def test_fresh_store_has_no_changes(self) -> None:
        assert not Tags({"cycleway": "no"}).has_changes

    def test_overwriting_with_same_value_is_no_change(self) -> None:
        tags = Tags({"cycleway": "no"})
        tags["cycleway"] = "no"
        assert not tags.has_changes

    def test_reverting_an_edit_is_no_change(self) -> None:
        tags = Tags({"cycleway": "no"})
        del tags["cycleway"]
        assert tags.has_changes
        tags["cycleway"] = "no"
        assert not tags.has_changes

    def test_added_key_is_a_change(self) -> None:
        tags = Tags()
        tags["cycleway:left"] = "track"
        assert tags.has_changes


def test_changes_lists_added_modified_and_deleted_keys_sorted() -> None:
    tags = Tags({"cycleway": "no", "sidewalk": "both", "name": "Main Street"})
    tags["cycleway"] = "track"
    del tags["sidewalk"]
    tags["check_date:cycleway"] = "2026-10-19"

    assert tags.changes() == [
        TagChange(kind=TagChangeKind.ADD, key="check_date:cycleway", new_value="2026-10-19"),
        TagChange(kind=TagChangeKind.MODIFY, key="cycleway", old_value="no", new_value="track"),
        TagChange(kind=TagChangeKind.DELETE, key="sidewalk", old_value="both"),
    ]


def test_to_dict_returns_a_copy() -> None:
    tags = Tags({"cycleway": "no"})
    plain = tags.to_dict()
    plain["cycleway"] = "track"

    assert tags["cycleway"] == "no"
