"""Tests for short UID and case suffix computation."""

import pytest

from docfx_to_hugo.errors import StructuralError
from docfx_to_hugo.item import Item
from docfx_to_hugo.item_store import ItemStore
from docfx_to_hugo.uid_disambiguator import (
    compute_case_suffixes,
    compute_short_uids,
    disambiguate,
)


def create_item(uid: str, kind: str = "Class", overload: str | None = None) -> Item:
    """Create an Item for testing."""
    return Item(uid=uid, kind=kind, name=uid.split(".")[-1], overload=overload)


def test_case_twins_numbered_in_ordinal_order() -> None:
    """Verify that Foo and foo get suffixes 0 and 1."""
    suffixes = compute_case_suffixes([create_item("foo"), create_item("Foo")])
    assert suffixes == {"Foo": "0", "foo": "1"}


def test_case_suffixes_are_contiguous() -> None:
    """Verify that a group of k twins gets exactly the suffixes 0..k-1."""
    uids = ["foo", "FOO", "fOo", "Foo"]
    suffixes = compute_case_suffixes(create_item(u) for u in uids)

    assert sorted(suffixes.values()) == ["0", "1", "2", "3"]
    assert [suffixes[u] for u in sorted(uids)] == ["0", "1", "2", "3"]


def test_unique_uid_has_no_suffix() -> None:
    """Verify that items without case twins get an empty suffix."""
    suffixes = compute_case_suffixes(
        [create_item("Yarn.Dialogue"), create_item("Yarn.Line")]
    )
    assert suffixes == {"Yarn.Dialogue": "", "Yarn.Line": ""}


def test_single_overload_collapses_to_overload_key() -> None:
    """Verify that the only member of an overload group is named after the key."""
    item = create_item(
        "Yarn.Dialogue.Stop(System.Int32)", "Method", "Yarn.Dialogue.Stop*"
    )
    assert compute_short_uids([item]) == {
        "Yarn.Dialogue.Stop(System.Int32)": "Yarn.Dialogue.Stop"
    }


def test_overload_group_keeps_full_uids() -> None:
    """Verify that members of a shared overload group keep their full UIDs."""
    a = create_item("Yarn.Dialogue.Run", "Method", "Yarn.Dialogue.Run*")
    b = create_item("Yarn.Dialogue.Run(System.String)", "Method", "Yarn.Dialogue.Run*")

    short_uids = compute_short_uids([a, b])

    assert short_uids[a.uid] == a.uid
    assert short_uids[b.uid] == b.uid


def test_item_without_overload_uses_uid() -> None:
    """Verify that items with no overload key use their UID as short UID."""
    item = create_item("Yarn.Dialogue")
    assert compute_short_uids([item]) == {"Yarn.Dialogue": "Yarn.Dialogue"}


def test_disambiguate_requires_frozen_store() -> None:
    """Verify that disambiguation refuses to run on a store still being filled."""
    store = ItemStore()
    store.add_item(create_item("Foo"))

    with pytest.raises(StructuralError):
        disambiguate(store)


def test_disambiguate_store() -> None:
    """Verify that disambiguation covers every item in the store."""
    store = ItemStore()
    store.add_item(create_item("Foo"))
    store.add_item(create_item("foo"))
    store.add_item(create_item("Foo.M", "Method", "Foo.M*"))
    store.freeze()

    result = disambiguate(store)

    assert result.case_suffix(store.items["Foo"]) == "0"
    assert result.case_suffix(store.items["foo"]) == "1"
    assert result.case_suffix(store.items["Foo.M"]) == ""
    assert result.short_uid(store.items["Foo.M"]) == "Foo.M"
