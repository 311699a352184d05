"""Whole-store computation of short UIDs and case-collision suffixes.

Both values depend on every other item in the store, so they are computed once,
as groupings over the complete (frozen) store, rather than looked up per item.
Case suffixes are only meaningful for one store snapshot and must never be
persisted between runs: adding or removing an item can renumber its group.
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from docfx_to_hugo.errors import StructuralError
from docfx_to_hugo.item import Item
from docfx_to_hugo.item_store import ItemStore

OVERLOAD_MARKER = "*"


@dataclass(frozen=True)
class UidDisambiguation:
    """Derived identifiers for every item in a store."""

    short_uids: dict[str, str]
    case_suffixes: dict[str, str]

    def short_uid(self, item: Item) -> str:
        """Return the item's short UID."""
        return self.short_uids[item.uid]

    def case_suffix(self, item: Item) -> str:
        """Return the suffix separating the item from case-insensitive twins."""
        return self.case_suffixes[item.uid]


def compute_short_uids(items: Iterable[Item]) -> dict[str, str]:
    """Map each UID to its short UID.

    An item whose overload key is held by no other item is named after that key
    (``Foo.Bar*`` becomes ``Foo.Bar``), which collapses the overload set onto one
    slug. Items that share an overload key, or have none, keep their full UID.
    """
    items = list(items)
    overload_counts: dict[str, int] = defaultdict(int)
    for item in items:
        if item.overload is not None:
            overload_counts[item.overload] += 1

    short_uids: dict[str, str] = {}
    for item in items:
        if item.overload is not None and overload_counts[item.overload] == 1:
            short_uids[item.uid] = item.overload.rstrip(OVERLOAD_MARKER)
        else:
            short_uids[item.uid] = item.uid
    return short_uids


def compute_case_suffixes(items: Iterable[Item]) -> dict[str, str]:
    """Map each UID to a suffix that is unique among its case-insensitive twins.

    UIDs that collide when lower-cased are sorted ordinally and numbered from
    zero; a UID without twins gets the empty string.
    """
    groups: dict[str, list[str]] = defaultdict(list)
    for item in items:
        groups[item.uid.lower()].append(item.uid)

    suffixes: dict[str, str] = {}
    for uids in groups.values():
        if len(uids) == 1:
            suffixes[uids[0]] = ""
            continue
        for index, uid in enumerate(sorted(uids)):
            suffixes[uid] = str(index)
    return suffixes


def disambiguate(store: ItemStore) -> UidDisambiguation:
    """Compute short UIDs and case suffixes for a fully populated store."""
    if not store.frozen:
        msg = "UIDs can only be disambiguated once the item store is complete"
        raise StructuralError(msg)
    items = list(store.items.values())
    return UidDisambiguation(
        short_uids=compute_short_uids(items),
        case_suffixes=compute_case_suffixes(items),
    )
