"""Logic for merging overwrite documents into the item store."""

import logging
from enum import Enum

from docfx_to_hugo.errors import StructuralError
from docfx_to_hugo.item import Item
from docfx_to_hugo.item_store import ItemStore
from docfx_to_hugo.overwrite_document import OverwriteDocument

logger = logging.getLogger(__name__)


class MergeRule(Enum):
    """How an overwrite field combines with the generated value."""

    REPLACE = "replace"
    IGNORE = "ignore"


# (overwrite key, Item attribute, rule), applied in this order. UID, type and
# overload feed UID disambiguation and path resolution, so they never change.
# Keys not listed here, including nested records such as syntax and source,
# are never merged.
MERGE_TABLE: tuple[tuple[str, str, MergeRule], ...] = (
    ("uid", "uid", MergeRule.IGNORE),
    ("type", "kind", MergeRule.IGNORE),
    ("overload", "overload", MergeRule.IGNORE),
    ("id", "id", MergeRule.REPLACE),
    ("name", "name", MergeRule.REPLACE),
    ("nameWithType", "name_with_type", MergeRule.REPLACE),
    ("fullName", "full_name", MergeRule.REPLACE),
    ("namespace", "namespace", MergeRule.REPLACE),
    ("parent", "parent", MergeRule.REPLACE),
    ("summary", "summary", MergeRule.REPLACE),
    ("remarks", "remarks", MergeRule.REPLACE),
)


def merge_overwrite(item: Item, doc: OverwriteDocument) -> list[str]:
    """Replace the item's text fields with the document's non-blank values.

    Returns the overwrite keys that were applied.
    """
    applied = []
    for key, attr, rule in MERGE_TABLE:
        if rule is MergeRule.IGNORE:
            continue
        value = _string_value(doc.fields.get(key))
        if value is None or not value.strip():
            continue
        setattr(item, attr, value)
        logger.info("%s %s => %s", item.uid, key, value)
        applied.append(key)
    return applied


def apply_overwrites(store: ItemStore, documents: list[OverwriteDocument]) -> int:
    """Merge each document into its item; return how many documents applied.

    A document naming an item that does not exist is skipped with a warning.
    """
    if store.sealed:
        msg = "Overwrites cannot be applied once rendering has begun"
        raise StructuralError(msg)

    applied = 0
    for doc in documents:
        item = store.get(doc.uid)
        if item is None:
            logger.warning(
                "Overwrite item %s overwrites item %s, but no such item exists "
                "in the documentation",
                doc.source,
                doc.uid,
            )
            continue
        merge_overwrite(item, doc)
        applied += 1
    return applied


def _string_value(v: object) -> str | None:
    # YAML reads bare numbers as numbers; treat them as the text they were.
    if isinstance(v, str):
        return v
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return None
