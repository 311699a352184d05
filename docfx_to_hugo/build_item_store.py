"""Logic for populating the item store from a DocFX metadata directory."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from docfx_to_hugo.errors import MissingInputError, StructuralError
from docfx_to_hugo.item_store import ItemStore
from docfx_to_hugo.load_yaml_document import load_yaml_document
from docfx_to_hugo.parse_item import parse_item, parse_reference

TOC_FILE = "toc.yml"


def iter_toc_uids(toc: list[dict[str, Any]]) -> Iterable[str]:
    """Yield every UID named in the table of contents.

    Each entry's children come before the entry itself.
    """
    for entry in toc:
        if not isinstance(entry, dict):
            continue
        yield from iter_toc_uids(entry.get("items") or [])
        if entry.get("uid"):
            yield str(entry["uid"])


def document_path(yml_dir: Path, uid: str) -> Path:
    """Return the file DocFX writes for a UID (generic backticks become dashes)."""
    return yml_dir / (uid.replace("`", "-") + ".yml")


def add_document(store: ItemStore, doc: dict[str, Any]) -> None:
    """Add the items and references of one ManagedReference document."""
    for it in doc.get("items") or []:
        if isinstance(it, dict) and it.get("uid"):
            store.add_item(parse_item(it))
    for ref in doc.get("references") or []:
        if isinstance(ref, dict) and ref.get("uid"):
            store.add_reference(parse_reference(ref))


def build_item_store(yml_dir: Path) -> ItemStore:
    """Read ``toc.yml`` and every document it names into a new store."""
    if not yml_dir.is_dir():
        msg = f"{yml_dir} is not a directory"
        raise MissingInputError(msg)

    toc = load_yaml_document(yml_dir / TOC_FILE)
    if not isinstance(toc, list):
        msg = f"{yml_dir / TOC_FILE} must be a list of entries"
        raise StructuralError(msg)

    store = ItemStore()
    for uid in iter_toc_uids(toc):
        doc = load_yaml_document(document_path(yml_dir, uid))
        if not isinstance(doc, dict):
            msg = f"{document_path(yml_dir, uid)} is not a ManagedReference document"
            raise StructuralError(msg)
        add_document(store, doc)
    return store
