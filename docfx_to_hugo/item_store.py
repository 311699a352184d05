"""The in-memory graph of documented items and observed references."""

from dataclasses import dataclass, field

from docfx_to_hugo.errors import StructuralError
from docfx_to_hugo.item import Item, Reference


@dataclass
class ItemStore:
    """Holds every Item and Reference for one conversion run.

    The store moves through three states. While *open* it is being populated.
    Once *frozen*, membership is fixed and whole-store computations (UID
    disambiguation) may run; text fields may still be merged. Once *sealed*,
    nothing may change and rendering may begin.
    """

    items: dict[str, Item] = field(default_factory=dict)
    references: dict[str, Reference] = field(default_factory=dict)
    frozen: bool = False
    sealed: bool = False

    def add_item(self, item: Item) -> None:
        """Add or replace an item (later documents win, as DocFX repeats items)."""
        self._require_open()
        self.items[item.uid] = item

    def add_reference(self, ref: Reference) -> None:
        """Add or replace a reference."""
        self._require_open()
        self.references[ref.uid] = ref

    def freeze(self) -> None:
        """Fix store membership."""
        self.frozen = True

    def seal(self) -> None:
        """Make the store read-only."""
        self.frozen = True
        self.sealed = True

    def get(self, uid: str | None) -> Item | None:
        """Return the item with this UID, if the store owns it."""
        if uid is None:
            return None
        return self.items.get(uid)

    def require(self, uid: str, *, wanted_by: str) -> Item:
        """Return the item with this UID or fail with a structural error."""
        item = self.items.get(uid)
        if item is None:
            msg = f"{wanted_by} refers to {uid}, which is not in the documentation"
            raise StructuralError(msg)
        return item

    def children_of(self, item: Item, *, include_inherited: bool = True) -> list[Item]:
        """Return the child items of ``item`` in declaration order."""
        return [
            self.require(uid, wanted_by=item.uid)
            for uid in item.children
            if include_inherited or uid not in item.inherited_members
        ]

    def _require_open(self) -> None:
        if self.frozen:
            msg = "The item store cannot be modified after it has been frozen"
            raise StructuralError(msg)
