"""Logic for rendering namespace overview pages."""

from docfx_to_hugo.format_cross_references import format_cross_references
from docfx_to_hugo.format_for_table import format_for_table
from docfx_to_hugo.front_matter import (
    ROOT_MENU_IDENTIFIER,
    menu_identifier,
    page_front_matter,
)
from docfx_to_hugo.item import Item
from docfx_to_hugo.item_kind import PLURAL_ITEM_KINDS
from docfx_to_hugo.md_table import md_table
from docfx_to_hugo.reference_linker import xref
from docfx_to_hugo.resolution_context import ResolutionContext


def render_namespace_page(item: Item, ctx: ResolutionContext, weight: int) -> str:
    """Render a namespace landing page in Markdown."""
    menu = {
        "parent": ROOT_MENU_IDENTIFIER,
        "identifier": menu_identifier(item, ctx),
        "title": item.name,
        "weight": weight,
    }
    parts = [page_front_matter(f"{item.name} Namespace", menu)]
    parts.append(format_cross_references(item.summary, ctx) or "")

    # Group types by kind, in the order each kind first appears
    groups: dict[str, list[Item]] = {}
    for child in ctx.store.children_of(item, include_inherited=False):
        if child.do_not_document:
            continue
        groups.setdefault(child.kind, []).append(child)

    for kind, children in groups.items():
        rows = [
            [
                f"[{format_for_table(child.name)}]({xref(child, ctx)})",
                format_for_table(format_cross_references(child.summary, ctx)),
            ]
            for child in children
        ]
        table = md_table(["Name", "Description"], rows)
        parts += [f"## {PLURAL_ITEM_KINDS[kind]}", table]

    return "\n".join(parts).rstrip() + "\n"
