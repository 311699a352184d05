"""Logic for rendering the API landing page."""

from docfx_to_hugo.format_cross_references import format_cross_references
from docfx_to_hugo.format_for_table import format_for_table
from docfx_to_hugo.front_matter import ROOT_MENU_IDENTIFIER, page_front_matter
from docfx_to_hugo.item import Item
from docfx_to_hugo.item_kind import is_namespace_kind
from docfx_to_hugo.md_table import md_table
from docfx_to_hugo.reference_linker import xref
from docfx_to_hugo.resolution_context import ResolutionContext


def needs_work(item: Item) -> bool:
    """Check whether an item is missing documentation.

    That is: no summary, a parameter without a description, or a method whose
    return value is not described.
    """
    if not item.summary:
        return True
    syntax = item.syntax
    if syntax is None:
        return False
    if any(not p.description for p in syntax.parameters):
        return True
    return (
        item.kind == "Method"
        and syntax.return_value is not None
        and not syntax.return_value.description
    )


def render_index_page(
    ctx: ResolutionContext,
    *,
    landing_include: str | None = "/assets/api_landing.md",
) -> str:
    """Render the index page linking to every namespace."""
    documented = sorted(
        (it for it in ctx.store.items.values() if not it.do_not_document),
        key=lambda it: it.uid,
    )
    namespaces = [it for it in documented if is_namespace_kind(it.kind)]

    menu = {"identifier": ROOT_MENU_IDENTIFIER}
    parts = [page_front_matter("API Documentation", menu), ""]
    if landing_include:
        parts += [f'{{{{% readfile "{landing_include}" %}}}}', ""]

    rows = [
        [
            f"[{ns.id or ns.name}]({xref(ns, ctx)})",
            format_for_table(format_cross_references(ns.summary, ctx)),
        ]
        for ns in namespaces
    ]
    parts.append(md_table(["Namespace", "Description"], rows))

    incomplete = [
        it for it in documented if not is_namespace_kind(it.kind) and needs_work(it)
    ]
    if incomplete:
        parts += ["", "## Items Needing Work"]
        parts.extend(
            f"* [`{it.name_with_type or it.name}`]({xref(it, ctx)})"
            for it in incomplete
        )

    return "\n".join(parts).rstrip() + "\n"
