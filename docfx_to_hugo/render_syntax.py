"""Logic for rendering an item's type parameters, parameters and return type."""

from docfx_to_hugo.format_cross_references import format_cross_references
from docfx_to_hugo.format_for_table import format_for_table
from docfx_to_hugo.item import Item, Syntax
from docfx_to_hugo.item_kind import RETURNABLE_KINDS
from docfx_to_hugo.md_table import md_table
from docfx_to_hugo.reference_linker import link_to_type
from docfx_to_hugo.resolution_context import ResolutionContext


def render_syntax(
    item: Item,
    syntax: Syntax,
    ctx: ResolutionContext,
    header_level: int = 2,
) -> list[str]:
    """Render the sections that explain a declaration."""
    hashes = "#" * header_level
    parts: list[str] = []

    if syntax.type_parameters:
        rows = [
            [tp.id, _cell(tp.description, ctx)] for tp in syntax.type_parameters
        ]
        table = md_table(["Type Parameter", "Description"], rows)
        parts += [f"{hashes} Type Parameters", table]

    if syntax.parameters:
        rows = []
        for p in syntax.parameters:
            name = f"{link_to_type(p.type, ctx)} {p.id}" if p.type else p.id
            rows.append([name, _cell(p.description, ctx)])
        parts += [f"{hashes} Parameters", md_table(["Parameter", "Description"], rows)]

    # Properties technically have a return type too, but it isn't presented
    # like a method's.
    ret = syntax.return_value
    if ret is not None and ret.type and item.kind in RETURNABLE_KINDS:
        line = link_to_type(ret.type, ctx)
        if ret.description:
            line += f": {format_cross_references(ret.description, ctx)}"
        parts += [f"{hashes} Return Type", line, ""]

    if syntax.remarks:
        parts.append(syntax.remarks)

    return parts


def _cell(text: str | None, ctx: ResolutionContext) -> str:
    return format_for_table(format_cross_references(text, ctx))
