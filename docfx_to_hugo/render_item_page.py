"""Logic for rendering the page of a type or member."""

from typing import Any

from docfx_to_hugo.format_cross_references import format_cross_references
from docfx_to_hugo.format_for_table import format_for_table
from docfx_to_hugo.front_matter import (
    ROOT_MENU_IDENTIFIER,
    menu_identifier,
    page_front_matter,
)
from docfx_to_hugo.item import Item
from docfx_to_hugo.item_kind import PLURAL_ITEM_KINDS, VALUE_KINDS, is_namespace_kind
from docfx_to_hugo.md_table import md_table
from docfx_to_hugo.reference_linker import link_to_type, xref
from docfx_to_hugo.render_syntax import render_syntax
from docfx_to_hugo.resolution_context import ResolutionContext


def render_item_page(
    item: Item,
    ctx: ResolutionContext,
    weight: int,
    *,
    project_name: str = "Yarn Spinner",
    code_language: str = "csharp",
) -> str:
    """Render a type or member page in Markdown."""
    parts = [_render_front_matter(item, ctx, weight)]

    parts += ['<div class="class-metadata">', ""]
    parts.append(", ".join(_render_metadata(item, ctx)))
    parts += ["</div>", ""]

    if item.is_obsolete:
        parts += [
            "{{<note>}}",
            (
                f"This {item.kind.lower()} is **obsolete** and may be removed from a "
                f"future version of {project_name}. {item.obsolete_message}"
            ).rstrip(),
            "{{</note>}}",
            "",
        ]

    parts += [format_cross_references(item.summary, ctx) or "", ""]

    if item.syntax is not None and item.syntax.content:
        parts += [f"```{code_language}", item.syntax.content, "```"]

    if item.remarks is not None:
        parts += ["## Remarks", format_cross_references(item.remarks, ctx) or ""]

    if item.example:
        parts.append("## Example" if len(item.example) == 1 else "## Examples")
        for example in item.example:
            parts += [format_cross_references(example, ctx) or "", ""]

    if item.syntax is not None:
        parts.append("")
        parts.extend(render_syntax(item, item.syntax, ctx))

    parts.append("")
    parts.extend(_render_children(item, ctx))
    parts.extend(_render_exceptions(item, ctx))
    parts.extend(_render_see_also(item, ctx))
    parts.extend(_render_source(item))

    return "\n".join(parts).rstrip() + "\n"


def _render_front_matter(item: Item, ctx: ResolutionContext, weight: int) -> str:
    parent = ctx.store.get(item.parent)
    menu: dict[str, Any] = {
        "identifier": menu_identifier(item, ctx),
        "parent": menu_identifier(parent, ctx) if parent else ROOT_MENU_IDENTIFIER,
        "title": item.name,
        "weight": weight,
    }
    extra: dict[str, Any] = {}
    lastmod = _commit_date(item)
    if lastmod is not None:
        extra["lastmod"] = lastmod
    title = f"{item.display_name or item.name} {item.kind}"
    return page_front_matter(title, menu, **extra)


def _commit_date(item: Item) -> Any:
    remote = item.source.remote if item.source else None
    commit = remote.commit if remote else None
    author = commit.author if commit else None
    return author.date if author else None


def _render_metadata(item: Item, ctx: ResolutionContext) -> list[str]:
    metadata = []
    parent = ctx.store.get(item.parent)
    if parent is not None and not is_namespace_kind(parent.kind):
        metadata.append(f"Parent: {link_to_type(parent.uid, ctx)}")
    if item.namespace:
        metadata.append(f"Namespace: {link_to_type(item.namespace, ctx)}")
    if item.assemblies:
        assemblies = [
            a if a.lower().endswith(".dll") else f"{a}.dll" for a in item.assemblies
        ]
        metadata.append(f"Assembly: {', '.join(assemblies)}")
    return metadata


def _render_children(item: Item, ctx: ResolutionContext) -> list[str]:
    """Render one table per kind of child (methods, fields, properties...)."""
    groups: dict[str, list[Item]] = {}
    for child in ctx.store.children_of(item):
        if child.do_not_document:
            continue
        groups.setdefault(child.kind, []).append(child)

    parts = []
    for kind, children in groups.items():
        rows = []
        for child in children:
            description = format_for_table(format_cross_references(child.summary, ctx))
            if child.is_obsolete:
                description = "*Obsolete*" + (f": {description}" if description else "")
            link = f"[{format_for_table(child.name)}]({xref(child, ctx)})"
            rows.append([link, description])
        table = md_table(["Name", "Description"], rows)
        parts += [f"## {PLURAL_ITEM_KINDS[kind]}", table]
    return parts


def _render_exceptions(item: Item, ctx: ResolutionContext) -> list[str]:
    if not item.exceptions:
        return []
    rows = [
        [
            link_to_type(e.type, ctx),
            format_for_table(format_cross_references(e.description, ctx)),
        ]
        for e in item.exceptions
    ]
    return ["## Exceptions", md_table(["Exception", "Description"], rows)]


def see_also_uids(item: Item, ctx: ResolutionContext) -> list[str]:
    """Collect the UIDs listed under See Also.

    Starts from the authored ``seealso`` entries. Fields and properties also get
    their internally documented parameter and return types, except namespaces
    and types under an external authority. The item never lists itself.
    """
    uids = list(item.see_also)

    if item.syntax is not None and item.kind in VALUE_KINDS:
        candidates = [p.type for p in item.syntax.parameters]
        if item.syntax.return_value is not None:
            candidates.append(item.syntax.return_value.type)
        for uid in candidates:
            if uid is None:
                continue
            target = ctx.store.get(uid)
            if target is None or is_namespace_kind(target.kind):
                continue
            if any(uid.startswith(a.prefix) for a in ctx.authorities):
                continue
            uids.append(uid)

    return [uid for uid in dict.fromkeys(uids) if uid != item.uid]


def _render_see_also(item: Item, ctx: ResolutionContext) -> list[str]:
    uids = see_also_uids(item, ctx)
    if not uids:
        return []
    parts = ["## See Also"]
    for uid in uids:
        line = f"* {link_to_type(uid, ctx)}"
        target = ctx.store.get(uid)
        if target is not None:
            line += f": {format_cross_references(target.summary, ctx) or ''}"
        parts.append(line)
    return parts


def _render_source(item: Item) -> list[str]:
    source = item.source
    if source is None or source.path is None:
        return []
    line = source.start_line + 1
    url = source.repo_url
    location = f"[{source.path}]({url})" if url else f"`{source.path}`"
    return ["## Source", f"Defined in {location}, line {line}."]
