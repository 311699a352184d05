"""Logic for resolving identifiers to internal pages or external documentation.

Resolution order:

1. Strip a trailing ``[]`` (array-ness is kept for display).
2. An item in the store links to its page, titled with the item's name.
3. Anything else that an external authority claims links to that authority's
   site, titled with a built-in alias or the last segment of the identifier.
4. A known reference renders as unlinked code using the reference's name.
5. Otherwise the identifier itself renders as unlinked code.
"""

import posixpath
from dataclasses import dataclass

from docfx_to_hugo.external_authority import match_authority
from docfx_to_hugo.format_for_table import format_for_table
from docfx_to_hugo.item import Item
from docfx_to_hugo.path_resolver import output_location
from docfx_to_hugo.resolution_context import ResolutionContext
from docfx_to_hugo.strip_parameter_list import strip_parameter_list

ARRAY_SUFFIX = "[]"


@dataclass(frozen=True)
class ResolvedReference:
    """The outcome of resolving one identifier."""

    display: str  # includes the array suffix
    target: str | None = None  # output location (internal) or URL (external)
    internal: bool = False

    @property
    def linked(self) -> bool:
        """Whether the reference resolves to a page."""
        return self.target is not None


def resolve_reference(uid: str, ctx: ResolutionContext) -> ResolvedReference:
    """Resolve an identifier such as ``System.String[]`` or ``Ns.Type.M(Int32)``."""
    is_array = uid.endswith(ARRAY_SUFFIX)
    if is_array:
        uid = uid[: -len(ARRAY_SUFFIX)]
    array_suffix = ARRAY_SUFFIX if is_array else ""

    item = ctx.store.get(uid)
    if item is not None:
        return ResolvedReference(
            display=item.name + array_suffix,
            target=output_location(item, ctx),
            internal=True,
        )

    authority = match_authority(uid, ctx.authorities)
    if authority is not None:
        docs_uid = strip_parameter_list(uid)
        return ResolvedReference(
            display=authority.display_name(docs_uid) + array_suffix,
            target=authority.url_for(docs_uid),
        )

    ref = ctx.store.references.get(uid)
    if ref is not None:
        return ResolvedReference(display=(ref.name or ref.uid) + array_suffix)

    return ResolvedReference(display=uid + array_suffix)


def hugo_ref(location: str, api_root: str) -> str:
    """Return a Hugo ``ref`` shortcode pointing at a generated page."""
    return f'{{{{<ref "/{posixpath.join(api_root, location)}.md">}}}}'


def xref(item: Item, ctx: ResolutionContext) -> str:
    """Return the link target for an internal item's page."""
    return hugo_ref(output_location(item, ctx), ctx.api_root)


def link_to_type(uid: str, ctx: ResolutionContext) -> str:
    """Render an identifier as Markdown: a code-styled link, or plain code."""
    resolved = resolve_reference(uid, ctx)
    if not resolved.linked:
        return f"`{resolved.display}`"
    href = resolved.target
    if resolved.internal:
        href = hugo_ref(resolved.target, ctx.api_root)
    return f"[`{format_for_table(resolved.display)}`]({href})"
