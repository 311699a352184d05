"""Logic for mapping items to unique output locations.

A location is a path relative to the API root, without the ``.md`` extension.
Namespaces live at ``{uid}/_index``; types get a folder of their own under their
namespace (``{namespace}/{Type}/_index``); members are files inside a folder
named after their parent type (``{namespace}/{Type}/{short uid}``).
"""

import posixpath

from docfx_to_hugo.errors import StructuralError
from docfx_to_hugo.item import Item
from docfx_to_hugo.item_kind import is_member_kind, is_namespace_kind
from docfx_to_hugo.resolution_context import ResolutionContext
from docfx_to_hugo.strip_namespace_prefix import strip_namespace_prefix

INDEX_PAGE = "_index"


def item_path(item: Item, ctx: ResolutionContext) -> str:
    """Return the item's path relative to its namespace directory."""
    case_suffix = ctx.disambiguation.case_suffix(item)

    if is_namespace_kind(item.kind):
        path = f"{item.uid}{case_suffix}/{INDEX_PAGE}"
    elif is_member_kind(item.kind):
        parent = _member_parent(item, ctx)
        parent_dir = strip_namespace_prefix(parent.uid, parent.namespace)
        short_uid = ctx.disambiguation.short_uid(item)
        path = f"{parent_dir}/{short_uid}{case_suffix}"
    else:
        type_dir = strip_namespace_prefix(item.uid, item.namespace)
        path = f"{type_dir}{case_suffix}/{INDEX_PAGE}"

    # "#" marks explicit interface implementations; "`" marks generic arity.
    return path.replace("#", "_").replace("`", "-")


def output_location(item: Item, ctx: ResolutionContext) -> str:
    """Return the item's location relative to the API root."""
    path = item_path(item, ctx)
    if is_namespace_kind(item.kind) or not item.namespace:
        return path
    return posixpath.join(item.namespace, path)


def _member_parent(item: Item, ctx: ResolutionContext) -> Item:
    if item.parent is None:
        msg = f"{item.kind} {item.uid} has no parent type"
        raise StructuralError(msg)
    parent = ctx.store.require(item.parent, wanted_by=item.uid)
    if is_namespace_kind(parent.kind):
        msg = (
            f"Parent of item {item.uid} (a {item.kind}) is a namespace; members "
            "must belong to a type"
        )
        raise StructuralError(msg)
    return parent
