"""Logic for turning parsed DocFX YAML mappings into item dataclasses."""

from typing import Any

from docfx_to_hugo.errors import StructuralError
from docfx_to_hugo.item import (
    Attribute,
    AttributeArgument,
    GitCommit,
    GitSource,
    GitUser,
    Item,
    ItemException,
    Parameter,
    Reference,
    ReturnValue,
    Source,
    Syntax,
    TypeParameter,
)
from docfx_to_hugo.item_kind import ITEM_KINDS


def parse_item(it: dict[str, Any]) -> Item:
    """Build an Item from one entry of a DocFX document's ``items`` list."""
    uid = str(it["uid"])
    kind = str(it.get("type") or "").strip()
    if kind not in ITEM_KINDS:
        msg = f"Item {uid} has unsupported type {kind!r}"
        raise StructuralError(msg)

    return Item(
        uid=uid,
        kind=kind,
        name=str(it.get("name") or uid),
        id=_opt_str(it.get("id")),
        name_with_type=_opt_str(it.get("nameWithType")),
        full_name=_opt_str(it.get("fullName")),
        namespace=_opt_str(it.get("namespace")),
        parent=_opt_str(it.get("parent")),
        children=_str_list(it.get("children")),
        inherited_members=_str_list(it.get("inheritedMembers")),
        overload=_opt_str(it.get("overload")),
        summary=_opt_str(it.get("summary")),
        remarks=_opt_str(it.get("remarks")),
        example=_str_list(it.get("example")),
        syntax=_parse_syntax(it.get("syntax")),
        exceptions=[
            ItemException(
                type=str(e.get("type")),
                description=_opt_str(e.get("description")),
            )
            for e in it.get("exceptions") or []
            if isinstance(e, dict) and e.get("type")
        ],
        attributes=[
            _parse_attribute(a)
            for a in it.get("attributes") or []
            if isinstance(a, dict)
        ],
        source=_parse_source(it.get("source")),
        assemblies=_str_list(it.get("assemblies")),
        see_also=[
            str(s.get("linkId"))
            for s in it.get("seealso") or []
            if isinstance(s, dict) and s.get("linkId")
        ],
        do_not_document=bool(it.get("doNotDocument", False)),
    )


def parse_reference(ref: dict[str, Any]) -> Reference:
    """Build a Reference from one entry of a DocFX document's ``references`` list."""
    return Reference(uid=str(ref["uid"]), name=_opt_str(ref.get("name")))


def _parse_syntax(raw: Any) -> Syntax | None:
    if not isinstance(raw, dict):
        return None
    ret = raw.get("return")
    return Syntax(
        content=_opt_str(raw.get("content")),
        remarks=_opt_str(raw.get("remarks")),
        parameters=[
            Parameter(
                id=str(p.get("id") or ""),
                type=_opt_str(p.get("type")),
                description=_opt_str(p.get("description")),
            )
            for p in raw.get("parameters") or []
            if isinstance(p, dict)
        ],
        type_parameters=[
            TypeParameter(
                id=str(p.get("id") or ""),
                description=_opt_str(p.get("description")),
            )
            for p in raw.get("typeParameters") or []
            if isinstance(p, dict)
        ],
        return_value=(
            ReturnValue(
                type=_opt_str(ret.get("type")),
                description=_opt_str(ret.get("description")),
            )
            if isinstance(ret, dict)
            else None
        ),
    )


def _parse_attribute(raw: dict[str, Any]) -> Attribute:
    return Attribute(
        type=str(raw.get("type") or ""),
        arguments=[
            AttributeArgument(
                type=_opt_str(a.get("type")),
                value=_opt_str(a.get("value")),
            )
            for a in raw.get("arguments") or []
            if isinstance(a, dict)
        ],
    )


def _parse_source(raw: Any) -> Source | None:
    if not isinstance(raw, dict):
        return None
    remote = raw.get("remote")
    return Source(
        path=_opt_str(raw.get("path")),
        start_line=int(raw.get("startLine") or 0),
        end_line=int(raw.get("endLine") or 0),
        remote=_parse_git_source(remote) if isinstance(remote, dict) else None,
    )


def _parse_git_source(raw: dict[str, Any]) -> GitSource:
    commit = raw.get("commit")
    return GitSource(
        repo=_opt_str(raw.get("repo")),
        branch=_opt_str(raw.get("branch")),
        path=_opt_str(raw.get("path")),
        commit=_parse_commit(commit) if isinstance(commit, dict) else None,
    )


def _parse_commit(raw: dict[str, Any]) -> GitCommit:
    return GitCommit(
        id=_opt_str(raw.get("id")),
        message=_opt_str(raw.get("message")),
        author=_parse_user(raw.get("author")),
        committer=_parse_user(raw.get("committer")),
    )


def _parse_user(raw: Any) -> GitUser | None:
    if not isinstance(raw, dict):
        return None
    return GitUser(
        name=_opt_str(raw.get("name")),
        email=_opt_str(raw.get("email")),
        date=raw.get("date"),
    )


def _opt_str(v: object) -> str | None:
    return None if v is None else str(v)


def _str_list(v: object) -> list[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [str(x) for x in v if x is not None]
    return [str(v)]
