"""External documentation sites that identifiers can be linked to by prefix."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from docfx_to_hugo.errors import StructuralError

# C# keyword spellings of built-in types. Readers write "string", not
# "System.String", so these replace the last UID segment for display.
BUILTIN_TYPE_ALIASES: dict[str, str] = {
    "System.String": "string",
    "System.Boolean": "bool",
    "System.Single": "float",
    "System.Double": "double",
    "System.Decimal": "decimal",
    "System.Byte": "byte",
    "System.SByte": "sbyte",
    "System.Char": "char",
    "System.Int16": "short",
    "System.UInt16": "ushort",
    "System.Int32": "int",
    "System.UInt32": "uint",
    "System.Int64": "long",
    "System.UInt64": "ulong",
    "System.Object": "object",
    "System.Void": "void",
}


@dataclass(frozen=True)
class ExternalAuthority:
    """One row of the authority table.

    ``url_template`` receives the identifier, with its parameter list and first
    ``strip_segments`` dotted segments removed, as ``{id}``.
    """

    prefix: str
    strip_segments: int
    url_template: str
    aliases: Mapping[str, str] = field(default_factory=dict)

    def matches(self, uid: str) -> bool:
        """Check whether the identifier belongs to this authority."""
        return uid.startswith(self.prefix)

    def url_for(self, uid: str) -> str:
        """Build the documentation URL for a parameter-less identifier."""
        docs_id = ".".join(uid.split(".")[self.strip_segments :])
        return self.url_template.format(id=docs_id)

    def display_name(self, uid: str) -> str:
        """Return the alias for the identifier, or its last dotted segment."""
        alias = self.aliases.get(uid)
        if alias is not None:
            return alias
        return uid.split(".")[-1]


DEFAULT_AUTHORITIES: tuple[ExternalAuthority, ...] = (
    ExternalAuthority(
        prefix="System.",
        strip_segments=0,
        url_template="https://docs.microsoft.com/dotnet/api/{id}",
        aliases=BUILTIN_TYPE_ALIASES,
    ),
    # Unity UI links to the package manual rather than the API reference, since
    # the manual is far more useful. Some generated links may not exist.
    ExternalAuthority(
        prefix="UnityEngine.UI.",
        strip_segments=2,
        url_template=(
            "https://docs.unity3d.com/Packages/com.unity.ugui@1.0"
            "/manual/script-{id}.html"
        ),
    ),
    ExternalAuthority(
        prefix="UnityEngine.",
        strip_segments=1,
        url_template="https://docs.unity3d.com/ScriptReference/{id}.html",
    ),
)


def match_authority(
    uid: str,
    authorities: Iterable[ExternalAuthority],
) -> ExternalAuthority | None:
    """Return the most specific authority whose prefix the identifier starts with.

    Prefixes may nest (``UnityEngine.UI.`` inside ``UnityEngine.``), so longer
    prefixes are tried first. Ties keep table order.
    """
    ordered = sorted(authorities, key=lambda a: len(a.prefix), reverse=True)
    for authority in ordered:
        if authority.matches(uid):
            return authority
    return None


def authorities_from_config(
    entries: list[dict[str, Any]],
) -> tuple[ExternalAuthority, ...]:
    """Build the authority table from the ``authorities`` configuration list."""
    authorities = []
    for entry in entries:
        try:
            authorities.append(
                ExternalAuthority(
                    prefix=str(entry["prefix"]),
                    strip_segments=int(entry.get("strip_segments", 0)),
                    url_template=str(entry["url_template"]),
                    aliases=dict(entry.get("aliases") or {}),
                )
            )
        except KeyError as e:
            msg = f"Authority entry {entry!r} is missing required key {e.args[0]!r}"
            raise StructuralError(msg) from e
    return tuple(authorities)
