"""Tests for reference resolution and cross-reference rewriting."""

from docfx_to_hugo.external_authority import (
    DEFAULT_AUTHORITIES,
    ExternalAuthority,
    match_authority,
)
from docfx_to_hugo.format_cross_references import format_cross_references
from docfx_to_hugo.item import Item, Reference
from docfx_to_hugo.item_store import ItemStore
from docfx_to_hugo.path_resolver import output_location
from docfx_to_hugo.reference_linker import hugo_ref, link_to_type, resolve_reference
from docfx_to_hugo.resolution_context import (
    ResolutionContext,
    build_resolution_context,
)

DIALOGUE_REF = '{{<ref "/api/Yarn/Dialogue/_index.md">}}'


def build_ctx(api_root: str = "api") -> ResolutionContext:
    """Build a small documentation set with one namespace and one class."""
    store = ItemStore()
    store.add_item(Item(uid="Yarn", kind="Namespace", name="Yarn"))
    store.add_item(
        Item(
            uid="Yarn.Dialogue",
            kind="Class",
            name="Dialogue",
            namespace="Yarn",
            parent="Yarn",
        )
    )
    store.add_reference(Reference(uid="Other.Thing", name="Thing"))
    store.add_reference(Reference(uid="System.String", name="String"))
    return build_resolution_context(store, api_root=api_root)


def test_internal_item_links_to_its_output_location() -> None:
    """Verify that internal links target the page the path resolver assigns."""
    ctx = build_ctx()
    resolved = resolve_reference("Yarn.Dialogue", ctx)

    assert resolved.internal
    assert resolved.display == "Dialogue"
    assert resolved.target == output_location(ctx.store.items["Yarn.Dialogue"], ctx)
    assert link_to_type("Yarn.Dialogue", ctx) == f"[`Dialogue`]({DIALOGUE_REF})"


def test_internal_array_keeps_suffix() -> None:
    """Verify that arrays of internal types link to the element type."""
    ctx = build_ctx()
    assert link_to_type("Yarn.Dialogue[]", ctx) == f"[`Dialogue[]`]({DIALOGUE_REF})"


def test_builtin_array_uses_alias_and_external_url() -> None:
    """Verify that System.String[] displays as string[] and links to .NET docs."""
    ctx = build_ctx()
    resolved = resolve_reference("System.String[]", ctx)

    assert resolved.display == "string[]"
    assert resolved.target == "https://docs.microsoft.com/dotnet/api/System.String"
    assert not resolved.internal
    assert link_to_type("System.String[]", ctx) == (
        "[`string[]`](https://docs.microsoft.com/dotnet/api/System.String)"
    )


def test_external_identifier_without_reference_record() -> None:
    """Verify that authority prefixes apply even to unrecorded identifiers."""
    ctx = build_ctx()
    resolved = resolve_reference("System.Collections.IEnumerator", ctx)

    assert resolved.display == "IEnumerator"
    assert resolved.target == (
        "https://docs.microsoft.com/dotnet/api/System.Collections.IEnumerator"
    )


def test_external_parameter_list_is_stripped() -> None:
    """Verify that method signatures link to the method's overload page."""
    ctx = build_ctx()
    resolved = resolve_reference(
        "System.String.Format(System.String,System.Object)", ctx
    )

    assert resolved.display == "Format"
    assert resolved.target == (
        "https://docs.microsoft.com/dotnet/api/System.String.Format"
    )


def test_nested_authority_prefix_wins() -> None:
    """Verify that UnityEngine.UI identifiers use the UI manual, not the API."""
    ctx = build_ctx()

    button = resolve_reference("UnityEngine.UI.Button", ctx)
    game_object = resolve_reference("UnityEngine.GameObject", ctx)

    assert button.target == (
        "https://docs.unity3d.com/Packages/com.unity.ugui@1.0/manual/script-Button.html"
    )
    assert game_object.target == (
        "https://docs.unity3d.com/ScriptReference/GameObject.html"
    )


def test_match_authority_ignores_table_order() -> None:
    """Verify that the longest matching prefix wins regardless of order."""
    reversed_table = tuple(reversed(DEFAULT_AUTHORITIES))
    authority = match_authority("UnityEngine.UI.Text", reversed_table)

    assert authority is not None
    assert authority.prefix == "UnityEngine.UI."
    assert match_authority("Yarn.Dialogue", reversed_table) is None


def test_custom_authority() -> None:
    """Verify that an authority strips the configured number of segments."""
    authority = ExternalAuthority(
        prefix="Ink.Runtime.",
        strip_segments=2,
        url_template="https://example.org/ink/{id}",
        aliases={"Ink.Runtime.Story": "Story (Ink)"},
    )

    assert authority.url_for("Ink.Runtime.Choice") == "https://example.org/ink/Choice"
    assert authority.display_name("Ink.Runtime.Story") == "Story (Ink)"
    assert authority.display_name("Ink.Runtime.Choice") == "Choice"


def test_known_reference_renders_unlinked_name() -> None:
    """Verify that references outside any authority render as plain code."""
    ctx = build_ctx()
    resolved = resolve_reference("Other.Thing", ctx)

    assert resolved.display == "Thing"
    assert not resolved.linked
    assert link_to_type("Other.Thing", ctx) == "`Thing`"


def test_unknown_identifier_renders_as_is() -> None:
    """Verify that unresolvable identifiers degrade to plain code."""
    ctx = build_ctx()
    assert link_to_type("Mystery.Type[]", ctx) == "`Mystery.Type[]`"


def test_hugo_ref_respects_api_root() -> None:
    """Verify that the API root is normalized and used in ref shortcodes."""
    ctx = build_ctx(api_root="/docs/api/")

    assert ctx.api_root == "docs/api"
    assert hugo_ref("Yarn/_index", ctx.api_root) == (
        '{{<ref "/docs/api/Yarn/_index.md">}}'
    )


def test_format_cross_references() -> None:
    """Verify that xref elements, entities and shortcode markers are rewritten."""
    ctx = build_ctx()
    text = (
        'Call <xref href="Yarn.Dialogue" data-throw-if-not-resolved="false"></xref>'
        " &amp; then {{|note|}}"
    )

    assert format_cross_references(text, ctx) == (
        f"Call [`Dialogue`]({DIALOGUE_REF}) & then {{{{<note>}}}}"
    )


def test_format_cross_references_decodes_commas() -> None:
    """Verify that encoded commas in xref targets are decoded."""
    ctx = build_ctx()
    text = '<xref href="Yarn.Dialogue.Run(System.String%2cSystem.Int32)"></xref>'

    assert format_cross_references(text, ctx) == (
        "`Yarn.Dialogue.Run(System.String,System.Int32)`"
    )


def test_format_cross_references_passes_empty_text() -> None:
    """Verify that missing text is returned unchanged."""
    ctx = build_ctx()
    assert format_cross_references(None, ctx) is None
    assert format_cross_references("", ctx) == ""
