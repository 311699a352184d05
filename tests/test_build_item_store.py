"""Tests for loading DocFX metadata into the item store."""

from pathlib import Path

import pytest

from docfx_to_hugo.build_item_store import (
    build_item_store,
    document_path,
    iter_toc_uids,
)
from docfx_to_hugo.errors import MissingInputError, StructuralError
from docfx_to_hugo.item import Item
from docfx_to_hugo.item_store import ItemStore
from docfx_to_hugo.load_yaml_document import load_yaml_document
from docfx_to_hugo.parse_item import parse_item

TOC = """\
### YamlMime:TableOfContent
- uid: Yarn
  name: Yarn
  items:
  - uid: Yarn.Dialogue
    name: Dialogue
  - uid: "Yarn.Cache`1"
    name: Cache<T>
"""

NAMESPACE_DOC = """\
### YamlMime:ManagedReference
items:
- uid: Yarn
  id: Yarn
  name: Yarn
  type: Namespace
  summary: The Yarn runtime.
  children:
  - Yarn.Dialogue
  - "Yarn.Cache`1"
references:
- uid: Yarn.Dialogue
  name: Dialogue
"""

DIALOGUE_DOC = """\
### YamlMime:ManagedReference
items:
- uid: Yarn.Dialogue
  id: Dialogue
  parent: Yarn
  children:
  - Yarn.Dialogue.Stop(System.Int32)
  name: Dialogue
  nameWithType: Dialogue
  fullName: Yarn.Dialogue
  type: Class
  namespace: Yarn
  assemblies:
  - YarnSpinner
  summary: Runs dialogue.
  seealso:
  - linkId: Yarn.Line
    commentId: T:Yarn.Line
  inheritedMembers:
  - System.Object.ToString
- uid: Yarn.Dialogue.Stop(System.Int32)
  id: Stop(System.Int32)
  parent: Yarn.Dialogue
  name: Stop(int)
  fullName: Yarn.Dialogue.Stop(System.Int32)
  type: Method
  namespace: Yarn
  source:
    remote:
      path: YarnSpinner/Dialogue.cs
      branch: main
      repo: git@github.com:YarnSpinnerTool/YarnSpinner.git
    path: YarnSpinner/Dialogue.cs
    startLine: 41
  syntax:
    content: public void Stop(int code)
    parameters:
    - id: code
      type: System.Int32
      description: The exit code.
    return:
      type: System.Void
  overload: Yarn.Dialogue.Stop*
  attributes:
  - type: System.ObsoleteAttribute
    ctor: System.ObsoleteAttribute.#ctor(System.String)
    arguments:
    - type: System.String
      value: Use Halt instead.
  exceptions:
  - type: System.InvalidOperationException
    commentId: T:System.InvalidOperationException
    description: Dialogue is not running.
references:
- uid: System.Int32
  name: int
"""

CACHE_DOC = """\
items:
- uid: "Yarn.Cache`1"
  name: Cache<T>
  name.vb: Cache(Of T)
  nameWithType.vb: =
  type: Class
  namespace: Yarn
  parent: Yarn
"""


def write_metadata(yml_dir: Path) -> None:
    """Write a small DocFX metadata folder."""
    (yml_dir / "toc.yml").write_text(TOC, encoding="utf-8")
    (yml_dir / "Yarn.yml").write_text(NAMESPACE_DOC, encoding="utf-8")
    (yml_dir / "Yarn.Dialogue.yml").write_text(DIALOGUE_DOC, encoding="utf-8")
    (yml_dir / "Yarn.Cache-1.yml").write_text(CACHE_DOC, encoding="utf-8")


def test_iter_toc_uids_lists_children_first() -> None:
    """Verify that nested entries are visited before their parent."""
    toc = [
        {"uid": "A", "items": [{"uid": "A.B", "items": [{"uid": "A.B.C"}]}]},
        {"uid": "D"},
    ]
    assert list(iter_toc_uids(toc)) == ["A.B.C", "A.B", "A", "D"]


def test_document_path_replaces_backticks(tmp_path: Path) -> None:
    """Verify that generic UIDs map to dash-named files."""
    assert document_path(tmp_path, "Yarn.Cache`1") == tmp_path / "Yarn.Cache-1.yml"


def test_build_item_store(tmp_path: Path) -> None:
    """Verify that every document named by the TOC is loaded."""
    write_metadata(tmp_path)

    store = build_item_store(tmp_path)

    assert set(store.items) == {
        "Yarn",
        "Yarn.Dialogue",
        "Yarn.Dialogue.Stop(System.Int32)",
        "Yarn.Cache`1",
    }
    assert set(store.references) == {"Yarn.Dialogue", "System.Int32"}
    assert store.references["System.Int32"].name == "int"
    assert not store.frozen


def test_parsed_item_fields(tmp_path: Path) -> None:
    """Verify that nested DocFX records are parsed into dataclasses."""
    write_metadata(tmp_path)
    store = build_item_store(tmp_path)

    dialogue = store.items["Yarn.Dialogue"]
    assert dialogue.kind == "Class"
    assert dialogue.assemblies == ["YarnSpinner"]
    assert dialogue.see_also == ["Yarn.Line"]
    assert dialogue.inherited_members == ["System.Object.ToString"]

    stop = store.items["Yarn.Dialogue.Stop(System.Int32)"]
    assert stop.overload == "Yarn.Dialogue.Stop*"
    assert stop.syntax is not None
    assert stop.syntax.parameters[0].type == "System.Int32"
    assert stop.syntax.return_value is not None
    assert stop.syntax.return_value.type == "System.Void"
    assert stop.is_obsolete
    assert stop.obsolete_message == "Use Halt instead."
    assert stop.exceptions[0].type == "System.InvalidOperationException"
    assert stop.display_name == "Dialogue.Stop"
    assert stop.source is not None
    assert stop.source.repo_url == (
        "https://github.com/YarnSpinnerTool/YarnSpinner"
        "/blob/main/YarnSpinner/Dialogue.cs#L42"
    )


def test_vb_equals_sign_is_quoted(tmp_path: Path) -> None:
    """Verify that a bare '=' VB name does not break YAML parsing."""
    p = tmp_path / "op.yml"
    p.write_text(CACHE_DOC, encoding="utf-8")

    doc = load_yaml_document(p)

    assert doc["items"][0]["nameWithType.vb"] == "="


def test_missing_input_directory(tmp_path: Path) -> None:
    """Verify that a missing metadata folder is fatal."""
    with pytest.raises(MissingInputError):
        build_item_store(tmp_path / "missing")


def test_missing_toc(tmp_path: Path) -> None:
    """Verify that a folder without toc.yml is fatal."""
    with pytest.raises(MissingInputError):
        build_item_store(tmp_path)


def test_missing_document(tmp_path: Path) -> None:
    """Verify that a TOC entry without its document is fatal."""
    write_metadata(tmp_path)
    (tmp_path / "Yarn.Dialogue.yml").unlink()

    with pytest.raises(MissingInputError, match="Yarn.Dialogue.yml"):
        build_item_store(tmp_path)


def test_unknown_item_type_is_fatal() -> None:
    """Verify that item types outside the known set are rejected."""
    with pytest.raises(StructuralError, match="Widget"):
        parse_item({"uid": "Yarn.Thing", "name": "Thing", "type": "Widget"})


def test_store_rejects_changes_after_freeze() -> None:
    """Verify that store membership is fixed once frozen."""
    store = ItemStore()
    store.freeze()

    with pytest.raises(StructuralError):
        store.add_item(Item(uid="Yarn", kind="Namespace", name="Yarn"))


def test_children_of_can_skip_inherited_members() -> None:
    """Verify that inherited members can be excluded from a child listing."""
    store = ItemStore()
    store.add_item(
        Item(
            uid="Yarn.Base",
            kind="Class",
            name="Base",
            children=["Yarn.Base.Run", "Yarn.Base.Stop"],
            inherited_members=["Yarn.Base.Stop"],
        )
    )
    store.add_item(Item(uid="Yarn.Base.Run", kind="Method", name="Run()"))
    store.add_item(Item(uid="Yarn.Base.Stop", kind="Method", name="Stop()"))
    base = store.items["Yarn.Base"]

    assert [c.uid for c in store.children_of(base)] == [
        "Yarn.Base.Run",
        "Yarn.Base.Stop",
    ]
    assert [c.uid for c in store.children_of(base, include_inherited=False)] == [
        "Yarn.Base.Run"
    ]
