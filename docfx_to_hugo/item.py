"""Data models for representing DocFX items and references."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime

from docfx_to_hugo.strip_parameter_list import strip_parameter_list

OBSOLETE_ATTRIBUTE = "System.ObsoleteAttribute"


@dataclass
class Parameter:
    """A parameter in an item's syntax."""

    id: str
    type: str | None = None
    description: str | None = None


@dataclass
class TypeParameter:
    """A generic type parameter in an item's syntax."""

    id: str
    description: str | None = None


@dataclass
class ReturnValue:
    """The return type of a method, operator or delegate."""

    type: str | None = None
    description: str | None = None


@dataclass
class Syntax:
    """The declaration of an item: signature text, parameters and return value."""

    content: str | None = None
    remarks: str | None = None
    parameters: list[Parameter] = field(default_factory=list)
    type_parameters: list[TypeParameter] = field(default_factory=list)
    return_value: ReturnValue | None = None


@dataclass
class ItemException:
    """An exception that an item is documented to throw."""

    type: str
    description: str | None = None


@dataclass
class AttributeArgument:
    """An argument passed to an attribute."""

    type: str | None = None
    value: str | None = None


@dataclass
class Attribute:
    """An attribute (e.g. ``[Obsolete]``) applied to an item."""

    type: str
    arguments: list[AttributeArgument] = field(default_factory=list)


@dataclass
class GitUser:
    """The author or committer of a git commit."""

    name: str | None = None
    email: str | None = None
    date: datetime | str | None = None


@dataclass
class GitCommit:
    """The commit that an item's source was read from."""

    id: str | None = None
    message: str | None = None
    author: GitUser | None = None
    committer: GitUser | None = None


@dataclass
class GitSource:
    """The git repository that an item's source lives in."""

    repo: str | None = None
    branch: str | None = None
    path: str | None = None
    commit: GitCommit | None = None

    @property
    def repo_url(self) -> str | None:
        """Browsable URL of the file, converting ``git@host:org/repo.git`` remotes.

        Assumes the host follows GitHub conventions for ``/blob/{branch}/{path}``.
        """
        if self.repo is None:
            return None
        url = re.sub(r"^.*?@", "https://", self.repo)
        url = re.sub(r"^(https://[^/:]*?):", r"\1/", url)
        url = re.sub(r"\.git$", "", url)
        return f"{url.rstrip('/')}/blob/{self.branch}/{self.path}"


@dataclass
class Source:
    """Where an item was defined in the documented source code."""

    path: str | None = None
    start_line: int = 0
    end_line: int = 0
    remote: GitSource | None = None

    @property
    def repo_url(self) -> str | None:
        """Browsable URL of the defining line, if the remote is known."""
        if self.remote is None or self.remote.repo_url is None:
            return None
        return f"{self.remote.repo_url}#L{self.start_line + 1}"


@dataclass
class Item:
    """A namespace, type or member owned by this documentation set."""

    uid: str
    kind: str  # one of item_kind.ITEM_KINDS
    name: str
    id: str | None = None
    name_with_type: str | None = None
    full_name: str | None = None
    namespace: str | None = None
    parent: str | None = None
    children: list[str] = field(default_factory=list)
    inherited_members: list[str] = field(default_factory=list)
    overload: str | None = None
    summary: str | None = None
    remarks: str | None = None
    example: list[str] = field(default_factory=list)
    syntax: Syntax | None = None
    exceptions: list[ItemException] = field(default_factory=list)
    attributes: list[Attribute] = field(default_factory=list)
    source: Source | None = None
    assemblies: list[str] = field(default_factory=list)
    see_also: list[str] = field(default_factory=list)
    do_not_document: bool = False

    @property
    def full_name_without_namespace(self) -> str | None:
        """The full name with a leading ``{namespace}.`` removed."""
        if self.full_name is None or self.namespace is None:
            return self.full_name
        return _remove_prefix(self.full_name, self.namespace + ".")

    @property
    def display_name(self) -> str | None:
        """The name used in page titles, e.g. ``Dialogue.Stop`` for a member."""
        if self.full_name is None:
            return None
        last = strip_parameter_list(self.full_name).split(".")[-1]
        display = ".".join(n for n in (self.parent, last) if n)
        if self.namespace is None:
            return display
        return _remove_prefix(display, self.namespace + ".")

    @property
    def is_obsolete(self) -> bool:
        """Whether the item carries ``[Obsolete]``."""
        return any(a.type == OBSOLETE_ATTRIBUTE for a in self.attributes)

    @property
    def obsolete_message(self) -> str | None:
        """The message passed to ``[Obsolete]``, or None if not obsolete."""
        for a in self.attributes:
            if a.type == OBSOLETE_ATTRIBUTE:
                if not a.arguments:
                    return ""
                return a.arguments[0].value or ""
        return None


@dataclass(frozen=True)
class Reference:
    """A type referred to by the documented code, possibly defined elsewhere."""

    uid: str
    name: str | None = None


def _remove_prefix(text: str, prefix: str) -> str:
    if text.startswith(prefix):
        return text[len(prefix) :]
    return text
