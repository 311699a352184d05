"""Logic for reading DocFX overwrite files.

An overwrite file is a YAML header between two ``---`` lines, followed by
Markdown::

    ---
    uid: Yarn.Dialogue
    remarks: *content
    ---
    Text that becomes the remarks of Yarn.Dialogue.

DocFX marks "use the Markdown body" with ``*content``, which YAML would read as
an alias to an undefined anchor. The marker is swapped for a placeholder before
the header is parsed, and the placeholder is swapped for the body afterwards.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from docfx_to_hugo.errors import (
    MissingInputError,
    OverwriteFormatError,
    OverwriteValidationError,
)

HEADER_DELIMITER = "---"
DEFAULT_CONTENT_MARKER = "*content"
CONTENT_PLACEHOLDER = "__content__"


@dataclass
class OverwriteDocument:
    """A partial item read from an overwrite file."""

    source: str
    fields: dict[str, Any]  # header keys, DocFX camelCase
    body: str

    @property
    def uid(self) -> str:
        """The UID of the item this document overwrites."""
        return str(self.fields["uid"])


def parse_overwrite_text(
    text: str,
    source: str,
    content_marker: str = DEFAULT_CONTENT_MARKER,
) -> OverwriteDocument:
    """Parse the contents of an overwrite file."""
    lines = text.splitlines()

    if not lines or lines[0].rstrip() != HEADER_DELIMITER:
        msg = f"Expected overwrite file {source} to start with '{HEADER_DELIMITER}'"
        raise OverwriteFormatError(msg)

    end = _find_header_end(lines)
    if end is None:
        msg = f"Unexpected end of file in overwrite file {source}"
        raise OverwriteFormatError(msg)

    header = "\n".join(
        line.replace(content_marker, CONTENT_PLACEHOLDER) for line in lines[1:end]
    )
    body = "\n".join(lines[end + 1 :])

    try:
        fields = yaml.safe_load(header) or {}
    except yaml.YAMLError as e:
        msg = f"Overwrite file {source} has a malformed header: {e}"
        raise OverwriteFormatError(msg) from e
    if not isinstance(fields, dict):
        msg = f"Overwrite file {source} header must be a mapping of fields"
        raise OverwriteFormatError(msg)

    uid = fields.get("uid")
    if uid is None or not str(uid).strip():
        msg = f"Overwrite file {source} does not specify a UID"
        raise OverwriteValidationError(msg)

    for key, value in fields.items():
        if value == CONTENT_PLACEHOLDER:
            fields[key] = body

    return OverwriteDocument(source=source, fields=fields, body=body)


def load_overwrite_documents(
    directory: Path,
    content_marker: str = DEFAULT_CONTENT_MARKER,
) -> list[OverwriteDocument]:
    """Read every ``*.md`` file below ``directory``, in path order."""
    if not directory.is_dir():
        msg = f"{directory} is not a directory"
        raise MissingInputError(msg)
    return [
        parse_overwrite_text(p.read_text(encoding="utf-8"), str(p), content_marker)
        for p in sorted(directory.rglob("*.md"))
    ]


def _find_header_end(lines: list[str]) -> int | None:
    for i in range(1, len(lines)):
        if lines[i].rstrip() == HEADER_DELIMITER:
            return i
    return None
