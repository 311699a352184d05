"""Logic for loading DocFX YAML files."""

import re
from pathlib import Path
from typing import Any

import yaml

from docfx_to_hugo.errors import MissingInputError, StructuralError


def load_yaml_document(path: Path) -> Any:
    """Load and parse a DocFX YAML file (``toc.yml`` or a ManagedReference file)."""
    if not path.is_file():
        msg = f"Required input {path} does not exist"
        raise MissingInputError(msg)
    raw = path.read_text(encoding="utf-8")
    # Fix unquoted equals sign in VB names which confuses PyYAML
    # Matches: "  name.vb: =" -> "  name.vb: '='"
    raw = re.sub(r"^(\s*[\w\.]+\.vb:\s+)(=$)", r"\1'='", raw, flags=re.MULTILINE)
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        msg = f"Could not parse {path}: {e}"
        raise StructuralError(msg) from e
