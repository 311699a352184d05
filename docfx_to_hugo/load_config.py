"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from docfx_to_hugo.deep_merge import deep_merge
from docfx_to_hugo.errors import MissingInputError
from docfx_to_hugo.external_authority import DEFAULT_AUTHORITIES
from docfx_to_hugo.overwrite_document import DEFAULT_CONTENT_MARKER

DEFAULT_CONFIG: dict[str, Any] = {
    "site": {
        "api_root": "api",
        "project_name": "Yarn Spinner",
        "landing_include": "/assets/api_landing.md",
        "code_language": "csharp",
    },
    "authorities": [
        {
            "prefix": a.prefix,
            "strip_segments": a.strip_segments,
            "url_template": a.url_template,
            "aliases": dict(a.aliases),
        }
        for a in DEFAULT_AUTHORITIES
    ],
    "overwrite": {
        "content_marker": DEFAULT_CONTENT_MARKER,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Configuration file {p} does not exist"
            raise MissingInputError(msg)
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        config = deep_merge(config, user_config)
    return config
