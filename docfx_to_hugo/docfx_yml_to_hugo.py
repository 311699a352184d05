"""Convert DocFX YAML metadata to Hugo compatible Markdown.

This module reads the ``toc.yml`` and ManagedReference YAML files produced by
``docfx metadata``, applies any DocFX overwrite files, and writes one Markdown
page per namespace, type and member, plus an API index page.
"""

import argparse
import logging
from pathlib import Path

from docfx_to_hugo.errors import ConversionError
from docfx_to_hugo.run_conversion import run_conversion


def main() -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="Convert DocFX ManagedReference YAML to Hugo Markdown.",
    )
    ap.add_argument(
        "yml_dir",
        type=Path,
        help="Directory containing toc.yml and the DocFX *.yml files",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory (the Hugo content folder for the API docs)",
    )
    ap.add_argument(
        "--overwrite-dir",
        type=Path,
        help="Directory of DocFX overwrite files (*.md) to merge into the metadata",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        return run_conversion(args)
    except ConversionError as e:
        msg = f"ERROR: {e}"
        raise SystemExit(msg) from e


if __name__ == "__main__":
    raise SystemExit(main())
