"""Orchestration logic for converting DocFX YAML to Hugo Markdown."""

import argparse
import logging

from docfx_to_hugo.build_item_store import build_item_store
from docfx_to_hugo.external_authority import authorities_from_config
from docfx_to_hugo.load_config import load_config
from docfx_to_hugo.overwrite_document import load_overwrite_documents
from docfx_to_hugo.overwrite_merger import apply_overwrites
from docfx_to_hugo.path_registry import PathRegistry
from docfx_to_hugo.resolution_context import build_resolution_context
from docfx_to_hugo.write_pages import plan_pages, write_pages

logger = logging.getLogger(__name__)


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline.

    The stages run strictly in order: the store is populated in full, its UIDs
    are disambiguated, overwrites are merged, the store is sealed, every output
    path is reserved, and only then are pages rendered and written.
    """
    config = load_config(args.config)
    site = config["site"]

    store = build_item_store(args.yml_dir)
    ctx = build_resolution_context(
        store,
        authorities=authorities_from_config(config["authorities"]),
        api_root=site["api_root"],
    )
    logger.info(
        "Loaded %d items and %d references", len(store.items), len(store.references)
    )

    overwrite_dir = args.overwrite_dir
    if overwrite_dir is not None:
        if overwrite_dir.is_dir():
            documents = load_overwrite_documents(
                overwrite_dir, config["overwrite"]["content_marker"]
            )
            applied = apply_overwrites(store, documents)
            logger.info("Applied %d of %d overwrite files", applied, len(documents))
        else:
            logger.warning(
                "Overwrite directory %s does not exist; skipping", overwrite_dir
            )
    store.seal()

    pages = plan_pages(ctx, PathRegistry())

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    written = write_pages(pages, ctx, out_root, site)

    print(f"Generated {written} Markdown pages into: {out_root}")
    return 0
