"""Logic for planning output paths and writing pages to disk."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from docfx_to_hugo.item import Item
from docfx_to_hugo.item_kind import is_namespace_kind
from docfx_to_hugo.path_registry import PathRegistry
from docfx_to_hugo.path_resolver import INDEX_PAGE, output_location
from docfx_to_hugo.render_index_page import render_index_page
from docfx_to_hugo.render_item_page import render_item_page
from docfx_to_hugo.render_namespace_page import render_namespace_page
from docfx_to_hugo.resolution_context import ResolutionContext

INDEX_OWNER = "the API index page"


@dataclass(frozen=True)
class PlannedPage:
    """A page whose output location has been reserved."""

    location: str
    item: Item | None = None  # None for the index page
    weight: int = 0

    @property
    def filename(self) -> str:
        """The page's file path relative to the output directory."""
        return f"{self.location}.md"


def plan_pages(ctx: ResolutionContext, registry: PathRegistry) -> list[PlannedPage]:
    """Resolve and reserve the location of every page, in UID order.

    Every location is claimed before anything is written, so a collision aborts
    the run without leaving partial output behind.
    """
    documented = sorted(
        (it for it in ctx.store.items.values() if not it.do_not_document),
        key=lambda it: it.uid,
    )
    pages = []
    for weight, item in enumerate(documented, start=1):
        location = output_location(item, ctx)
        page = PlannedPage(location=location, item=item, weight=weight)
        registry.claim(page.filename, item.uid)
        pages.append(page)

    index = PlannedPage(location=INDEX_PAGE)
    registry.claim(index.filename, INDEX_OWNER)
    pages.append(index)
    return pages


def render_page(page: PlannedPage, ctx: ResolutionContext, site: dict[str, Any]) -> str:
    """Render the Markdown for one planned page."""
    if page.item is None:
        return render_index_page(ctx, landing_include=site.get("landing_include"))
    if is_namespace_kind(page.item.kind):
        return render_namespace_page(page.item, ctx, page.weight)
    return render_item_page(
        page.item,
        ctx,
        page.weight,
        project_name=site.get("project_name", ""),
        code_language=site.get("code_language", "csharp"),
    )


def output_file_for_page(out_root: Path, page: PlannedPage) -> Path:
    """Determine the output file for a page, creating its directory."""
    p = out_root / page.filename
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def write_pages(
    pages: list[PlannedPage],
    ctx: ResolutionContext,
    out_root: Path,
    site: dict[str, Any],
) -> int:
    """Render and write every planned page; return how many were written."""
    written = 0
    total = len(pages)
    print(f"Writing {total} pages...")
    for page in pages:
        md = render_page(page, ctx, site)
        output_file_for_page(out_root, page).write_text(md, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total} pages")
    return written
