"""Hugo front matter and menu entries for generated pages."""

from typing import Any

import yaml

from docfx_to_hugo.item import Item
from docfx_to_hugo.resolution_context import ResolutionContext

ROOT_MENU_IDENTIFIER = "api"
MENU_NAME = "docs"


def menu_identifier(item: Item, ctx: ResolutionContext) -> str:
    """Return the item's Hugo menu identifier, unique even across case twins."""
    return f"{ROOT_MENU_IDENTIFIER}.{item.uid}{ctx.disambiguation.case_suffix(item)}"


def page_front_matter(title: str, menu: dict[str, Any], **extra: Any) -> str:
    """Render the YAML front matter block shared by every generated page."""
    fields: dict[str, Any] = {
        "title": title,
        "draft": False,
        "toc": True,
        "hide_contents": True,
        **extra,
        "menu": {MENU_NAME: menu},
    }
    dumped = yaml.safe_dump(fields, sort_keys=False, allow_unicode=True, width=1000)
    return f"---\n{dumped}---"
