"""Logic for rewriting DocFX cross-reference markup into Markdown links."""

import html
import re

from docfx_to_hugo.reference_linker import link_to_type
from docfx_to_hugo.resolution_context import ResolutionContext

XREF_ELEMENT_RE = re.compile(r'<xref .*?href="(.*?)".*?></xref>', re.MULTILINE)


def format_cross_references(text: str | None, ctx: ResolutionContext) -> str | None:
    """Prepare DocFX summary/remarks text for a Hugo Markdown page.

    ``{{|`` and ``|}}`` become Hugo shortcode delimiters (``{{<``/``>}}``), HTML
    entities are decoded, and every ``<xref href="UID">`` element is replaced
    with a link produced by the reference linker.
    """
    if not text:
        return text

    text = text.replace("{{|", "{{<").replace("|}}", ">}}")
    text = html.unescape(text)

    def repl_xref(m: re.Match) -> str:
        uid = m.group(1).replace("%2c", ",")
        return link_to_type(uid, ctx)

    return XREF_ELEMENT_RE.sub(repl_xref, text)
