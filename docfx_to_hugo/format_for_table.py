"""Utility for making text safe to place in a Markdown table cell."""


def format_for_table(text: str | None) -> str:
    """Flatten newlines so the text stays inside one table cell."""
    if text is None:
        return ""
    return text.replace("\n", " ")
