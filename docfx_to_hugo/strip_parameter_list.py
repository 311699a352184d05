"""Utility for removing a trailing parameter list from a UID or name."""

import re

TRAILING_PARAMETERS_RE = re.compile(r"\(.*\)$")


def strip_parameter_list(uid: str) -> str:
    """Remove a trailing ``(...)`` parameter list, e.g. ``Foo.Bar(System.Int32)``."""
    return TRAILING_PARAMETERS_RE.sub("", uid)
