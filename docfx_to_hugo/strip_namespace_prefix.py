"""Utility for removing an item's namespace from the front of a UID."""


def strip_namespace_prefix(uid: str, namespace: str | None) -> str:
    """Remove a single leading ``{namespace}.`` from the UID, if present."""
    if namespace is None:
        return uid
    prefix = namespace + "."
    if uid.startswith(prefix):
        return uid[len(prefix) :]
    return uid
