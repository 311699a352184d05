"""Registry of output paths claimed during a run."""

from docfx_to_hugo.errors import PathCollisionError


class PathRegistry:
    """Tracks every output path written in a run, compared case-insensitively.

    Output may land on a case-insensitive filesystem, so ``Foo/_index`` and
    ``foo/_index`` are the same file. Claiming a path twice is fatal.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self.owners: dict[str, str] = {}  # canonical path -> owner

    def claim(self, path: str, owner: str) -> None:
        """Record that ``owner`` writes ``path``, failing if it is already taken."""
        key = self._to_canonical_path(path)
        existing = self.owners.get(key)
        if existing is not None:
            raise PathCollisionError(path, existing, owner)
        self.owners[key] = owner

    def __contains__(self, path: str) -> bool:
        """Check whether the path, in any casing, has been claimed."""
        return self._to_canonical_path(path) in self.owners

    def __len__(self) -> int:
        """Return the number of claimed paths."""
        return len(self.owners)

    def _to_canonical_path(self, path: str) -> str:
        return path.lower().replace("\\", "/")
