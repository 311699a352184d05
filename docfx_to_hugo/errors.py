"""Exceptions that abort a conversion run."""


class ConversionError(Exception):
    """Base class for fatal conversion failures."""


class StructuralError(ConversionError):
    """The metadata graph or its inputs are inconsistent."""


class MissingInputError(StructuralError):
    """A required input file or directory does not exist."""


class OverwriteFormatError(StructuralError):
    """An overwrite file does not have a well-formed YAML header."""


class OverwriteValidationError(ConversionError):
    """An overwrite file parsed, but does not name the item it overwrites."""


class PathCollisionError(StructuralError):
    """Two pages resolved to the same output path."""

    def __init__(self, path: str, first_owner: str, second_owner: str) -> None:
        """Record the colliding path and the two owners that claimed it."""
        super().__init__(
            f"{path} has already been written to "
            f"(claimed by {first_owner}, then by {second_owner})"
        )
        self.path = path
        self.first_owner = first_owner
        self.second_owner = second_owner
