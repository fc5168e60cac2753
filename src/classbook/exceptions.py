"""Error types raised by the classbook domain."""


class ClassbookError(Exception):
    """Base exception for all classbook errors."""


class NullArgumentError(ClassbookError, TypeError):
    """A required argument was None."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None.")
        self.argument = argument


class UnsupportedModificationError(ClassbookError, TypeError):
    """A read-only view was asked to change."""


class InvalidValueError(ClassbookError, ValueError):
    """A value failed the format rules of its type."""


class IndexOutOfRangeError(ClassbookError, IndexError):
    """An Index does not address an element of the collection."""


def require_all_not_none(**arguments: object) -> None:
    """Raise NullArgumentError for the first keyword argument that is None."""
    for argument, value in arguments.items():
        if value is None:
            raise NullArgumentError(argument)
