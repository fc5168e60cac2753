"""Read-only tag set owned by a Person."""

from collections.abc import Iterable, Iterator, Set

from classbook.domain.values import Tag
from classbook.exceptions import InvalidValueError, UnsupportedModificationError


def _read_only(method_name: str):
    def reject(self, *args, **kwargs):
        raise UnsupportedModificationError(f"TagSet is read-only; {method_name}() is not supported.")

    reject.__name__ = method_name
    return reject


class TagSet(Set):
    """Immutable set of Tags.

    Takes its own copy of the given tags. Every mutating method of the built-in
    set is present and raises UnsupportedModificationError, so code written
    against a mutable set fails loudly instead of silently.
    """

    __slots__ = ("_tags",)

    def __init__(self, tags: Iterable[Tag] = ()) -> None:
        if isinstance(tags, str):
            raise InvalidValueError("Tags must be a collection of Tag, not a single string.")
        tags = frozenset(tags)
        for tag in tags:
            if not isinstance(tag, Tag):
                raise InvalidValueError(f"Tags must be Tag instances, got {type(tag).__name__}.")
        self._tags = tags

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __hash__(self) -> int:
        return hash(self._tags)

    add = _read_only("add")
    remove = _read_only("remove")
    discard = _read_only("discard")
    pop = _read_only("pop")
    clear = _read_only("clear")
    update = _read_only("update")
    difference_update = _read_only("difference_update")
    intersection_update = _read_only("intersection_update")
    symmetric_difference_update = _read_only("symmetric_difference_update")
    __ior__ = _read_only("__ior__")
    __iand__ = _read_only("__iand__")
    __isub__ = _read_only("__isub__")
    __ixor__ = _read_only("__ixor__")

    def sorted(self) -> list[Tag]:
        return sorted(self._tags)

    def __str__(self) -> str:
        return "{" + ", ".join(str(tag) for tag in self.sorted()) + "}"

    def __repr__(self) -> str:
        return f"TagSet({self.sorted()!r})"
