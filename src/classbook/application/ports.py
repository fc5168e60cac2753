"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from classbook.domain import Index, Person


class PersonRepository(Protocol):
    """Stores Person values in a stable order. Positions are zero-based Index values."""

    def add(self, person: Person) -> Index:
        """Append a person and return its position."""
        ...

    def get(self, index: Index) -> Person | None:
        """Return the person at index, or None."""
        ...

    def replace(self, index: Index, person: Person) -> None:
        """Swap the person at index for its derived replacement."""
        ...

    def remove(self, index: Index) -> Person | None:
        """Remove and return the person at index, or None if there is none."""
        ...

    def list_all(self) -> list[Person]:
        """Return all persons in insertion order."""
        ...

    def find_duplicate(self, person: Person) -> tuple[Index, Person] | None:
        """Return a stored person that is the same person (by name) or shares the phone number."""
        ...
