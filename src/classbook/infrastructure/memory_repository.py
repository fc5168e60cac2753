"""In-memory implementation of PersonRepository (no persistence)."""

import logging

from classbook.domain import Index, Person
from classbook.exceptions import IndexOutOfRangeError
from classbook.infrastructure.phone import phones_match

logger = logging.getLogger(__name__)


class InMemoryPersonRepository:
    """Stores persons in memory. Order preserved by insertion.
    default_region is used to compare phone numbers typed without a country code.
    """

    def __init__(self, *, default_region: str | None = None) -> None:
        self._persons: list[Person] = []
        self._default_region = default_region

    def add(self, person: Person) -> Index:
        self._persons.append(person)
        return Index.from_zero_based(len(self._persons) - 1)

    def get(self, index: Index) -> Person | None:
        if index.zero_based >= len(self._persons):
            return None
        return self._persons[index.zero_based]

    def replace(self, index: Index, person: Person) -> None:
        if index.zero_based >= len(self._persons):
            raise IndexOutOfRangeError(f"No person at position {index.one_based}.")
        self._persons[index.zero_based] = person

    def remove(self, index: Index) -> Person | None:
        if index.zero_based >= len(self._persons):
            return None
        return self._persons.pop(index.zero_based)

    def list_all(self) -> list[Person]:
        return list(self._persons)

    def find_duplicate(self, person: Person) -> tuple[Index, Person] | None:
        for position, stored in enumerate(self._persons):
            if stored.is_same_person(person):
                return Index.from_zero_based(position), stored
            if phones_match(stored.phone.value, person.phone.value, self._default_region):
                logger.debug("Phone %s already belongs to %s", person.phone, stored.name)
                return Index.from_zero_based(position), stored
        return None
