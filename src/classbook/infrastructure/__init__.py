"""Infrastructure layer: concrete implementations of application ports."""

from classbook.infrastructure.memory_repository import InMemoryPersonRepository
from classbook.infrastructure.phone import normalize_phone, phones_match

__all__ = [
    "InMemoryPersonRepository",
    "normalize_phone",
    "phones_match",
]
