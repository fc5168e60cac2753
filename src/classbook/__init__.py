"""
Classbook core: clean-architecture layout.

- domain: Person and its value types (grades, attendance, tags). No outer dependencies.
- application: use cases (PersonService), ports (PersonRepository), DTOs.
- infrastructure: adapters (InMemoryPersonRepository, phone normalization).
- config: .env settings and build_service(), which wires the layers together.
"""

from classbook.application import (
    AttendanceMarked,
    Duplicate,
    GradeAdded,
    GradeNotFound,
    GradeRemoved,
    Invalid,
    PersonAdded,
    PersonCardData,
    PersonNotFound,
    PersonRemoved,
    PersonRepository,
    PersonService,
    PersonSummary,
)
from classbook.config import Settings, build_service, load_settings
from classbook.domain import Person
from classbook.infrastructure import InMemoryPersonRepository

__all__ = [
    "AttendanceMarked",
    "Duplicate",
    "GradeAdded",
    "GradeNotFound",
    "GradeRemoved",
    "InMemoryPersonRepository",
    "Invalid",
    "Person",
    "PersonAdded",
    "PersonCardData",
    "PersonNotFound",
    "PersonRemoved",
    "PersonRepository",
    "PersonService",
    "PersonSummary",
    "Settings",
    "build_service",
    "load_settings",
]
