"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from classbook.application.dto import (
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
    PersonSummary,
)
from classbook.application.person_service import PersonService
from classbook.application.ports import PersonRepository

__all__ = [
    "AttendanceMarked",
    "Duplicate",
    "GradeAdded",
    "GradeNotFound",
    "GradeRemoved",
    "Invalid",
    "PersonAdded",
    "PersonCardData",
    "PersonNotFound",
    "PersonRemoved",
    "PersonRepository",
    "PersonService",
    "PersonSummary",
]
