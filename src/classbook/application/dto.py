"""Input DTO and result types for the person use cases."""

from dataclasses import dataclass, field

from classbook.domain import Person


@dataclass(frozen=True)
class PersonCardData:
    """Raw fields for a new person, as typed by the user. Validated by PersonService."""

    name: str
    phone: str
    email: str
    address: str
    tags: tuple[str, ...] = field(default=())


@dataclass(frozen=True)
class PersonSummary:
    """One person as returned by list_persons and find_persons. index is one-based."""

    index: int
    person: Person

    @property
    def name(self) -> str:
        return self.person.name.value


# --- add_person results ---


@dataclass(frozen=True)
class PersonAdded:
    """Person was validated and stored."""

    index: int
    person: Person


@dataclass(frozen=True)
class Duplicate:
    """A person with this name or phone number already exists."""

    index: int
    name: str


@dataclass(frozen=True)
class Invalid:
    """Input failed validation (bad field format, bad score, bad index)."""

    reason: str


# --- lookup results ---


@dataclass(frozen=True)
class PersonNotFound:
    """No person at the given one-based index."""

    index: int


@dataclass(frozen=True)
class GradeNotFound:
    """The person has no grade at the given one-based index."""

    person_index: int
    grade_index: int


# --- grade and attendance results ---


@dataclass(frozen=True)
class GradeAdded:
    person: Person


@dataclass(frozen=True)
class GradeRemoved:
    person: Person


@dataclass(frozen=True)
class AttendanceMarked:
    person: Person


@dataclass(frozen=True)
class PersonRemoved:
    person: Person
