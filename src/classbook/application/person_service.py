"""Person use cases: add, list, find, remove, and grade/attendance changes."""

import logging
from collections.abc import Callable
from datetime import date

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
from classbook.application.ports import PersonRepository
from classbook.domain import (
    Address,
    Attendance,
    AttendanceList,
    AttendanceStatus,
    Email,
    Grade,
    GradeList,
    Index,
    Name,
    Person,
    Phone,
    Tag,
)
from classbook.exceptions import IndexOutOfRangeError, InvalidValueError

logger = logging.getLogger(__name__)


class PersonService:
    """Validates raw input into Person values and replaces stored persons on every change.

    Positions at this boundary are one-based, the way they are shown to a user.
    Expected failures come back as result objects; only programming errors raise.
    """

    def __init__(self, repository: PersonRepository) -> None:
        self._repo = repository

    def add_person(self, card: PersonCardData) -> PersonAdded | Duplicate | Invalid:
        try:
            if isinstance(card.tags, str):
                raise InvalidValueError("Tag names must be given as a list, not a single string.")
            person = Person(
                name=Name(card.name),
                phone=Phone(card.phone),
                email=Email(card.email),
                address=Address(card.address),
                tags=[Tag(tag) for tag in card.tags],
                grade_list=GradeList(),
                attendance_list=AttendanceList(),
            )
        except InvalidValueError as e:
            logger.warning("Rejected person %r: %s", card.name, e)
            return Invalid(reason=str(e))

        existing = self._repo.find_duplicate(person)
        if existing is not None:
            index, stored = existing
            logger.info("Duplicate of %s at %d", stored.name, index.one_based)
            return Duplicate(index=index.one_based, name=stored.name.value)

        index = self._repo.add(person)
        logger.info("Person added: %s at %d", person.name, index.one_based)
        return PersonAdded(index=index.one_based, person=person)

    def list_persons(self) -> list[PersonSummary]:
        """Return all persons with their one-based positions."""
        return [
            PersonSummary(index=position, person=person)
            for position, person in enumerate(self._repo.list_all(), start=1)
        ]

    def find_persons(self, keyword: str) -> list[PersonSummary]:
        """Return persons whose name contains the keyword (case-insensitive, partial)."""
        if not keyword or not keyword.strip():
            return []
        needle = keyword.strip().lower()
        return [s for s in self.list_persons() if needle in s.name.lower()]

    def get_person(self, person_index: int) -> Person | None:
        located = self._locate(person_index)
        if isinstance(located, tuple):
            return located[1]
        return None

    def remove_person(self, person_index: int) -> PersonRemoved | PersonNotFound | Invalid:
        located = self._locate(person_index)
        if not isinstance(located, tuple):
            return located
        index, _ = located
        removed = self._repo.remove(index)
        logger.info("Person removed: %s", removed.name)
        return PersonRemoved(person=removed)

    def add_grade(
        self, person_index: int, assessment: str, score: int | float
    ) -> GradeAdded | PersonNotFound | Invalid:
        try:
            grade = Grade(assessment=assessment, score=score)
        except InvalidValueError as e:
            logger.warning("Rejected grade %r for person %s: %s", assessment, person_index, e)
            return Invalid(reason=str(e))
        return self._update(person_index, lambda person: person.add_grade(grade), GradeAdded)

    def remove_grade(
        self, person_index: int, grade_index: int
    ) -> GradeRemoved | PersonNotFound | GradeNotFound | Invalid:
        try:
            index = Index.from_one_based(grade_index)
        except InvalidValueError as e:
            return Invalid(reason=str(e))
        try:
            return self._update(person_index, lambda person: person.remove_grade(index), GradeRemoved)
        except IndexOutOfRangeError:
            return GradeNotFound(person_index=person_index, grade_index=grade_index)

    def mark_attendance(
        self, person_index: int, session: date, status: AttendanceStatus | str
    ) -> AttendanceMarked | PersonNotFound | Invalid:
        try:
            attendance = Attendance(session=session, status=status)
        except (InvalidValueError, TypeError) as e:
            logger.warning("Rejected attendance for person %s: %s", person_index, e)
            return Invalid(reason=str(e))
        return self._update(
            person_index, lambda person: person.mark_attendance(attendance), AttendanceMarked
        )

    def _locate(self, person_index: int) -> tuple[Index, Person] | PersonNotFound | Invalid:
        try:
            index = Index.from_one_based(person_index)
        except InvalidValueError as e:
            return Invalid(reason=str(e))
        person = self._repo.get(index)
        if person is None:
            return PersonNotFound(index=person_index)
        return index, person

    def _update(self, person_index: int, change: Callable[[Person], Person], result_type):
        located = self._locate(person_index)
        if not isinstance(located, tuple):
            return located
        index, person = located
        updated = change(person)
        self._repo.replace(index, updated)
        logger.info("%s: %s", result_type.__name__, updated)
        return result_type(person=updated)
