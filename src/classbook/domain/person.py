"""The Person aggregate: a contact with grades and attendance."""

from collections.abc import Iterable
from dataclasses import dataclass, fields, replace

from classbook.domain.attendance import Attendance, AttendanceList
from classbook.domain.grades import Grade, GradeList, Index
from classbook.domain.tags import TagSet
from classbook.domain.values import Address, Email, Name, Phone, Tag
from classbook.exceptions import require_all_not_none


@dataclass(frozen=True)
class Person:
    """
    Represents a person in the class book.
    Every field is present and validated. A Person never changes; the
    with-change methods (add_grade, remove_grade, mark_attendance) return a
    new Person and leave this one untouched.
    """

    # Identity fields
    name: Name
    phone: Phone
    email: Email

    # Data fields
    address: Address
    tags: TagSet
    grade_list: GradeList
    attendance_list: AttendanceList

    def __init__(
        self,
        name: Name,
        phone: Phone,
        email: Email,
        address: Address,
        tags: Iterable[Tag],
        grade_list: GradeList,
        attendance_list: AttendanceList,
    ) -> None:
        require_all_not_none(
            name=name,
            phone=phone,
            email=email,
            address=address,
            tags=tags,
            grade_list=grade_list,
            attendance_list=attendance_list,
        )
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "phone", phone)
        object.__setattr__(self, "email", email)
        object.__setattr__(self, "address", address)
        object.__setattr__(self, "tags", TagSet(tags))
        object.__setattr__(self, "grade_list", grade_list)
        object.__setattr__(self, "attendance_list", attendance_list)

    def add_grade(self, grade: Grade) -> "Person":
        """Return a new Person with grade added to the grade list."""
        require_all_not_none(grade=grade)
        return replace(self, grade_list=self.grade_list.add_grade(grade))

    def remove_grade(self, index: Index) -> "Person":
        """Return a new Person without the grade at index."""
        require_all_not_none(index=index)
        return replace(self, grade_list=self.grade_list.remove_grade(index))

    def mark_attendance(self, attendance: Attendance) -> "Person":
        """Return a new Person with attendance recorded."""
        require_all_not_none(attendance=attendance)
        return replace(self, attendance_list=self.attendance_list.mark(attendance))

    def is_same_person(self, other: "Person | None") -> bool:
        """
        True if both persons have the same name.
        A weaker notion of equality than ==, used to spot duplicates.
        """
        if other is self:
            return True
        return other is not None and other.name == self.name

    def __str__(self) -> str:
        parts = ", ".join(f"{f.name}={getattr(self, f.name)}" for f in fields(self))
        return f"{type(self).__name__}{{{parts}}}"
