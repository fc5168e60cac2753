"""Domain layer: the Person aggregate and its value types. No dependencies on outer layers."""

from classbook.domain.attendance import Attendance, AttendanceList, AttendanceStatus
from classbook.domain.grades import MAX_SCORE, Grade, GradeList, Index
from classbook.domain.person import Person
from classbook.domain.tags import TagSet
from classbook.domain.values import Address, Email, Name, Phone, Tag

__all__ = [
    "MAX_SCORE",
    "Address",
    "Attendance",
    "AttendanceList",
    "AttendanceStatus",
    "Email",
    "Grade",
    "GradeList",
    "Index",
    "Name",
    "Person",
    "Phone",
    "Tag",
    "TagSet",
]
