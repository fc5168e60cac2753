"""Grades recorded against a Person, and the Index used to address them."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from classbook.exceptions import IndexOutOfRangeError, InvalidValueError, require_all_not_none

MAX_SCORE = 100


@dataclass(frozen=True, order=True)
class Index:
    """
    A position in an ordered collection.
    Stored zero-based; users see one-based positions.
    """

    zero_based: int

    def __post_init__(self):
        if isinstance(self.zero_based, bool) or not isinstance(self.zero_based, int):
            raise InvalidValueError("Index must be an integer.")
        if self.zero_based < 0:
            raise InvalidValueError("Index must not be negative.")

    @classmethod
    def from_zero_based(cls, position: int) -> "Index":
        return cls(position)

    @classmethod
    def from_one_based(cls, position: int) -> "Index":
        if isinstance(position, bool) or not isinstance(position, int) or position < 1:
            raise InvalidValueError("One-based index must be a positive integer.")
        return cls(position - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1


@dataclass(frozen=True)
class Grade:
    """Score obtained in one assessment, out of MAX_SCORE."""

    assessment: str
    score: int | float

    def __post_init__(self):
        if not isinstance(self.assessment, str) or not self.assessment.strip():
            raise InvalidValueError("Grade assessment must be non-empty.")
        object.__setattr__(self, "assessment", self.assessment.strip())
        if isinstance(self.score, bool) or not isinstance(self.score, (int, float)):
            raise InvalidValueError("Grade score must be a number.")
        if not 0 <= self.score <= MAX_SCORE:
            raise InvalidValueError(f"Grade score must be between 0 and {MAX_SCORE}.")

    def __str__(self) -> str:
        return f"{self.assessment}: {self.score:g}"


@dataclass(frozen=True)
class GradeList:
    """Ordered, immutable list of grades. Changes return a new GradeList."""

    grades: tuple[Grade, ...] = field(default=())

    def __post_init__(self):
        grades = tuple(self.grades)
        if any(grade is None for grade in grades):
            raise InvalidValueError("GradeList must not contain None.")
        object.__setattr__(self, "grades", grades)

    @classmethod
    def of(cls, grades: Iterable[Grade]) -> "GradeList":
        return cls(tuple(grades))

    def add_grade(self, grade: Grade) -> "GradeList":
        """Return a new GradeList with grade appended."""
        require_all_not_none(grade=grade)
        return GradeList(self.grades + (grade,))

    def remove_grade(self, index: Index) -> "GradeList":
        """Return a new GradeList without the grade at index."""
        require_all_not_none(index=index)
        position = index.zero_based
        if position >= len(self.grades):
            raise IndexOutOfRangeError(
                f"No grade at position {index.one_based}; the list has {len(self.grades)}."
            )
        return GradeList(self.grades[:position] + self.grades[position + 1 :])

    def average(self) -> float | None:
        if not self.grades:
            return None
        return sum(grade.score for grade in self.grades) / len(self.grades)

    def __len__(self) -> int:
        return len(self.grades)

    def __iter__(self) -> Iterator[Grade]:
        return iter(self.grades)

    def __getitem__(self, position: int) -> Grade:
        return self.grades[position]

    def __str__(self) -> str:
        return "[" + ", ".join(str(grade) for grade in self.grades) + "]"
