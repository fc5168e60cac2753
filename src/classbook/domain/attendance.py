"""Attendance records kept per Person, one per class session."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from classbook.exceptions import InvalidValueError, require_all_not_none


class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"


@dataclass(frozen=True)
class Attendance:
    """Whether a person attended the session held on a given date."""

    session: date
    status: AttendanceStatus

    def __post_init__(self):
        require_all_not_none(session=self.session, status=self.status)
        if not isinstance(self.session, date):
            raise InvalidValueError("Attendance session must be a date.")
        # Sessions are whole days; a datetime keeps only its date.
        if isinstance(self.session, datetime):
            object.__setattr__(self, "session", self.session.date())
        try:
            status = self.status.upper() if isinstance(self.status, str) else self.status
            object.__setattr__(self, "status", AttendanceStatus(status))
        except ValueError:
            raise InvalidValueError(f"Unknown attendance status: {self.status!r}.") from None

    @property
    def attended(self) -> bool:
        return self.status is not AttendanceStatus.ABSENT

    def __str__(self) -> str:
        return f"{self.session.isoformat()} {self.status.value}"


@dataclass(frozen=True)
class AttendanceList:
    """
    Attendance records ordered by session date, at most one per date.
    Immutable; mark() returns a new AttendanceList.
    """

    records: tuple[Attendance, ...] = field(default=())

    def __post_init__(self):
        by_session: dict[date, Attendance] = {}
        for record in self.records:
            if record is None:
                raise InvalidValueError("AttendanceList must not contain None.")
            by_session[record.session] = record
        ordered = tuple(by_session[session] for session in sorted(by_session))
        object.__setattr__(self, "records", ordered)

    @classmethod
    def of(cls, records: Iterable[Attendance]) -> "AttendanceList":
        return cls(tuple(records))

    def mark(self, attendance: Attendance) -> "AttendanceList":
        """Return a new AttendanceList with attendance recorded, replacing any record for that date."""
        require_all_not_none(attendance=attendance)
        return AttendanceList(self.records + (attendance,))

    def status_on(self, session: date) -> AttendanceStatus | None:
        for record in self.records:
            if record.session == session:
                return record.status
        return None

    def attendance_rate(self) -> float | None:
        """Fraction of recorded sessions attended (present or late)."""
        if not self.records:
            return None
        return sum(1 for record in self.records if record.attended) / len(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Attendance]:
        return iter(self.records)

    def __str__(self) -> str:
        return "[" + ", ".join(str(record) for record in self.records) + "]"
