"""Unit tests for the Person aggregate: construction, equality, derivations, string form."""

from datetime import date

import pytest

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
from classbook.exceptions import (
    IndexOutOfRangeError,
    InvalidValueError,
    NullArgumentError,
    UnsupportedModificationError,
)


def _alex(**overrides) -> Person:
    fields = dict(
        name=Name("Alex"),
        phone=Phone("91234567"),
        email=Email("alex@x.com"),
        address=Address("123 Clementi"),
        tags={Tag("friend")},
        grade_list=GradeList(),
        attendance_list=AttendanceList(),
    )
    fields.update(overrides)
    return Person(**fields)


def test_accessors_return_values_passed_in() -> None:
    name, phone, email, address = Name("Alex"), Phone("91234567"), Email("alex@x.com"), Address("123 Clementi")
    tags = {Tag("friend"), Tag("tutee")}
    grades = GradeList.of([Grade("Quiz 1", 80)])
    attendance = AttendanceList.of([Attendance(date(2024, 9, 2), AttendanceStatus.PRESENT)])

    person = Person(name, phone, email, address, tags, grades, attendance)

    assert person.name is name
    assert person.phone is phone
    assert person.email is email
    assert person.address is address
    assert person.grade_list is grades
    assert person.attendance_list is attendance
    assert person.tags == tags
    assert person.tags is not tags


@pytest.mark.parametrize(
    "field",
    ["name", "phone", "email", "address", "tags", "grade_list", "attendance_list"],
)
def test_none_field_raises_null_argument_error(field: str) -> None:
    with pytest.raises(NullArgumentError) as exc_info:
        _alex(**{field: None})
    assert exc_info.value.argument == field


def test_tags_are_copied_at_construction() -> None:
    tags = {Tag("friend")}
    person = _alex(tags=tags)
    tags.add(Tag("colleague"))
    assert Tag("colleague") not in person.tags
    assert len(person.tags) == 1


def test_duplicate_tags_collapse() -> None:
    person = _alex(tags=[Tag("friend"), Tag("friend"), Tag("tutee")])
    assert len(person.tags) == 2


def test_tags_view_rejects_modification() -> None:
    person = _alex()
    with pytest.raises(UnsupportedModificationError):
        person.tags.add(Tag("colleague"))
    with pytest.raises(UnsupportedModificationError):
        person.tags.remove(Tag("friend"))
    with pytest.raises(UnsupportedModificationError):
        person.tags.clear()
    assert person.tags == {Tag("friend")}


def test_unsupported_modification_is_not_a_null_argument_error() -> None:
    with pytest.raises(UnsupportedModificationError) as exc_info:
        _alex().tags.discard(Tag("friend"))
    assert not isinstance(exc_info.value, NullArgumentError)


def test_person_is_frozen() -> None:
    person = _alex()
    with pytest.raises(AttributeError):
        person.name = Name("Bob")


def test_person_equals_itself_and_is_same_person() -> None:
    person = _alex()
    assert person == person
    assert person.is_same_person(person)


def test_same_name_different_fields_is_same_person_but_not_equal() -> None:
    alex = _alex()
    other = _alex(phone=Phone("99999999"), email=Email("other@x.com"), tags=set())
    assert alex.is_same_person(other)
    assert other.is_same_person(alex)
    assert alex != other


def test_different_name_is_not_same_person() -> None:
    assert not _alex().is_same_person(_alex(name=Name("Alex Yeoh")))


def test_is_same_person_none_is_false() -> None:
    assert not _alex().is_same_person(None)


def test_all_fields_equal_means_equal_and_same_hash() -> None:
    first = _alex(tags=[Tag("friend"), Tag("tutee")])
    second = _alex(tags=[Tag("tutee"), Tag("friend")])
    assert first is not second
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_not_equal_to_other_types_or_none() -> None:
    person = _alex()
    assert person != None  # noqa: E711
    assert person != "Alex"
    assert person != 5


@pytest.mark.parametrize(
    "override",
    [
        {"name": Name("Bob")},
        {"phone": Phone("88888888")},
        {"email": Email("bob@x.com")},
        {"address": Address("1 Kent Ridge")},
        {"tags": {Tag("colleague")}},
        {"grade_list": GradeList.of([Grade("Quiz 1", 50)])},
        {"attendance_list": AttendanceList.of([Attendance(date(2024, 9, 2), "ABSENT")])},
    ],
)
def test_any_differing_field_breaks_equality(override: dict) -> None:
    assert _alex() != _alex(**override)


def test_add_grade_returns_new_person() -> None:
    person = _alex()
    grade = Grade("Midterm", 72)

    updated = person.add_grade(grade)

    assert updated is not person
    assert updated != person
    assert list(updated.grade_list) == [grade]
    assert len(person.grade_list) == 0
    assert updated.name is person.name
    assert updated.phone is person.phone
    assert updated.email is person.email
    assert updated.address is person.address
    assert updated.attendance_list is person.attendance_list
    assert updated.tags == person.tags
    assert updated.is_same_person(person)


def test_add_grade_appends_in_order() -> None:
    person = _alex().add_grade(Grade("Quiz 1", 60)).add_grade(Grade("Quiz 2", 70))
    assert [g.assessment for g in person.grade_list] == ["Quiz 1", "Quiz 2"]


def test_add_grade_none_raises() -> None:
    with pytest.raises(NullArgumentError):
        _alex().add_grade(None)


def test_remove_grade_returns_new_person() -> None:
    person = _alex().add_grade(Grade("Quiz 1", 60)).add_grade(Grade("Quiz 2", 70))

    updated = person.remove_grade(Index.from_zero_based(0))

    assert [g.assessment for g in updated.grade_list] == ["Quiz 2"]
    assert [g.assessment for g in person.grade_list] == ["Quiz 1", "Quiz 2"]
    assert updated.attendance_list is person.attendance_list
    assert updated.email is person.email


def test_remove_grade_none_raises() -> None:
    with pytest.raises(NullArgumentError):
        _alex().remove_grade(None)


def test_remove_grade_out_of_range_raises() -> None:
    person = _alex().add_grade(Grade("Quiz 1", 60))
    with pytest.raises(IndexOutOfRangeError):
        person.remove_grade(Index.from_one_based(2))


def test_mark_attendance_returns_new_person() -> None:
    person = _alex()
    updated = person.mark_attendance(Attendance(date(2024, 9, 2), AttendanceStatus.LATE))
    assert updated.attendance_list.status_on(date(2024, 9, 2)) is AttendanceStatus.LATE
    assert len(person.attendance_list) == 0
    assert updated.grade_list is person.grade_list


def test_mark_attendance_none_raises() -> None:
    with pytest.raises(NullArgumentError):
        _alex().mark_attendance(None)


def test_str_lists_all_fields_in_fixed_order() -> None:
    assert str(_alex()) == (
        "Person{name=Alex, phone=91234567, email=alex@x.com, address=123 Clementi, "
        "tags={[friend]}, grade_list=[], attendance_list=[]}"
    )


def test_str_is_deterministic_for_tags_and_lists() -> None:
    person = (
        _alex(tags=[Tag("tutee"), Tag("friend")])
        .add_grade(Grade("Quiz 1", 87.5))
        .mark_attendance(Attendance(date(2024, 9, 2), AttendanceStatus.PRESENT))
    )
    text = str(person)
    assert "tags={[friend], [tutee]}" in text
    assert "grade_list=[Quiz 1: 87.5]" in text
    assert "attendance_list=[2024-09-02 PRESENT]" in text


def test_tags_must_all_be_tag_instances() -> None:
    with pytest.raises(InvalidValueError):
        _alex(tags=[Tag("friend"), "colleague"])
    with pytest.raises(InvalidValueError):
        _alex(tags="friend")
