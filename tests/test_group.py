"""Group: tests for roster invariants and aggregate score.

Tests cover:
    - Course and teacher bindings are shared references and fixed
    - Duplicate student objects are rejected without mutation
    - Membership is by object identity, not by equal data
    - Removal by identifier, including unknown identifiers
    - Average group score for empty and populated rosters
    - Defensive copy of the roster
    - Domain errors are logged
"""

from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError
from structlog.testing import capture_logs

from registry.domain import (
    ContactInfo,
    DuplicateMemberError,
    ErrorCode,
    Gender,
    Group,
    MemberNotFoundError,
    Student,
)

from conftest import make_info


@pytest.fixture
def group(algorithms, teacher):
    return Group(name="CS-1", course=algorithms, teacher=teacher)


def test_group_binds_shared_course_and_teacher(group, algorithms, teacher):
    assert group.course is algorithms
    assert group.teacher is teacher
    assert group.get_students() == []


def test_group_bindings_are_fixed(group, calculus):
    with pytest.raises(PydanticValidationError):
        group.course = calculus


def test_add_student(group, student):
    group.add_student(student)
    assert group.get_students() == [student]
    assert group.has_student(student.id)


def test_add_same_student_twice_fails(group, student):
    group.add_student(student)

    with pytest.raises(DuplicateMemberError) as exc_info:
        group.add_student(student)

    assert exc_info.value.error_code is ErrorCode.DUPLICATE_MEMBER
    assert exc_info.value.message == "Student is already in the group"
    assert len(group.get_students()) == 1


def test_membership_uses_identity(group):
    fields = {
        "id": 42,
        "first_name": "Twin",
        "last_name": "Record",
        "birth_day": date(2002, 2, 2),
        "gender": Gender.OTHER,
        "contact_info": ContactInfo(email="twin@example.edu", phone="0"),
    }
    first = Student(**fields)
    second = Student(**fields)

    group.add_student(first)
    group.add_student(second)

    students = group.get_students()
    assert len(students) == 2
    assert students[0] is first and students[1] is second


def test_remove_student_by_id(group, allocator):
    students = [Student.create(make_info(f"S{i}", "Student"), allocator) for i in range(3)]
    for student in students:
        group.add_student(student)

    group.remove_student_by_id(students[1].id)

    remaining = group.get_students()
    assert remaining == [students[0], students[2]]
    assert not group.has_student(students[1].id)


def test_remove_unknown_id_fails_without_mutation(group, student):
    group.add_student(student)

    with pytest.raises(MemberNotFoundError) as exc_info:
        group.remove_student_by_id(999)

    assert exc_info.value.error_code is ErrorCode.MEMBER_NOT_FOUND
    assert exc_info.value.context == {"group": "CS-1", "student_id": 999}
    assert group.get_students() == [student]


def test_remove_from_empty_group_fails(group):
    with pytest.raises(MemberNotFoundError):
        group.remove_student_by_id(1)


def test_removed_student_can_rejoin(group, student):
    group.add_student(student)
    group.remove_student_by_id(student.id)
    group.add_student(student)
    assert group.get_students() == [student]


def test_average_score_of_empty_group_is_zero(group):
    assert group.get_average_group_score() == 0.0


def test_average_score_is_mean_of_students(group, allocator):
    for gpa in (4.0, 3.0, 2.0):
        student = Student.create(make_info(), allocator)
        student.update_gpa(gpa)
        group.add_student(student)

    assert group.get_average_group_score() == pytest.approx(3.0)


def test_average_score_single_student(group, student):
    student.update_gpa(3.7)
    group.add_student(student)
    assert group.get_average_group_score() == pytest.approx(3.7)


def test_roster_defensive_copy(group, student, allocator):
    group.add_student(student)
    roster = group.get_students()
    roster.append(Student.create(make_info("Extra", "Student"), allocator))
    roster.clear()
    assert group.get_students() == [student]


def test_student_may_join_several_groups(group, student, calculus, teacher):
    other = Group(name="MATH-1", course=calculus, teacher=teacher)
    group.add_student(student)
    other.add_student(student)
    assert group.has_student(student.id)
    assert other.has_student(student.id)


def test_duplicate_member_is_logged(group, student):
    group.add_student(student)

    with capture_logs() as logs:
        with pytest.raises(DuplicateMemberError):
            group.add_student(student)

    warnings = [entry for entry in logs if entry["log_level"] == "warning"]
    assert warnings
    assert warnings[0]["error_code"] == "DUPLICATE_MEMBER"
    assert warnings[0]["context"]["student_id"] == student.id
