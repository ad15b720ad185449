"""
Teaching Groups

A group binds one course and one teacher to a roster of students.
The course and teacher bindings are fixed; roster membership changes
through add_student() and remove_student_by_id().
"""

import structlog
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from registry.domain.academic import Course
from registry.domain.exceptions import DuplicateMemberError, MemberNotFoundError
from registry.domain.people import Student, Teacher

logger = structlog.get_logger(__name__)


class Group(BaseModel):
    """
    Teaching group with a duplicate-free, insertion-ordered roster.

    The group shares its course, teacher and students with the rest of the
    registry; it owns only the roster membership.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(..., frozen=True)
    course: Course = Field(..., frozen=True)
    teacher: Teacher = Field(..., frozen=True)

    _students: list[Student] = PrivateAttr(default_factory=list)

    def add_student(self, student: Student) -> None:
        """
        Add a student to the roster.

        Raises:
            DuplicateMemberError: If this student object is already a member
        """
        if any(member is student for member in self._students):
            raise DuplicateMemberError(group_name=self.name, student_id=student.id)

        self._students.append(student)
        logger.debug("Student added to group", group=self.name, student_id=student.id)

    def remove_student_by_id(self, student_id: int) -> None:
        """
        Remove the first roster member with the given identifier.

        Raises:
            MemberNotFoundError: If no member has that identifier
        """
        for index, member in enumerate(self._students):
            if member.id == student_id:
                del self._students[index]
                logger.debug("Student removed from group", group=self.name, student_id=student_id)
                return

        raise MemberNotFoundError(group_name=self.name, student_id=student_id)

    def has_student(self, student_id: int) -> bool:
        """Check whether a member has the given identifier."""
        return any(member.id == student_id for member in self._students)

    def get_average_group_score(self) -> float:
        """Mean average score of the roster, or 0.0 for an empty roster."""
        if not self._students:
            return 0.0

        total = sum(student.get_average_score() for student in self._students)
        return total / len(self._students)

    def get_students(self) -> list[Student]:
        """Roster in insertion order, as a new list."""
        return list(self._students)
