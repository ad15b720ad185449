"""
University Aggregate

The registry root. Owns the course, group and people collections and the
identifier allocator every person is created from. People are stored in one
collection and partitioned by role at query time.
"""

from collections.abc import Iterable
from typing import NoReturn

import structlog

from registry.config import get_settings
from registry.domain.academic import Course
from registry.domain.enums import Discipline, Role
from registry.domain.exceptions import UnhandledRoleError
from registry.domain.group import Group
from registry.domain.identity import IdentityAllocator
from registry.domain.people import Person, PersonInfo, Student, Teacher

logger = structlog.get_logger(__name__)


def assert_never_role(role: object) -> NoReturn:
    """Fail on a role value outside the closed Role set."""
    raise UnhandledRoleError(role)


class University:
    """
    Aggregate root of the academic registry.

    add_* operations append unconditionally; no duplicate detection is done
    within or across collections. Every accessor returns a new list.
    """

    def __init__(
        self,
        name: str | None = None,
        allocator: IdentityAllocator | None = None,
    ):
        """
        Initialize an empty university.

        Args:
            name: University name (defaults to settings.university_name)
            allocator: Identifier source for people created through this
                university (defaults to one starting at settings.first_person_id)
        """
        settings = get_settings()
        self.name = name if name is not None else settings.university_name
        if allocator is None:
            allocator = IdentityAllocator(start=settings.first_person_id)
        self.allocator = allocator
        self._courses: list[Course] = []
        self._groups: list[Group] = []
        self._people: list[Person] = []

    def add_course(self, course: Course) -> None:
        self._courses.append(course)
        logger.debug("Course added", university=self.name, course=course.name)

    def add_group(self, group: Group) -> None:
        self._groups.append(group)
        logger.debug("Group added", university=self.name, group=group.name)

    def add_person(self, person: Person) -> None:
        self._people.append(person)
        logger.debug(
            "Person added",
            university=self.name,
            person_id=person.id,
            role=person.role.value,
        )

    def create_student(self, info: PersonInfo) -> Student:
        """Create a student from this university's allocator and register it."""
        student = Student.create(info, self.allocator)
        self.add_person(student)
        return student

    def create_teacher(
        self,
        info: PersonInfo,
        specializations: Iterable[Discipline] = (),
    ) -> Teacher:
        """Create a teacher from this university's allocator and register it."""
        teacher = Teacher.create(info, self.allocator, specializations)
        self.add_person(teacher)
        return teacher

    def find_group_by_course(self, course: Course) -> Group | None:
        """
        Find the first group bound to this exact course object.

        Args:
            course: Course instance (compared by identity, not by value)

        Returns:
            Group | None: First matching group in insertion order
        """
        return next((group for group in self._groups if group.course is course), None)

    def get_student_by_id(self, student_id: int) -> Student | None:
        """Find the student with the given identifier."""
        return next(
            (
                person
                for person in self._people
                if person.role is Role.STUDENT
                and isinstance(person, Student)
                and person.id == student_id
            ),
            None,
        )

    def get_all_people_by_role(self, role: Role | str) -> list[Person]:
        """
        Partition people by role, preserving insertion order.

        Raises:
            UnhandledRoleError: If role is not a Role member or value
        """
        try:
            member = Role(role)
        except (ValueError, TypeError):
            assert_never_role(role)

        if member is Role.STUDENT:
            return [person for person in self._people if person.role is Role.STUDENT]
        if member is Role.TEACHER:
            return [person for person in self._people if person.role is Role.TEACHER]
        assert_never_role(member)

    def get_courses(self) -> list[Course]:
        return list(self._courses)

    def get_groups(self) -> list[Group]:
        return list(self._groups)

    def get_people(self) -> list[Person]:
        return list(self._people)

    def __repr__(self) -> str:
        return (
            f"University(name={self.name!r}, courses={len(self._courses)}, "
            f"groups={len(self._groups)}, people={len(self._people)})"
        )
