"""
People Hierarchy

Person → Teacher / Student

Person carries identity, names, birth date and contact details. The role tag
is a class-level constant of each concrete subtype, so role and concrete type
can never disagree. Instances are built through the create() factories, which
draw the identifier from an IdentityAllocator.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date
from typing import Any, ClassVar

import structlog
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from registry.domain.academic import AcademicRecord, Course
from registry.domain.enums import AcademicStatus, Discipline, Gender, Role
from registry.domain.exceptions import InactiveEnrollmentError, ValidationError
from registry.domain.identity import IdentityAllocator

logger = structlog.get_logger(__name__)


class ContactInfo(BaseModel):
    """Contact details of a person. Formats are not validated."""

    model_config = ConfigDict(frozen=True)

    email: str
    phone: str


class PersonInfo(BaseModel):
    """Structured record a person is constructed from."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    birth_day: date
    gender: Gender
    email: str
    phone: str


class Person(BaseModel, ABC):
    """
    Abstract base class for every person in the registry.

    Subclasses fix ROLE; the role property only reads it.

    Only the create() factories allocate an identifier. Constructing a
    subclass directly takes `id` as given and leaves every allocator untouched,
    so registry code always goes through create().
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    ROLE: ClassVar[Role]

    id: int = Field(..., ge=1, frozen=True, description="Registry-wide person identifier")
    first_name: str
    last_name: str
    birth_day: date
    gender: Gender
    contact_info: ContactInfo

    @classmethod
    def _fields_from_info(cls, info: PersonInfo, allocator: IdentityAllocator) -> dict[str, Any]:
        return {
            "id": allocator.next(),
            "first_name": info.first_name,
            "last_name": info.last_name,
            "birth_day": info.birth_day,
            "gender": info.gender,
            "contact_info": ContactInfo(email=info.email, phone=info.phone),
        }

    @property
    def role(self) -> Role:
        """Role of this person, fixed by its concrete type."""
        return self.ROLE

    @property
    def full_name(self) -> str:
        """Full name in "last first" order."""
        return f"{self.last_name} {self.first_name}"

    @property
    def age(self) -> int:
        """Age in whole years as of today."""
        return self.age_on(date.today())

    def age_on(self, day: date) -> int:
        """
        Age in whole years on a given date.

        One year is subtracted while the birthday has not yet come round
        in the year of `day`.
        """
        years = day.year - self.birth_day.year
        if (day.month, day.day) < (self.birth_day.month, self.birth_day.day):
            years -= 1
        return years

    @abstractmethod
    def to_summary(self) -> dict[str, Any]:
        """Plain-data view of the person for display or logging."""

    def _base_summary(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "role": self.role.value,
            "full_name": self.full_name,
            "email": self.contact_info.email,
            "phone": self.contact_info.phone,
        }


class Teacher(Person):
    """Teaching staff member with discipline specializations and assigned courses."""

    ROLE: ClassVar[Role] = Role.TEACHER

    specializations: list[Discipline] = Field(
        default_factory=list,
        description="Informational; not checked against assigned courses",
    )

    _courses: list[Course] = PrivateAttr(default_factory=list)

    @classmethod
    def create(
        cls,
        info: PersonInfo,
        allocator: IdentityAllocator,
        specializations: Iterable[Discipline] = (),
    ) -> "Teacher":
        """
        Build a teacher with a freshly allocated identifier.

        Args:
            info: Names, birth date, gender and contact details
            allocator: Identifier source shared with all other people
            specializations: Disciplines the teacher specializes in

        Returns:
            Teacher: New teacher with no assigned courses
        """
        teacher = cls(
            **cls._fields_from_info(info, allocator),
            specializations=list(specializations),
        )
        logger.debug("Teacher created", person_id=teacher.id, full_name=teacher.full_name)
        return teacher

    def assign_course(self, course: Course) -> None:
        """Assign a course. The same course may be assigned more than once."""
        self._courses.append(course)
        logger.debug("Course assigned", teacher_id=self.id, course=course.name)

    def remove_course(self, course_name: str) -> None:
        """Remove every assigned course with the given name."""
        before = len(self._courses)
        self._courses = [course for course in self._courses if course.name != course_name]
        logger.debug(
            "Courses removed",
            teacher_id=self.id,
            course=course_name,
            removed=before - len(self._courses),
        )

    def get_courses(self) -> list[Course]:
        """Assigned courses, as a new list."""
        return list(self._courses)

    def to_summary(self) -> dict[str, Any]:
        summary = self._base_summary()
        summary["specializations"] = [d.value for d in self.specializations]
        summary["courses"] = [course.name for course in self._courses]
        return summary


class Student(Person):
    """
    Student with an academic status, enrolled courses and a performance record.

    Status starts ACTIVE and moves only through update_academic_status().
    Any status may follow any other.
    """

    ROLE: ClassVar[Role] = Role.STUDENT

    academic_performance: AcademicRecord = Field(default_factory=AcademicRecord)

    _status: AcademicStatus = PrivateAttr(default=AcademicStatus.ACTIVE)
    _enrolled_courses: list[Course] = PrivateAttr(default_factory=list)

    @classmethod
    def create(cls, info: PersonInfo, allocator: IdentityAllocator) -> "Student":
        """
        Build an ACTIVE student with a freshly allocated identifier.

        Args:
            info: Names, birth date, gender and contact details
            allocator: Identifier source shared with all other people

        Returns:
            Student: New student with no enrollments and zero credits
        """
        student = cls(**cls._fields_from_info(info, allocator))
        logger.debug("Student created", person_id=student.id, full_name=student.full_name)
        return student

    @property
    def status(self) -> AcademicStatus:
        """Current academic status."""
        return self._status

    @property
    def is_active(self) -> bool:
        """Whether the student may currently enroll."""
        return self._status is AcademicStatus.ACTIVE

    def enroll_course(self, course: Course) -> None:
        """
        Enroll in a course and add its credits to the performance record.

        Raises:
            InactiveEnrollmentError: If the student is not ACTIVE
        """
        if not self.is_active:
            raise InactiveEnrollmentError(
                student_id=self.id,
                status=self._status.value,
                course_name=course.name,
            )

        self._enrolled_courses.append(course)
        self.academic_performance.total_credits += course.credits
        logger.debug(
            "Student enrolled",
            student_id=self.id,
            course=course.name,
            total_credits=self.academic_performance.total_credits,
        )

    def update_academic_status(self, new_status: AcademicStatus) -> None:
        """Move to any academic status."""
        previous = self._status
        self._status = AcademicStatus(new_status)
        logger.info(
            "Academic status updated",
            student_id=self.id,
            previous=previous.value,
            current=self._status.value,
        )

    def update_gpa(self, gpa: float) -> None:
        """
        Set the grade point average.

        Raises:
            ValidationError: If gpa is outside 0.0 to 4.0 or is NaN
        """
        if not 0.0 <= gpa <= 4.0:
            raise ValidationError("GPA must be between 0.0 and 4.0", field="gpa", value=gpa)
        self.academic_performance.gpa = gpa

    def get_average_score(self) -> float:
        """Current GPA as recorded."""
        return self.academic_performance.gpa

    def get_enrolled_courses(self) -> list[Course]:
        """Enrolled courses, as a new list."""
        return list(self._enrolled_courses)

    def to_summary(self) -> dict[str, Any]:
        summary = self._base_summary()
        summary["status"] = self._status.value
        summary["total_credits"] = self.academic_performance.total_credits
        summary["gpa"] = self.academic_performance.gpa
        summary["courses"] = [course.name for course in self._enrolled_courses]
        return summary
