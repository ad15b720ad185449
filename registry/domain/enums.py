"""
Registry Enumerations

Closed value sets shared by people, courses and groups.
"""

from enum import Enum


class Role(str, Enum):
    """Role of a person in the university. Fixed by the concrete person type."""

    STUDENT = "student"
    TEACHER = "teacher"


class Discipline(str, Enum):
    """Academic discipline of a course or a teacher specialization."""

    COMPUTER_SCIENCE = "Computer Science"
    MATHEMATICS = "Mathematics"
    PHYSICS = "Physics"
    BIOLOGY = "Biology"
    CHEMISTRY = "Chemistry"


class AcademicStatus(str, Enum):
    """
    Enrollment-eligibility state of a student.

    Every status may follow every other one; only ACTIVE permits enrollment.
    """

    ACTIVE = "active"
    ACADEMIC_LEAVE = "academic leave"
    GRADUATED = "graduated"
    EXPELLED = "expelled"


class Gender(str, Enum):
    """Gender recorded on a person."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
