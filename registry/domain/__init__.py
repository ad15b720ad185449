"""
Registry Domain Models

In-memory academic registry: people, courses, teaching groups and the
university that owns them.

Relationships:
- University owns Course, Group and Person collections (aggregation)
- University owns an IdentityAllocator (composition)
- Group uses-a Course and a Teacher (association, fixed)
- Group has Student roster members (association, mutable)
- Teacher and Student reference Course (association)
"""

from registry.domain.academic import AcademicRecord, Course
from registry.domain.enums import AcademicStatus, Discipline, Gender, Role
from registry.domain.exceptions import (
    DuplicateMemberError,
    ErrorCode,
    InactiveEnrollmentError,
    MemberNotFoundError,
    UnhandledRoleError,
    UniversityError,
    ValidationError,
)
from registry.domain.group import Group
from registry.domain.identity import IdentityAllocator
from registry.domain.outcome import Outcome, attempt
from registry.domain.people import ContactInfo, Person, PersonInfo, Student, Teacher
from registry.domain.university import University

__all__ = [
    # Enumerations
    "AcademicStatus",
    "Discipline",
    "Gender",
    "Role",
    # Identity
    "IdentityAllocator",
    # People
    "ContactInfo",
    "PersonInfo",
    "Person",
    "Student",
    "Teacher",
    # Academic
    "AcademicRecord",
    "Course",
    "Group",
    "University",
    # Errors
    "ErrorCode",
    "UniversityError",
    "DuplicateMemberError",
    "MemberNotFoundError",
    "InactiveEnrollmentError",
    "ValidationError",
    "UnhandledRoleError",
    # Outcomes
    "Outcome",
    "attempt",
]
