"""
Registry Exceptions

Exception hierarchy for university registry constraint violations.
Every recoverable error derives from UniversityError and carries an ErrorCode,
so callers can branch on the variant without matching message text.
Programmer errors (an unhandled role value) derive from AssertionError instead
and are never caught as domain errors.
"""

from enum import Enum
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


class ErrorCode(str, Enum):
    """Closed set of registry error variants."""

    DUPLICATE_MEMBER = "DUPLICATE_MEMBER"
    MEMBER_NOT_FOUND = "MEMBER_NOT_FOUND"
    INACTIVE_ENROLLMENT = "INACTIVE_ENROLLMENT"
    DOMAIN_VALIDATION_ERROR = "DOMAIN_VALIDATION_ERROR"


class UniversityError(Exception):
    """
    Base class for all registry constraint violations.

    Raised before any mutation takes place, so the object graph is unchanged
    when one of these reaches the caller.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        context: dict[str, Any] | None = None,
    ):
        """
        Initialize registry error.

        Args:
            message: Human-readable error message
            error_code: Registry error variant
            context: Identifiers of the entities involved
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

        logger.warning(
            "Registry constraint violated",
            error_code=error_code.value,
            message=message,
            context=self.context,
            exception_type=type(self).__name__,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a plain dictionary."""
        result = {
            "error": self.error_code.value,
            "message": self.message,
            "type": type(self).__name__,
        }
        if self.context:
            result["context"] = self.context
        return result


class DuplicateMemberError(UniversityError):
    """Raised when a student is added to a group it already belongs to."""

    def __init__(self, group_name: str, student_id: int):
        super().__init__(
            message="Student is already in the group",
            error_code=ErrorCode.DUPLICATE_MEMBER,
            context={"group": group_name, "student_id": student_id},
        )
        self.group_name = group_name
        self.student_id = student_id


class MemberNotFoundError(UniversityError):
    """Raised when removing a student id that is not on the group roster."""

    def __init__(self, group_name: str, student_id: int):
        super().__init__(
            message="Student not found in group",
            error_code=ErrorCode.MEMBER_NOT_FOUND,
            context={"group": group_name, "student_id": student_id},
        )
        self.group_name = group_name
        self.student_id = student_id


class InactiveEnrollmentError(UniversityError):
    """Raised when a student outside ACTIVE status tries to enroll."""

    def __init__(self, student_id: int, status: str, course_name: str):
        super().__init__(
            message="Cannot enroll: student is not in active status",
            error_code=ErrorCode.INACTIVE_ENROLLMENT,
            context={
                "student_id": student_id,
                "status": status,
                "course": course_name,
            },
        )
        self.student_id = student_id
        self.status = status


class ValidationError(UniversityError):
    """Raised when a value handed to the registry is out of range."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
    ):
        context: dict[str, Any] = {}
        if field:
            context["field"] = field
        if value is not None:
            context["value"] = str(value)

        super().__init__(
            message=message,
            error_code=ErrorCode.DOMAIN_VALIDATION_ERROR,
            context=context,
        )


class UnhandledRoleError(AssertionError):
    """Raised when a role outside the closed Role set reaches a role switch."""

    def __init__(self, role: Any):
        super().__init__(f"Unhandled role: {role!r}")
        self.role = role
