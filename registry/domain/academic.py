"""
Academic Domain Models

Course catalog entries and the per-student performance record.
Courses are immutable and shared by reference between teachers, groups
and student enrollment lists.
"""

from pydantic import BaseModel, ConfigDict, Field

from registry.domain.enums import Discipline


class Course(BaseModel):
    """
    Immutable course catalog entry.

    Credits are taken as given; zero or negative weights are not rejected.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Course name")
    discipline: Discipline = Field(..., description="Academic discipline")
    credits: int = Field(..., description="Credit weight")

    def __str__(self) -> str:
        return f"{self.name} ({self.discipline.value}, {self.credits} cr)"


class AcademicRecord(BaseModel):
    """
    Academic performance of a student.

    total_credits accumulates on enrollment; gpa is maintained separately
    and is never derived from the enrollment history.
    """

    model_config = ConfigDict(validate_assignment=True)

    total_credits: int = Field(default=0, description="Accumulated credit weight")
    gpa: float = Field(default=0.0, ge=0.0, le=4.0, description="Grade point average")
