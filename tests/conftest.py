"""Registry test fixtures: fresh allocator, people, courses and university per test.

Invariants:
    - Every test gets its own IdentityAllocator, so identifiers start at 1
    - Settings cache is cleared around each test; env overrides never leak
    - structlog configuration is reset after each test
"""

from datetime import date

import pytest
import structlog

from registry.config import get_settings
from registry.domain import (
    Course,
    Discipline,
    Gender,
    IdentityAllocator,
    PersonInfo,
    Student,
    Teacher,
    University,
)


def make_info(first_name: str = "Ada", last_name: str = "Lovelace", **overrides) -> PersonInfo:
    """Build a PersonInfo with sensible defaults."""
    fields = {
        "first_name": first_name,
        "last_name": last_name,
        "birth_day": date(2001, 5, 14),
        "gender": Gender.FEMALE,
        "email": f"{first_name.lower()}@example.edu",
        "phone": "+1-555-0100",
    }
    fields.update(overrides)
    return PersonInfo(**fields)


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def allocator():
    return IdentityAllocator()


@pytest.fixture
def info():
    return make_info()


@pytest.fixture
def algorithms():
    return Course(name="Algorithms", discipline=Discipline.COMPUTER_SCIENCE, credits=4)


@pytest.fixture
def calculus():
    return Course(name="Calculus", discipline=Discipline.MATHEMATICS, credits=3)


@pytest.fixture
def teacher(allocator):
    return Teacher.create(
        make_info("Alan", "Turing", gender=Gender.MALE),
        allocator,
        specializations=[Discipline.COMPUTER_SCIENCE, Discipline.MATHEMATICS],
    )


@pytest.fixture
def student(allocator):
    return Student.create(make_info("Grace", "Hopper"), allocator)


@pytest.fixture
def university():
    return University(name="Test University")
