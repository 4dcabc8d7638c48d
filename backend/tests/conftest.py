from __future__ import annotations

import pytest

from app.models import Employee
from tests.fake_repositories import RecordingEmployeeRepository


@pytest.fixture
def recording_repo() -> RecordingEmployeeRepository:
    """Fixture providing a fresh RecordingEmployeeRepository instance."""
    return RecordingEmployeeRepository()


@pytest.fixture
def sample_employee() -> Employee:
    """Fixture providing a sample Employee entity."""
    return Employee(id=1, first_name="Jane", last_name="Doe")
