import logging

from ..models import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """Stub repository. Keeps its connection string but never connects."""

    def __init__(self, database_url: str) -> None:
        self._database_url = database_url

    @property
    def database_url(self) -> str:
        return self._database_url

    def add(self, employee: Employee) -> None:
        """Accept the employee without storing it."""
        logger.debug("Add employee %s (no-op)", employee.id)
