from __future__ import annotations

from functools import lru_cache

from .config import Settings, get_settings
from .repositories.employee_repository import EmployeeRepository
from .services.employee_service import EmployeeService


class DependencyContainer:
    """
    Dependency injection container.

    Creates and wires the employee repository and service following
    the Dependency Inversion Principle.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """
        Initialize the container.

        Args:
            settings: Application settings; loaded from the environment when omitted
        """
        self.settings = settings or get_settings()

        # Create repositories (Infrastructure layer)
        self.employee_repo = EmployeeRepository(self.settings.database_url)

        # Create services (Domain layer)
        self.employee_service = EmployeeService(repo=self.employee_repo)

    def get_employee_service(self) -> EmployeeService:
        return self.employee_service


@lru_cache
def get_container() -> DependencyContainer:
    return DependencyContainer()
