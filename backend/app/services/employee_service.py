from ..domain.repositories import IEmployeeRepository
from ..models import Employee


class EmployeeService:
    """
    Employee operations.

    The repository is injected at construction and kept for the
    service's lifetime; the service never builds one itself.
    """

    def __init__(self, repo: IEmployeeRepository) -> None:
        self._repo = repo

    @property
    def repo(self) -> IEmployeeRepository:
        return self._repo

    def add(self, employee: Employee) -> None:
        """Delegate to the injected repository, unchanged."""
        self._repo.add(employee)
