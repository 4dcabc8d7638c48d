from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import Employee


class IEmployeeRepository(Protocol):
    """
    Protocol for employee repositories.
    Allows mocking and dependency injection.

    Services depend on this protocol rather than concrete repository implementations,
    following the Dependency Inversion Principle.
    """

    def add(self, employee: Employee) -> None:
        """
        Add an employee to the underlying store.

        The contract defines no failure mode: implementations complete
        without returning a value.

        Args:
            employee: The employee to add
        """
        ...
