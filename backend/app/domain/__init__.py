"""Domain layer - contains protocols (interfaces) and business logic abstractions."""

from .repositories import IEmployeeRepository

__all__ = ["IEmployeeRepository"]
