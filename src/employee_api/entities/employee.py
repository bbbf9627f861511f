"""Employee domain entities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EmployeeEntity:
    """Domain entity for a persisted employee record.

    Attributes:
        id: Store-assigned identifier (hex string)
        name: Employee name
        salary: Salary amount
        age: Age in years
    """

    id: str
    name: str
    salary: float
    age: float


@dataclass(frozen=True)
class EmployeeUpdate:
    """Mutable fields of an employee record.

    Used both for inserts (the store assigns the id) and for updates
    (the id comes from the request path and is never written).
    """

    name: str
    salary: float = 0.0
    age: float = 0.0

    def to_document(self) -> dict[str, Any]:
        """Map fields to the stored document layout."""
        return {
            "name": self.name,
            "salary": self.salary,
            "age": self.age,
        }

    def with_id(self, employee_id: str) -> EmployeeEntity:
        """Build the entity these values describe once stored under an id."""
        return EmployeeEntity(
            id=employee_id,
            name=self.name,
            salary=self.salary,
            age=self.age,
        )
