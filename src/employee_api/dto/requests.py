"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from employee_api.entities import EmployeeUpdate


class EmployeeRequest(BaseModel):
    """Request DTO for creating or updating an employee.

    ``id`` is accepted so clients can send back a record they received,
    but it is always ignored: the store assigns ids on create and the
    path carries the id on update.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    id: str | None = Field(None, description="Ignored; ids are assigned by the store")
    name: str = Field(..., description="Employee name")
    salary: float = Field(0.0, description="Salary amount")
    age: float = Field(0.0, description="Age in years")

    def to_update(self) -> EmployeeUpdate:
        """Convert to the domain update structure, dropping ``id``."""
        return EmployeeUpdate(name=self.name, salary=self.salary, age=self.age)
