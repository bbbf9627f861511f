"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from employee_api.entities import EmployeeEntity


class EmployeeResponse(BaseModel):
    """A persisted employee."""

    id: str = Field(..., description="Store-assigned identifier")
    name: str = Field(..., description="Employee name")
    salary: float = Field(..., description="Salary amount")
    age: float = Field(..., description="Age in years")

    @classmethod
    def from_entity(cls, entity: EmployeeEntity) -> "EmployeeResponse":
        return cls(id=entity.id, name=entity.name, salary=entity.salary, age=entity.age)


class DeleteEmployeeResponse(BaseModel):
    """Response DTO for a successful delete."""

    success: bool = Field(..., description="Whether the operation succeeded")
    id: str = Field(..., description="Identifier of the deleted employee")
    message: str = Field(..., description="Human-readable status message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    database: str = Field(..., description="Database connectivity: 'connected' or 'disconnected'")
    total_employees: int | None = Field(
        None,
        description="Number of stored employees, when the database is reachable",
        ge=0,
    )
