from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from employee_api.api.dependencies import HandlerDep, lifespan, repository_lifespan
from employee_api.api.middleware import log_requests
from employee_api.config import configure_logging, settings
from employee_api.dto import (
    DeleteEmployeeResponse,
    EmployeeRequest,
    EmployeeResponse,
    HealthCheckResponse,
)
from employee_api.protocols import EmployeeStore

API_NAME = "Employee API"
API_VERSION = "0.1.0"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparsable bodies and parameters as 400 Bad Request."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg', 'invalid value')}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "; ".join(messages) or "Invalid request"},
    )


def create_app(repository: EmployeeStore | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        repository: Serve this store instead of connecting to MongoDB.

    Returns:
        Configured FastAPI instance
    """
    app = FastAPI(
        title=API_NAME,
        description="CRUD service for employee records stored in MongoDB",
        version=API_VERSION,
        lifespan=lifespan if repository is None else repository_lifespan(repository),
    )

    app.middleware("http")(log_requests)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": API_NAME,
            "version": API_VERSION,
            "endpoints": {
                "employees": "/employee",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get("/employee", response_model=list[EmployeeResponse])
    async def list_employees(handler: HandlerDep) -> list[EmployeeResponse]:
        """Fetch all employees."""
        return await handler.list_employees()

    @app.post("/employee", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
    async def create_employee(request: EmployeeRequest, handler: HandlerDep) -> EmployeeResponse:
        """Create an employee; the response carries the store-assigned id."""
        return await handler.create_employee(request)

    @app.put("/employee/{employee_id}", response_model=EmployeeResponse)
    async def update_employee(
        employee_id: str,
        request: EmployeeRequest,
        handler: HandlerDep,
    ) -> EmployeeResponse:
        """Replace name, salary and age of an employee."""
        return await handler.update_employee(employee_id, request)

    @app.delete("/employee/{employee_id}", response_model=DeleteEmployeeResponse)
    async def delete_employee(employee_id: str, handler: HandlerDep) -> DeleteEmployeeResponse:
        """Delete an employee."""
        return await handler.delete_employee(employee_id)

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "employee_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
