"""Shared fixtures: an in-memory EmployeeStore and an API client backed by it."""

import time

import pytest
from bson import ObjectId
from bson.errors import InvalidId
from fastapi.testclient import TestClient

from employee_api.api.app import create_app
from employee_api.entities import EmployeeEntity, EmployeeUpdate
from employee_api.exceptions import EmployeeStoreError, InvalidEmployeeIdError
from employee_api.services import EmployeeService


class InMemoryEmployeeStore:
    """EmployeeStore keeping documents in a dict, keyed by ObjectId."""

    def __init__(self) -> None:
        self.documents: dict[ObjectId, dict] = {}

    @staticmethod
    def _parse_id(employee_id: str) -> ObjectId:
        try:
            return ObjectId(employee_id)
        except (InvalidId, TypeError) as e:
            raise InvalidEmployeeIdError(employee_id, str(e)) from e

    @staticmethod
    def _to_entity(object_id: ObjectId, document: dict) -> EmployeeEntity:
        return EmployeeEntity(id=str(object_id), **document)

    def find_all(self) -> list[EmployeeEntity]:
        return [self._to_entity(oid, doc) for oid, doc in self.documents.items()]

    def insert(self, employee: EmployeeUpdate) -> str:
        object_id = ObjectId()
        self.documents[object_id] = employee.to_document()
        return str(object_id)

    def find_by_id(self, employee_id: str) -> EmployeeEntity | None:
        object_id = self._parse_id(employee_id)
        document = self.documents.get(object_id)
        return None if document is None else self._to_entity(object_id, document)

    def update(self, employee_id: str, employee: EmployeeUpdate) -> bool:
        object_id = self._parse_id(employee_id)
        if object_id not in self.documents:
            return False
        self.documents[object_id].update(employee.to_document())
        return True

    def delete(self, employee_id: str) -> int:
        object_id = self._parse_id(employee_id)
        return 1 if self.documents.pop(object_id, None) is not None else 0

    def count_all(self) -> int:
        return len(self.documents)

    def health_check(self) -> bool:
        return True


class BrokenEmployeeStore(InMemoryEmployeeStore):
    """Store whose backend is unreachable."""

    def find_all(self) -> list[EmployeeEntity]:
        raise EmployeeStoreError("connection refused")

    def insert(self, employee: EmployeeUpdate) -> str:
        raise EmployeeStoreError("connection refused")

    def update(self, employee_id: str, employee: EmployeeUpdate) -> bool:
        self._parse_id(employee_id)
        raise EmployeeStoreError("connection refused")

    def delete(self, employee_id: str) -> int:
        self._parse_id(employee_id)
        raise EmployeeStoreError("connection refused")

    def count_all(self) -> int:
        raise EmployeeStoreError("connection refused")

    def health_check(self) -> bool:
        return False


class SlowEmployeeStore(InMemoryEmployeeStore):
    """Store whose reads take a fixed time, like a blocking driver call."""

    def __init__(self, delay: float) -> None:
        super().__init__()
        self.delay = delay

    def find_all(self) -> list[EmployeeEntity]:
        time.sleep(self.delay)
        return super().find_all()


@pytest.fixture
def store():
    """Fresh in-memory store."""
    return InMemoryEmployeeStore()


@pytest.fixture
def service(store):
    """EmployeeService over the in-memory store."""
    return EmployeeService.create(repository=store)


@pytest.fixture
def client(store):
    """Test client whose lifespan serves the in-memory store."""
    with TestClient(create_app(repository=store)) as test_client:
        yield test_client


@pytest.fixture
def broken_client():
    """Test client whose store fails every operation."""
    with TestClient(create_app(repository=BrokenEmployeeStore())) as test_client:
        yield test_client


@pytest.fixture
def slow_store():
    """Store taking half a second per list call."""
    return SlowEmployeeStore(delay=0.5)
