"""
Tests for MongoEmployeeRepository against a mocked pymongo collection.
"""

from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from employee_api.entities import EmployeeUpdate
from employee_api.exceptions import EmployeeStoreError, InvalidEmployeeIdError
from employee_api.protocols import EmployeeStore
from employee_api.repositories import MongoEmployeeRepository


@pytest.fixture
def mongo_client():
    """A MagicMock standing in for pymongo.MongoClient."""
    return MagicMock()


@pytest.fixture
def repository(mongo_client):
    """Repository bound to the mocked client."""
    return MongoEmployeeRepository.create(mongo_client, db_name="hrms", collection_name="employees")


def test_satisfies_protocol(repository):
    """MongoEmployeeRepository is a structural EmployeeStore."""
    assert isinstance(repository, EmployeeStore)


def test_uses_configured_collection(mongo_client, repository):
    """The collection is looked up by database and collection name."""
    mongo_client.__getitem__.assert_called_once_with("hrms")
    mongo_client["hrms"].__getitem__.assert_called_with("employees")


def test_find_all_maps_documents(repository):
    """Documents become entities with hex string ids."""
    object_id = ObjectId()
    repository.collection.find.return_value = [
        {"_id": object_id, "name": "Ada", "salary": 1000, "age": 30},
    ]

    employees = repository.find_all()

    repository.collection.find.assert_called_once_with({})
    assert len(employees) == 1
    assert employees[0].id == str(object_id)
    assert employees[0].salary == 1000.0


def test_insert_writes_fields_without_id(repository):
    """Insert sends only name, salary and age and returns the new id."""
    object_id = ObjectId()
    repository.collection.insert_one.return_value.inserted_id = object_id

    employee_id = repository.insert(EmployeeUpdate(name="Ada", salary=1000.0, age=30.0))

    assert employee_id == str(object_id)
    repository.collection.insert_one.assert_called_once_with(
        {"name": "Ada", "salary": 1000.0, "age": 30.0}
    )


def test_find_by_id(repository):
    """find_by_id filters on the parsed ObjectId."""
    object_id = ObjectId()
    repository.collection.find_one.return_value = {"_id": object_id, "name": "Ada", "salary": 1.0, "age": 2.0}

    employee = repository.find_by_id(str(object_id))

    repository.collection.find_one.assert_called_once_with({"_id": object_id})
    assert employee.name == "Ada"


def test_find_by_id_missing(repository):
    """find_by_id returns None for no match."""
    repository.collection.find_one.return_value = None
    assert repository.find_by_id(str(ObjectId())) is None


def test_update_sets_fields(repository):
    """Update uses $set on name, salary and age only."""
    object_id = ObjectId()
    repository.collection.update_one.return_value.matched_count = 1

    assert repository.update(str(object_id), EmployeeUpdate(name="Ada L.", salary=1200.0, age=31.0)) is True
    repository.collection.update_one.assert_called_once_with(
        {"_id": object_id},
        {"$set": {"name": "Ada L.", "salary": 1200.0, "age": 31.0}},
    )


def test_update_no_match(repository):
    """Update reports False when nothing matched."""
    repository.collection.update_one.return_value.matched_count = 0
    assert repository.update(str(ObjectId()), EmployeeUpdate(name="Ada")) is False


def test_delete_returns_count(repository):
    """Delete returns the driver's deleted count."""
    repository.collection.delete_one.return_value.deleted_count = 1
    assert repository.delete(str(ObjectId())) == 1


@pytest.mark.parametrize("bad_id", ["", "xyz", "12345", "g" * 24])
def test_invalid_ids_never_reach_the_driver(repository, bad_id):
    """Malformed ids raise InvalidEmployeeIdError before any query."""
    with pytest.raises(InvalidEmployeeIdError):
        repository.delete(bad_id)
    with pytest.raises(InvalidEmployeeIdError):
        repository.update(bad_id, EmployeeUpdate(name="Ada"))

    repository.collection.delete_one.assert_not_called()
    repository.collection.update_one.assert_not_called()


def test_driver_errors_become_store_errors(repository):
    """PyMongoError is wrapped in EmployeeStoreError with its message."""
    repository.collection.find.side_effect = ServerSelectionTimeoutError("no servers")
    repository.collection.insert_one.side_effect = OperationFailure("write failed")

    with pytest.raises(EmployeeStoreError, match="no servers"):
        repository.find_all()
    with pytest.raises(EmployeeStoreError, match="write failed"):
        repository.insert(EmployeeUpdate(name="Ada"))


def test_health_check(mongo_client, repository):
    """Health check pings the admin database."""
    assert repository.health_check() is True
    mongo_client.admin.command.assert_called_once_with("ping")

    mongo_client.admin.command.side_effect = ServerSelectionTimeoutError("down")
    assert repository.health_check() is False
