"""MongoDB implementation of EmployeeStore.

Documents in the collection have the layout
``{"_id": ObjectId, "name": str, "salary": float, "age": float}``.
"""

import logging
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from employee_api.config import settings
from employee_api.entities import EmployeeEntity, EmployeeUpdate
from employee_api.exceptions import EmployeeStoreError, InvalidEmployeeIdError

logger = logging.getLogger(__name__)


class MongoEmployeeRepository:
    """MongoDB repository for employee records.

    This class satisfies the EmployeeStore protocol through structural
    typing. It does not own the client: the caller creates it once at
    startup and closes it on shutdown.
    """

    def __init__(
        self,
        client: MongoClient,
        db_name: str | None = None,
        collection_name: str | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            client: Shared MongoDB client.
            db_name: Database name. Defaults to settings.
            collection_name: Collection name. Defaults to settings.
        """
        self._client = client
        self._db_name = db_name or settings.mongo_db_name
        self._collection_name = collection_name or settings.mongo_collection
        self._collection: Collection = client[self._db_name][self._collection_name]

    @classmethod
    def create(
        cls,
        client: MongoClient,
        db_name: str | None = None,
        collection_name: str | None = None,
    ) -> "MongoEmployeeRepository":
        """Factory method to create MongoEmployeeRepository with defaults."""
        return cls(
            client=client,
            db_name=db_name,
            collection_name=collection_name,
        )

    @staticmethod
    def _parse_id(employee_id: str) -> ObjectId:
        try:
            return ObjectId(employee_id)
        except (InvalidId, TypeError) as e:
            raise InvalidEmployeeIdError(employee_id, str(e)) from e

    @staticmethod
    def _to_entity(document: dict[str, Any]) -> EmployeeEntity:
        return EmployeeEntity(
            id=str(document["_id"]),
            name=document.get("name", ""),
            salary=float(document.get("salary", 0.0)),
            age=float(document.get("age", 0.0)),
        )

    def _store_error(self, operation: str, error: PyMongoError) -> EmployeeStoreError:
        logger.error("MongoDB %s on %s failed: %s", operation, self._collection_name, error)
        return EmployeeStoreError(str(error))

    def find_all(self) -> list[EmployeeEntity]:
        """Return every employee in natural order."""
        try:
            return [self._to_entity(doc) for doc in self._collection.find({})]
        except PyMongoError as e:
            raise self._store_error("find", e) from e

    def insert(self, employee: EmployeeUpdate) -> str:
        """Insert a new employee and return its generated id."""
        try:
            result = self._collection.insert_one(employee.to_document())
        except PyMongoError as e:
            raise self._store_error("insert", e) from e
        return str(result.inserted_id)

    def find_by_id(self, employee_id: str) -> EmployeeEntity | None:
        """Fetch an employee by id."""
        object_id = self._parse_id(employee_id)
        try:
            document = self._collection.find_one({"_id": object_id})
        except PyMongoError as e:
            raise self._store_error("find_one", e) from e
        if document is None:
            return None
        return self._to_entity(document)

    def update(self, employee_id: str, employee: EmployeeUpdate) -> bool:
        """Overwrite name, salary and age; ``_id`` is never part of ``$set``."""
        object_id = self._parse_id(employee_id)
        try:
            result = self._collection.update_one(
                {"_id": object_id},
                {"$set": employee.to_document()},
            )
        except PyMongoError as e:
            raise self._store_error("update", e) from e
        return result.matched_count > 0

    def delete(self, employee_id: str) -> int:
        """Delete an employee by id."""
        object_id = self._parse_id(employee_id)
        try:
            result = self._collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            raise self._store_error("delete", e) from e
        return result.deleted_count

    def count_all(self) -> int:
        """Count employees in the collection."""
        try:
            return self._collection.count_documents({})
        except PyMongoError as e:
            raise self._store_error("count", e) from e

    def health_check(self) -> bool:
        """Check if MongoDB is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError:
            return False

    @property
    def collection(self) -> Collection:
        """Get the underlying collection."""
        return self._collection
