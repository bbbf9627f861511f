"""Employee storage protocol.

Defines the interface for any document store that can hold employee
records. Identifiers cross this boundary as opaque strings; each
implementation parses them into its own native format.
"""

from typing import Protocol, runtime_checkable

from employee_api.entities import EmployeeEntity, EmployeeUpdate


@runtime_checkable
class EmployeeStore(Protocol):
    """Protocol for employee storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Implementations raise:
        InvalidEmployeeIdError: when an id is not in the native format
        EmployeeStoreError: for any other backend failure
    """

    def find_all(self) -> list[EmployeeEntity]:
        """Return every record in store-native order."""
        ...

    def insert(self, employee: EmployeeUpdate) -> str:
        """Insert a new record.

        Args:
            employee: Field values to persist

        Returns:
            The store-assigned identifier
        """
        ...

    def find_by_id(self, employee_id: str) -> EmployeeEntity | None:
        """Fetch a single record, or None if absent."""
        ...

    def update(self, employee_id: str, employee: EmployeeUpdate) -> bool:
        """Overwrite name, salary and age of a record.

        Returns:
            True if a record matched, False otherwise
        """
        ...

    def delete(self, employee_id: str) -> int:
        """Delete a record.

        Returns:
            Number of records removed (0 or 1)
        """
        ...

    def count_all(self) -> int:
        """Count the records in the store."""
        ...

    def health_check(self) -> bool:
        """Check if the store is reachable."""
        ...
