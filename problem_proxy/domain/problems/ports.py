"""
Port interfaces (ABCs) for the problems bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from problem_proxy.domain.problems.entities import Record


class TableApiPort(ABC):
    """Port for reading and writing records of an upstream table.

    Every method may raise UpstreamRequestError when the outbound
    call fails at the transport level or with a non-2xx status.
    """

    @abstractmethod
    def list_records(self, table: str) -> list[Record]:
        """Return all records of a table."""
        raise NotImplementedError

    @abstractmethod
    def get_record(self, table: str, record_id: str) -> Optional[Record]:
        """Return one record by ID, or None if the upstream has none."""
        raise NotImplementedError

    @abstractmethod
    def query_records(self, table: str, params: dict[str, Any]) -> list[Record]:
        """Return the records of a table matching the filter parameters.

        Args:
            table: Upstream table name.
            params: Field filters sent as query parameters.

        Returns:
            Matching records, possibly empty.
        """
        raise NotImplementedError

    @abstractmethod
    def create_record(self, table: str, payload: dict[str, Any]) -> Record:
        """Create a record and return it as stored by the upstream."""
        raise NotImplementedError

    @abstractmethod
    def update_record(
        self, table: str, record_id: str, payload: dict[str, Any]
    ) -> Optional[Record]:
        """Update a record and return it, or None if the upstream has none."""
        raise NotImplementedError

    @abstractmethod
    def delete_record(self, table: str, record_id: str) -> None:
        """Delete a record."""
        raise NotImplementedError
