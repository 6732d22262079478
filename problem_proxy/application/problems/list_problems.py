"""
Use case: List all problem records.

Input: none
Output: list[Record]
Side effects: None (read-only query).
Failure cases: ProblemOperationError.
"""

import logging

from problem_proxy.domain.problems.entities import PROBLEM_TABLE, Record
from problem_proxy.domain.problems.errors import (
    ProblemOperationError,
    UpstreamRequestError,
)
from problem_proxy.domain.problems.ports import TableApiPort

logger = logging.getLogger(__name__)


class ListProblemsUseCase:
    """Returns every problem record held by the upstream table."""

    def __init__(self, table_api: TableApiPort) -> None:
        self._table_api = table_api

    def execute(self) -> list[Record]:
        """Run the list problems use case.

        Returns:
            The upstream problem records, unmodified.

        Raises:
            ProblemOperationError: If the upstream call fails.
        """
        logger.info("Listing problems")
        try:
            return self._table_api.list_records(PROBLEM_TABLE)
        except UpstreamRequestError as exc:
            logger.error("Error fetching problems: %s", exc)
            raise ProblemOperationError("Error fetching problems") from exc
