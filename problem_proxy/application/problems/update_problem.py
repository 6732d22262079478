"""
Use case: Update a problem record.

Input: UpdateProblemCommand (problem_id, request body)
Output: Record (as updated upstream)
Side effects: Modifies a record in the upstream problem table.
Failure cases: ProblemNotFoundError, ProblemOperationError.
"""

import logging

from problem_proxy.application.problems.dtos import UpdateProblemCommand
from problem_proxy.domain.problems.entities import PROBLEM_TABLE, Record
from problem_proxy.domain.problems.errors import (
    ProblemNotFoundError,
    ProblemOperationError,
    UpstreamRequestError,
)
from problem_proxy.domain.problems.ports import TableApiPort

logger = logging.getLogger(__name__)


class UpdateProblemUseCase:
    """Forwards the whole request body as the update payload.

    Unlike creation, no field filtering is applied.
    """

    def __init__(self, table_api: TableApiPort) -> None:
        self._table_api = table_api

    def execute(self, command: UpdateProblemCommand) -> Record:
        """Run the update problem use case.

        Args:
            command: The problem ID and the fields to update.

        Returns:
            The updated record.

        Raises:
            ProblemNotFoundError: If the upstream returns no record.
            ProblemOperationError: If the upstream call fails.
        """
        problem_id = command.problem_id
        logger.info("Updating problem id=%s", problem_id)

        try:
            updated = self._table_api.update_record(
                PROBLEM_TABLE, problem_id, command.fields
            )
        except UpstreamRequestError as exc:
            logger.error("Error updating problem with ID %s: %s", problem_id, exc)
            raise ProblemOperationError(
                f"Error updating problem with ID {problem_id}"
            ) from exc

        if not updated:
            raise ProblemNotFoundError(problem_id)
        return updated
