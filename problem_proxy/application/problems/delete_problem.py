"""
Use case: Delete a problem record.

Input: DeleteProblemCommand (problem_id)
Output: DeleteProblemResult
Side effects: Removes a record from the upstream problem table.
Failure cases: ProblemOperationError.
"""

import logging

from problem_proxy.application.problems.dtos import (
    DeleteProblemCommand,
    DeleteProblemResult,
)
from problem_proxy.domain.problems.entities import PROBLEM_TABLE
from problem_proxy.domain.problems.errors import (
    ProblemOperationError,
    UpstreamRequestError,
)
from problem_proxy.domain.problems.ports import TableApiPort

logger = logging.getLogger(__name__)


class DeleteProblemUseCase:
    """Deletes a problem and confirms with a fixed message."""

    def __init__(self, table_api: TableApiPort) -> None:
        self._table_api = table_api

    def execute(self, command: DeleteProblemCommand) -> DeleteProblemResult:
        """Run the delete problem use case.

        The upstream response body is not inspected.

        Raises:
            ProblemOperationError: If the upstream call fails.
        """
        problem_id = command.problem_id
        logger.info("Deleting problem id=%s", problem_id)

        try:
            self._table_api.delete_record(PROBLEM_TABLE, problem_id)
        except UpstreamRequestError as exc:
            logger.error("Error deleting problem with ID %s: %s", problem_id, exc)
            raise ProblemOperationError(
                f"Error deleting problem with ID {problem_id}"
            ) from exc

        return DeleteProblemResult(
            problem_id=problem_id,
            message=f"Problem with ID {problem_id} deleted successfully",
        )
