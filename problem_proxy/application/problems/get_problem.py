"""
Use case: Retrieve one problem with its work notes.

Input: GetProblemQuery (problem_id)
Output: ProblemDetailResult
Side effects: None (read-only query).
Failure cases: ProblemNotFoundError, ProblemOperationError.
"""

import logging

from problem_proxy.application.problems.dtos import (
    GetProblemQuery,
    ProblemDetailResult,
)
from problem_proxy.domain.problems.entities import (
    JOURNAL_TABLE,
    PROBLEM_TABLE,
    work_notes_filter,
)
from problem_proxy.domain.problems.errors import (
    ProblemNotFoundError,
    ProblemOperationError,
    UpstreamRequestError,
)
from problem_proxy.domain.problems.ports import TableApiPort

logger = logging.getLogger(__name__)


class GetProblemUseCase:
    """Orchestrates fetching a problem and then its work notes.

    The work-note lookup depends on the problem lookup: it only runs
    once the problem is known to exist. Both calls share one failure
    boundary, so either failing yields the same client-facing error.
    """

    def __init__(self, table_api: TableApiPort) -> None:
        """Initialize the use case.

        Args:
            table_api: Port to the upstream Table API.
        """
        self._table_api = table_api

    def execute(self, query: GetProblemQuery) -> ProblemDetailResult:
        """Run the get problem use case.

        Args:
            query: Identifies the problem to fetch.

        Returns:
            The problem record and its work notes.

        Raises:
            ProblemNotFoundError: If the upstream returns no record.
            ProblemOperationError: If either upstream call fails.
        """
        problem_id = query.problem_id
        logger.info("Fetching problem id=%s", problem_id)

        try:
            problem = self._table_api.get_record(PROBLEM_TABLE, problem_id)
        except UpstreamRequestError as exc:
            logger.error("Error fetching problem with ID %s: %s", problem_id, exc)
            raise ProblemOperationError(
                f"Error fetching problem with ID {problem_id}"
            ) from exc

        if not problem:
            raise ProblemNotFoundError(problem_id)

        try:
            work_notes = self._table_api.query_records(
                JOURNAL_TABLE, work_notes_filter(problem_id)
            )
        except UpstreamRequestError as exc:
            logger.error(
                "Error fetching work notes for problem with ID %s: %s",
                problem_id,
                exc,
            )
            raise ProblemOperationError(
                f"Error fetching problem with ID {problem_id}"
            ) from exc

        return ProblemDetailResult(problem=problem, work_notes=work_notes)
