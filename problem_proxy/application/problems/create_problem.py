"""
Use case: Create a problem record.

Input: CreateProblemCommand (request body)
Output: Record (as created upstream)
Side effects: Creates a record in the upstream problem table.
Failure cases: ProblemOperationError.
"""

import logging

from problem_proxy.application.problems.dtos import CreateProblemCommand
from problem_proxy.domain.problems.entities import (
    CREATE_FIELDS,
    PROBLEM_TABLE,
    Record,
)
from problem_proxy.domain.problems.errors import (
    ProblemOperationError,
    UpstreamRequestError,
)
from problem_proxy.domain.problems.ports import TableApiPort

logger = logging.getLogger(__name__)


class CreateProblemUseCase:
    """Creates a problem from a whitelisted subset of the request body.

    Only short_description, description and priority are forwarded.
    Fields absent from the body are left out of the payload.
    """

    def __init__(self, table_api: TableApiPort) -> None:
        self._table_api = table_api

    def execute(self, command: CreateProblemCommand) -> Record:
        """Run the create problem use case.

        Args:
            command: The request body to take the new problem's fields from.

        Returns:
            The created record.

        Raises:
            ProblemOperationError: If the upstream call fails.
        """
        payload = {
            name: command.fields[name]
            for name in CREATE_FIELDS
            if name in command.fields
        }
        logger.info("Creating problem with fields=%s", sorted(payload))

        try:
            return self._table_api.create_record(PROBLEM_TABLE, payload)
        except UpstreamRequestError as exc:
            logger.error("Error creating problem: %s", exc)
            raise ProblemOperationError("Error creating problem") from exc
