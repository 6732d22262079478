"""
Data Transfer Objects for the problems application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Any

from problem_proxy.domain.problems.entities import Record


@dataclass(frozen=True)
class GetProblemQuery:
    """Input DTO for retrieving a single problem.

    Attributes:
        problem_id: Upstream identifier (sys_id) of the problem.
    """

    problem_id: str


@dataclass(frozen=True)
class ProblemDetailResult:
    """Output DTO for a problem together with its work notes.

    Attributes:
        problem: The upstream problem record.
        work_notes: Journal entries tagged as work notes for the problem.
    """

    problem: Record
    work_notes: list[Record] = field(default_factory=list)


@dataclass(frozen=True)
class CreateProblemCommand:
    """Input DTO for creating a problem.

    Attributes:
        fields: The request body as received. Only whitelisted
            fields are forwarded upstream.
    """

    fields: dict[str, Any]


@dataclass(frozen=True)
class UpdateProblemCommand:
    """Input DTO for updating a problem.

    Attributes:
        problem_id: Upstream identifier of the problem.
        fields: The request body, forwarded upstream unfiltered.
    """

    problem_id: str
    fields: dict[str, Any]


@dataclass(frozen=True)
class DeleteProblemCommand:
    """Input DTO for deleting a problem."""

    problem_id: str


@dataclass(frozen=True)
class DeleteProblemResult:
    """Output DTO confirming a deletion."""

    problem_id: str
    message: str
