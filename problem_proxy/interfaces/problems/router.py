"""
FastAPI router for the problems bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status

from problem_proxy.application.problems.create_problem import CreateProblemUseCase
from problem_proxy.application.problems.delete_problem import DeleteProblemUseCase
from problem_proxy.application.problems.dtos import (
    CreateProblemCommand,
    DeleteProblemCommand,
    GetProblemQuery,
    UpdateProblemCommand,
)
from problem_proxy.application.problems.get_problem import GetProblemUseCase
from problem_proxy.application.problems.list_problems import ListProblemsUseCase
from problem_proxy.application.problems.update_problem import UpdateProblemUseCase
from problem_proxy.interfaces.problems.dependencies import (
    get_create_problem_use_case,
    get_delete_problem_use_case,
    get_get_problem_use_case,
    get_list_problems_use_case,
    get_update_problem_use_case,
)
from problem_proxy.interfaces.problems.schemas import (
    CreateProblemRequest,
    MessageResponse,
    ProblemDetailResponse,
)

router = APIRouter(tags=["problems"])

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    500: {"model": MessageResponse},
}
NOT_FOUND_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": MessageResponse},
    **ERROR_RESPONSES,
}


@router.get(
    "/problems",
    response_model=None,
    responses=ERROR_RESPONSES,
    summary="List problems",
    description="Return every problem record from the upstream problem table.",
)
def list_problems(
    use_case: ListProblemsUseCase = Depends(get_list_problems_use_case),
) -> list[Any]:
    """List all problems."""
    return use_case.execute()


@router.get(
    "/problem/{problem_id}",
    response_model=ProblemDetailResponse,
    responses=NOT_FOUND_RESPONSES,
    summary="Get a problem",
    description="Return one problem together with its work notes.",
)
def get_problem(
    problem_id: str,
    use_case: GetProblemUseCase = Depends(get_get_problem_use_case),
) -> ProblemDetailResponse:
    """Get a problem and its work notes by ID."""
    result = use_case.execute(GetProblemQuery(problem_id=problem_id))
    return ProblemDetailResponse(problem=result.problem, work_notes=result.work_notes)


@router.post(
    "/problem",
    status_code=status.HTTP_201_CREATED,
    response_model=None,
    responses=ERROR_RESPONSES,
    summary="Create a problem",
    description=(
        "Create a problem from short_description, description and priority. "
        "Other fields in the body are ignored."
    ),
)
def create_problem(
    request: Optional[CreateProblemRequest] = None,
    use_case: CreateProblemUseCase = Depends(get_create_problem_use_case),
) -> Any:
    """Create a new problem.

    A missing body counts as an empty one; the upstream result is
    relayed as-is, even when it is null.
    """
    fields = request.model_dump(exclude_unset=True) if request is not None else {}
    command = CreateProblemCommand(fields=fields)
    return use_case.execute(command)


@router.put(
    "/problem/{problem_id}",
    response_model=None,
    responses=NOT_FOUND_RESPONSES,
    summary="Update a problem",
    description="Forward the whole request body as the update for a problem.",
)
def update_problem(
    problem_id: str,
    fields: Optional[dict[str, Any]] = Body(default=None),
    use_case: UpdateProblemUseCase = Depends(get_update_problem_use_case),
) -> Any:
    """Update an existing problem. A missing body is forwarded as {}."""
    command = UpdateProblemCommand(problem_id=problem_id, fields=fields or {})
    return use_case.execute(command)


@router.delete(
    "/problem/{problem_id}",
    response_model=MessageResponse,
    responses=ERROR_RESPONSES,
    summary="Delete a problem",
)
def delete_problem(
    problem_id: str,
    use_case: DeleteProblemUseCase = Depends(get_delete_problem_use_case),
) -> MessageResponse:
    """Delete a problem by ID."""
    result = use_case.execute(DeleteProblemCommand(problem_id=problem_id))
    return MessageResponse(message=result.message)
