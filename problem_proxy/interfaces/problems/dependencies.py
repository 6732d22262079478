"""
Dependency injection for the problems bounded context.

Provides FastAPI dependency functions that wire the Table API adapter
into use cases via constructor injection. The adapter itself is built
once by the application factory and kept on ``app.state``.
"""

from fastapi import Depends, Request

from problem_proxy.application.problems.create_problem import CreateProblemUseCase
from problem_proxy.application.problems.delete_problem import DeleteProblemUseCase
from problem_proxy.application.problems.get_problem import GetProblemUseCase
from problem_proxy.application.problems.list_problems import ListProblemsUseCase
from problem_proxy.application.problems.update_problem import UpdateProblemUseCase
from problem_proxy.domain.problems.ports import TableApiPort


def get_table_api(request: Request) -> TableApiPort:
    """Return the Table API adapter of the running application."""
    return request.app.state.table_api


def get_list_problems_use_case(
    table_api: TableApiPort = Depends(get_table_api),
) -> ListProblemsUseCase:
    """Build ListProblemsUseCase with its infrastructure dependencies."""
    return ListProblemsUseCase(table_api=table_api)


def get_get_problem_use_case(
    table_api: TableApiPort = Depends(get_table_api),
) -> GetProblemUseCase:
    """Build GetProblemUseCase with its infrastructure dependencies."""
    return GetProblemUseCase(table_api=table_api)


def get_create_problem_use_case(
    table_api: TableApiPort = Depends(get_table_api),
) -> CreateProblemUseCase:
    """Build CreateProblemUseCase with its infrastructure dependencies."""
    return CreateProblemUseCase(table_api=table_api)


def get_update_problem_use_case(
    table_api: TableApiPort = Depends(get_table_api),
) -> UpdateProblemUseCase:
    """Build UpdateProblemUseCase with its infrastructure dependencies."""
    return UpdateProblemUseCase(table_api=table_api)


def get_delete_problem_use_case(
    table_api: TableApiPort = Depends(get_table_api),
) -> DeleteProblemUseCase:
    """Build DeleteProblemUseCase with its infrastructure dependencies."""
    return DeleteProblemUseCase(table_api=table_api)
