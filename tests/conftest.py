"""
Shared fixtures for the problem proxy tests.

Upstream traffic never leaves the process: the ServiceNow instance is
simulated by an httpx.MockTransport handler, and use cases run against
an in-memory Table API.
"""

import json
from typing import Any, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from problem_proxy.core.config import Settings
from problem_proxy.domain.problems.errors import UpstreamRequestError
from problem_proxy.domain.problems.ports import TableApiPort
from problem_proxy.infrastructure.problems.table_api_client import (
    ServiceNowTableClient,
)
from problem_proxy.interfaces.problems.dependencies import get_table_api
from problem_proxy.main import create_app

SN_URL = "https://dev12345.service-now.com"
SN_USER = "admin"
SN_PASSWORD = "secret"


class UpstreamStub:
    """Fake ServiceNow instance for httpx.MockTransport.

    Responses are registered per (method, path). Unregistered routes
    answer 404 the way the Table API does for an unknown sys_id.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Any] = {}

    def respond(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        result: Any = None,
        content: Optional[bytes] = None,
    ) -> None:
        """Register a response; ``result`` is wrapped in the envelope."""
        if content is None and result is not None:
            content = json.dumps({"result": result}).encode()
        self._routes[(method, path)] = (status_code, content or b"")

    def fail(self, method: str, path: str, exc: Exception) -> None:
        """Make a route raise a transport error."""
        self._routes[(method, path)] = exc

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self._routes.get((request.method, request.url.path))
        if outcome is None:
            return httpx.Response(
                404,
                json={"error": {"message": "No Record found"}, "status": "failure"},
            )
        if isinstance(outcome, Exception):
            raise outcome
        status_code, content = outcome
        return httpx.Response(
            status_code,
            content=content,
            headers={"Content-Type": "application/json"},
        )

    def last_json(self) -> Any:
        """Decode the JSON body of the most recent request."""
        return json.loads(self.requests[-1].content)


class InMemoryTableApi(TableApiPort):
    """TableApiPort backed by dicts, with injectable failures."""

    def __init__(self, tables: Optional[dict[str, dict[str, dict]]] = None) -> None:
        self.tables = tables or {}
        self.calls: list[tuple[str, str, Any]] = []
        self.failing: set[str] = set()
        self.update_result: Any = ...

    def _check(self, operation: str, table: str, detail: Any = None) -> None:
        self.calls.append((operation, table, detail))
        if operation in self.failing:
            raise UpstreamRequestError("GET", f"/api/now/table/{table}", "boom")

    def list_records(self, table: str) -> list[dict]:
        self._check("list", table)
        return list(self.tables.get(table, {}).values())

    def get_record(self, table: str, record_id: str) -> Optional[dict]:
        self._check("get", table, record_id)
        return self.tables.get(table, {}).get(record_id)

    def query_records(self, table: str, params: dict[str, Any]) -> list[dict]:
        self._check("query", table, params)
        return [
            row
            for row in self.tables.get(table, {}).values()
            if all(row.get(key) == value for key, value in params.items())
        ]

    def create_record(self, table: str, payload: dict[str, Any]) -> dict:
        self._check("create", table, payload)
        record = {"sys_id": f"new{len(self.calls)}", **payload}
        self.tables.setdefault(table, {})[record["sys_id"]] = record
        return record

    def update_record(
        self, table: str, record_id: str, payload: dict[str, Any]
    ) -> Optional[dict]:
        self._check("update", table, (record_id, payload))
        if self.update_result is not ...:
            return self.update_result
        record = self.tables.get(table, {}).get(record_id)
        if record is None:
            return None
        record.update(payload)
        return record

    def delete_record(self, table: str, record_id: str) -> None:
        self._check("delete", table, record_id)
        self.tables.get(table, {}).pop(record_id, None)


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fictitious ServiceNow instance."""
    return Settings(
        _env_file=None,
        servicenow_url=SN_URL,
        servicenow_user=SN_USER,
        servicenow_password=SN_PASSWORD,
    )


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()


@pytest.fixture
def table_client(settings: Settings, upstream: UpstreamStub) -> ServiceNowTableClient:
    """Real adapter whose HTTP traffic goes to the upstream stub."""
    http_client = httpx.Client(transport=httpx.MockTransport(upstream))
    yield ServiceNowTableClient(settings, client=http_client)
    http_client.close()


@pytest.fixture
def client(settings: Settings, table_client: ServiceNowTableClient) -> TestClient:
    """TestClient for an app wired to the upstream stub.

    Entered as a context manager so the app lifespan runs and closes
    the adapter the app built for itself.
    """
    app = create_app(settings)
    app.dependency_overrides[get_table_api] = lambda: table_client
    with TestClient(app) as test_client:
        yield test_client
