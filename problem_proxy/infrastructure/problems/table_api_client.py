"""
Adapter: ServiceNow Table API client.

Implements TableApiPort over httpx.
Every call targets ``{SERVICENOW_URL}/api/now/table/{table}[/{id}]`` with
basic-auth credentials from Settings and unwraps the ``{"result": ...}``
envelope of the response.

No retries and no custom timeouts: httpx defaults apply.
"""

import logging
from typing import Any, Optional

import httpx

from problem_proxy.core.config import Settings
from problem_proxy.domain.problems.entities import Record
from problem_proxy.domain.problems.errors import UpstreamRequestError
from problem_proxy.domain.problems.ports import TableApiPort

logger = logging.getLogger(__name__)

HTTP_404 = 404


class ServiceNowTableClient(TableApiPort):
    """Concrete adapter for the ServiceNow Table API.

    Owns the httpx.Client it creates and closes it in close().
    An injected client is used as-is and left open; credentials are
    attached per request either way.
    """

    def __init__(self, settings: Settings, client: httpx.Client | None = None) -> None:
        """Initialize the adapter.

        Args:
            settings: Source of the instance URL and credentials.
            client: Optional preconfigured httpx client (e.g. with a
                mock transport).
        """
        self._settings = settings
        self._auth = httpx.BasicAuth(
            settings.servicenow_user, settings.servicenow_password
        )
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client()

    def list_records(self, table: str) -> list[Record]:
        return self._request("GET", self._settings.table_api_url(table)) or []

    def get_record(self, table: str, record_id: str) -> Optional[Record]:
        return self._request(
            "GET",
            self._settings.table_api_url(table, record_id),
            not_found_ok=True,
        )

    def query_records(self, table: str, params: dict[str, Any]) -> list[Record]:
        return (
            self._request("GET", self._settings.table_api_url(table), params=params)
            or []
        )

    def create_record(self, table: str, payload: dict[str, Any]) -> Record:
        return self._request(
            "POST", self._settings.table_api_url(table), json=payload
        )

    def update_record(
        self, table: str, record_id: str, payload: dict[str, Any]
    ) -> Optional[Record]:
        return self._request(
            "PUT",
            self._settings.table_api_url(table, record_id),
            json=payload,
            not_found_ok=True,
        )

    def delete_record(self, table: str, record_id: str) -> None:
        self._request("DELETE", self._settings.table_api_url(table, record_id))

    def close(self) -> None:
        """Release the underlying HTTP client if this adapter created it."""
        if self._owns_client:
            self._client.close()

    def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        not_found_ok: bool = False,
    ) -> Any:
        """Send one request and return the unwrapped ``result`` value.

        Args:
            method: HTTP method.
            url: Absolute Table API URL.
            params: Query string parameters.
            json: JSON request body.
            not_found_ok: Return None instead of raising on HTTP 404.

        Returns:
            The ``result`` member of the response body, or None when the
            body is empty, has no envelope, or the record was not found.

        Raises:
            UpstreamRequestError: On transport errors, non-2xx statuses
                and undecodable bodies.
        """
        try:
            response = self._client.request(
                method,
                url,
                params=params,
                json=json,
                auth=self._auth,
                headers={"Accept": "application/json"},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise UpstreamRequestError(method, url, str(exc)) from exc

        logger.debug("%s %s -> %d", method, url, response.status_code)

        if not_found_ok and response.status_code == HTTP_404:
            return None

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamRequestError(
                method,
                url,
                f"upstream responded {response.reason_phrase}",
                status_code=response.status_code,
            ) from exc

        if not response.content:
            return None

        try:
            body = response.json()
        except ValueError as exc:
            raise UpstreamRequestError(
                method, url, "response body is not valid JSON"
            ) from exc

        if not isinstance(body, dict):
            return None
        return body.get("result")
