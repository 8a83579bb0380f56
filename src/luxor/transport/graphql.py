"""GraphQL-over-HTTP transport via httpx async.

POSTs ``{"query", "variables"}`` to the configured endpoint and returns the
``data`` member of the response. Every failure mode surfaces as
TransportError; nothing is retried.
"""

from collections.abc import Mapping
from typing import Any

import httpx

from luxor.config import LuxorSettings
from luxor.exceptions import TransportError
from luxor.logging import get_logger
from luxor.transport.client import Transport

logger = get_logger(__name__)

#: Max characters of a failing response body carried into error messages.
_BODY_SNIPPET = 500


class GraphQLTransport(Transport):
    """Concrete transport for the Luxor GraphQL endpoint.

    Opens a short-lived ``httpx.AsyncClient`` per call so concurrent queries
    never share connection state.

    Args:
        endpoint: GraphQL endpoint URL.
        timeout_seconds: Per-request timeout.
        http_transport: Optional httpx transport (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        endpoint: str,
        timeout_seconds: float = 30.0,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        endpoint = (endpoint or "").strip()
        if not endpoint:
            raise TransportError("GraphQL endpoint is empty.")
        self._endpoint = endpoint
        self._timeout = timeout_seconds
        self._http_transport = http_transport

    @classmethod
    def from_settings(cls, settings: LuxorSettings) -> "GraphQLTransport":
        return cls(settings.endpoint, timeout_seconds=settings.timeout_seconds)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def execute(
        self,
        query: str,
        variables: Mapping[str, Any],
        headers: Mapping[str, str],
    ) -> dict[str, Any]:
        """POST the query and return the ``data`` tree."""
        payload = {"query": query, "variables": dict(variables)}

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._http_transport
            ) as client:
                resp = await client.post(
                    self._endpoint, json=payload, headers=dict(headers)
                )
        except httpx.HTTPError as e:
            logger.warning("luxor_request_failed", error=str(e))
            raise TransportError(f"Request to {self._endpoint} failed: {e}") from e

        if not resp.is_success:
            snippet = resp.text[:_BODY_SNIPPET]
            logger.warning("luxor_http_error", status=resp.status_code)
            raise TransportError(
                f"Luxor API request failed: {resp.status_code} {snippet}"
            )

        try:
            body = resp.json()
        except ValueError as e:
            raise TransportError("Luxor API returned a non-JSON body.") from e

        if not isinstance(body, dict):
            raise TransportError("Luxor API returned a non-object body.")

        errors = body.get("errors")
        if errors:
            messages = [
                err.get("message", str(err)) if isinstance(err, dict) else str(err)
                for err in errors
            ]
            logger.warning("luxor_graphql_errors", errors=messages)
            raise TransportError(f"GraphQL errors: {'; '.join(messages)}")

        data = body.get("data")
        if not isinstance(data, dict):
            raise TransportError("Luxor API response has no data object.")
        return data
