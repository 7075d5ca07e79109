"""Base for the httpx adapters that call sibling services.

Transport failures and unreadable response bodies are caught here,
logged, and reported as ``None`` so each port can map them to its own
"not created" / "not found" outcome.
The remaining deadline bounds every request and is forwarded downstream.
"""

import httpx
import structlog

from shared.deadline import Deadline, DeadlineExceeded, timeout_for

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


class ServiceClient:
    """Thin JSON-over-HTTP client bound to one sibling service."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.Client(base_url=self.base_url)

    def _request(
        self,
        method: str,
        path: str,
        deadline: Deadline | None = None,
        json: dict | None = None,
    ) -> httpx.Response | None:
        try:
            timeout = timeout_for(deadline, self.timeout)
        except DeadlineExceeded:
            logger.warning("Deadline expired before call", method=method, path=path)
            return None

        headers = deadline.as_header() if deadline is not None else {}
        try:
            response = self._client.request(method, path, json=json, headers=headers, timeout=timeout)
        except httpx.HTTPError as exc:
            logger.error("Downstream call failed", method=method, path=path, error=str(exc))
            return None

        if response.status_code == 404:
            return response
        if response.is_error:
            logger.error(
                "Downstream call returned an error",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            return None
        return response

    def _json(self, response: httpx.Response, path: str) -> dict | None:
        """Decode a JSON object body, or None when the body is not one."""
        try:
            data = response.json()
        except ValueError as exc:
            logger.error(
                "Downstream response is not JSON",
                path=path,
                status_code=response.status_code,
                error=str(exc),
            )
            return None
        if not isinstance(data, dict):
            logger.error("Downstream response is not a JSON object", path=path, status_code=response.status_code)
            return None
        return data

    def close(self) -> None:
        self._client.close()
