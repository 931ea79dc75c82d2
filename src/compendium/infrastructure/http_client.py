"""Async JSON HTTP client for the tracker backend."""

from collections.abc import Callable
from typing import Any

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger

from compendium.domain.exceptions import TransportError


class AsyncHTTPClient:
    """Thin wrapper over a curl_cffi session that speaks JSON."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        user_id_provider: Callable[[], str | int | None] | None = None,
    ):
        """
        Initialize client.

        Args:
            base_url: Backend API root, e.g. ``http://localhost:8080/api``
            timeout: Per-request timeout in seconds
            user_id_provider: Returns the session user forwarded as ``X-User-Id``
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_id_provider = user_id_provider
        self._session: AsyncSession | None = None

    def _get_session(self) -> AsyncSession:
        if self._session is None:
            self._session = AsyncSession(timeout=self.timeout)
        return self._session

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        user_id = self.user_id_provider() if self.user_id_provider else None
        if user_id is not None:
            headers["X-User-Id"] = str(user_id)
        return headers

    async def request_json(self, method: str, path: str, payload: Any = None) -> Any:
        """
        Send a request and decode the JSON response.

        Raises:
            TransportError: On network failure, non-2xx status or a body
                that is not JSON.
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            response = await self._get_session().request(
                method,
                url,
                headers=self._headers(),
                json=payload,
            )
        except CurlError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.error(f"{method} {url} returned HTTP {response.status_code}")
            raise TransportError(
                f"Backend returned HTTP {response.status_code} for {method} {url}",
                status_code=response.status_code,
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {url} returned a non-JSON body")
            raise TransportError(f"Backend returned invalid JSON for {method} {url}") from e

    async def close(self) -> None:
        """Close the underlying session."""
        if self._session is not None:
            await self._session.close()
            self._session = None
            logger.debug("HTTP session closed")
