"""Shared async HTTP client for the external data sources the concierge reads."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ToolError(Exception):
    """An external data source failed."""

    def __init__(self, message: str, tool_name: str, details: dict | None = None):
        self.message = message
        self.tool_name = tool_name
        self.details = details or {}
        super().__init__(self.message)


class APIClientError(ToolError):
    """Request to an external API failed or returned an unusable body."""


class AuthenticationError(ToolError):
    """API key rejected."""


class BaseAsyncAPIClient(ABC):
    """
    Async JSON API client.

    Use as an async context manager; the underlying ``httpx.AsyncClient``
    lives only for the duration of the ``async with`` block. Server errors
    and transport errors are retried up to ``max_retries`` attempts, client
    errors fail immediately.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        max_retries: int = 2,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "BaseAsyncAPIClient":
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=await self._get_headers(),
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @abstractmethod
    async def _get_headers(self) -> dict[str, str]:
        """Headers sent with every request."""

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: dict | None = None,
        **kwargs: Any,
    ) -> dict:
        if not self._client:
            raise APIClientError(
                "Client not initialized. Use async context manager.",
                tool_name=self.__class__.__name__,
            )

        url = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        last_error: ToolError | None = None

        for attempt in range(self.max_retries):
            try:
                response = await self._client.request(
                    method=method,
                    url=url,
                    params=params,
                    **kwargs,
                )

                if response.status_code in (401, 403):
                    raise AuthenticationError(
                        "Authentication failed",
                        tool_name=self.__class__.__name__,
                        details={"status_code": response.status_code},
                    )

                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                last_error = APIClientError(
                    f"HTTP error: {e.response.status_code}",
                    tool_name=self.__class__.__name__,
                    details={"status_code": e.response.status_code},
                )
                if e.response.status_code < 500:
                    raise last_error from e
                logger.warning(f"Attempt {attempt + 1}/{self.max_retries} failed: {e}")

            except httpx.RequestError as e:
                last_error = APIClientError(
                    f"Request error: {e}",
                    tool_name=self.__class__.__name__,
                )
                logger.warning(f"Attempt {attempt + 1}/{self.max_retries} failed: {e}")

            except ValueError as e:
                raise APIClientError(
                    "Response body is not valid JSON",
                    tool_name=self.__class__.__name__,
                ) from e

        raise last_error or APIClientError(
            "Max retries exceeded",
            tool_name=self.__class__.__name__,
        )

    async def get(self, endpoint: str, params: dict | None = None, **kwargs: Any) -> dict:
        """Make an async GET request."""
        return await self._request("GET", endpoint, params=params, **kwargs)
