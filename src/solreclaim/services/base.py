"""Base API client shared by the RPC, quote and partner clients.

Requests are made exactly once: failures are translated into
ExternalServiceError and left to the caller, which maps them to a
domain error. Retrying is up to the user (sending the address again).
"""

from typing import Any

import httpx
import structlog

from solreclaim.core.exceptions import ExternalServiceError

log = structlog.get_logger(__name__)


class BaseAPIClient:
    """Base API client with lazy httpx client and error translation.

    Attributes:
        base_url: Base URL for all requests.
        timeout: Request timeout in seconds.
        headers: Default headers for all requests.
        service_name: Label used in logs and error messages.

    Example:
        client = BaseAPIClient(
            base_url="https://api.example.com",
            headers={"Authorization": "Bearer token"}
        )
        response = await client.get("/endpoint")
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        service_name: str | None = None,
    ) -> None:
        """Initialize BaseAPIClient.

        Args:
            base_url: Base URL for all requests.
            timeout: Request timeout in seconds (default: 30).
            headers: Default headers for all requests.
            service_name: Label for logs, defaults to base_url.
        """
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self.service_name = service_name or base_url
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client (lazy initialization)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
            )
            log.debug("httpx_client_created", service=self.service_name)
        return self._client

    async def close(self) -> None:
        """Close the httpx client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            log.debug("httpx_client_closed", service=self.service_name)

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Make a single HTTP request.

        Args:
            method: HTTP method (GET, POST).
            path: Request path (appended to base_url).
            **kwargs: Additional arguments passed to httpx.request.

        Returns:
            httpx.Response with a 2xx status.

        Raises:
            ExternalServiceError: On non-2xx status, timeout or transport error.
        """
        client = await self._get_client()
        log.debug("request_started", service=self.service_name, method=method, path=path)

        try:
            response = await client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            log.warning(
                "request_status_error",
                service=self.service_name,
                method=method,
                path=path,
                status_code=status_code,
            )
            raise ExternalServiceError(
                service=self.service_name,
                message=f"HTTP {status_code}",
                status_code=status_code,
            ) from e
        except httpx.HTTPError as e:
            # TimeoutException is a subclass of HTTPError
            log.warning(
                "request_connection_error",
                service=self.service_name,
                method=method,
                path=path,
                error=str(e) or type(e).__name__,
            )
            raise ExternalServiceError(
                service=self.service_name,
                message=str(e) or type(e).__name__,
            ) from e

        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self._request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a POST request."""
        return await self._request("POST", path, **kwargs)
