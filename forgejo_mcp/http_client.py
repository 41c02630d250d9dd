"""Shared HTTP client for Forgejo API requests.

Provides a thin async wrapper around httpx that adds the Forgejo auth header,
the base URL and the API version prefix, and turns non-2xx responses into
ForgejoAPIError.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

import httpx

from .config import ForgejoConfig
from .errors import ForgejoAPIError

Method = Literal["GET", "POST", "DELETE", "PUT", "PATCH"]

API_PREFIX = "/api/v1"


@dataclass
class APIClient:
    """Reusable async HTTP client with Forgejo token auth.

    Usage:
        client = APIClient(base_url="https://codeberg.org", token=token)
        repos = await client.request("GET", "/user/repos")

        # Or with context manager for proper cleanup
        async with forgejo_client(config) as client:
            repo = await client.request("GET", "/repos/owner/name")
    """

    base_url: str = ""
    token: str = field(default="", repr=False)
    api_prefix: str = API_PREFIX
    # None disables the client-side deadline
    timeout: float | None = None
    follow_redirects: bool = True
    extra_headers: dict[str, str] = field(default_factory=dict)
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)

    # Internal client (created lazily)
    _client: httpx.AsyncClient | None = field(default=None, repr=False)

    def _build_headers(self) -> dict[str, str]:
        """Build request headers including auth."""
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"token {self.token}",
        }
        headers.update(self.extra_headers)
        return headers

    def _build_url(self, endpoint: str) -> str:
        """Build full URL from base, API prefix and endpoint."""
        base = self.base_url.rstrip("/")
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{base}{self.api_prefix}{endpoint}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=self.follow_redirects,
                transport=self.transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "APIClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    def _handle_response(self, response: httpx.Response) -> Any:
        """Return the decoded body, or raise ForgejoAPIError for non-2xx."""
        if not response.is_success:
            raise ForgejoAPIError(response.status_code, response.reason_phrase)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError:
            return response.text

    async def request(
        self,
        method: Method,
        endpoint: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make an HTTP request.

        Args:
            method: HTTP method (GET, POST, ...)
            endpoint: API path below /api/v1, query string included
            json: JSON body for POST/PUT/PATCH
            headers: Additional headers (override the defaults)

        Returns:
            Parsed JSON body, any shape

        Raises:
            ForgejoAPIError: on a non-2xx status
            httpx.RequestError: on network failures (not retried)
        """
        url = self._build_url(endpoint)
        request_headers = self._build_headers()
        if headers:
            request_headers.update(headers)

        client = await self._get_client()
        response = await client.request(
            method,
            url,
            headers=request_headers,
            json=json,
        )
        return self._handle_response(response)


def forgejo_client(config: ForgejoConfig, transport: httpx.AsyncBaseTransport | None = None) -> APIClient:
    """Create an API client configured from a ForgejoConfig.

    Args:
        config: Resolved server configuration
        transport: Optional httpx transport (tests use httpx.MockTransport)
    """
    return APIClient(
        base_url=config.base_url,
        token=config.token,
        timeout=config.timeout,
        transport=transport,
    )
