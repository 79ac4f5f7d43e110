import logging
from typing import Dict, Optional

import httpx  # type: ignore
from aiolimiter import AsyncLimiter  # type: ignore

from lakehouse.sources.client.http.http_request import HTTPRequest
from lakehouse.sources.client.http.http_response import HTTPResponse
from lakehouse.sources.client.http.resilient_transport import ResilientHTTPTransport
from lakehouse.sources.client.iclient import IClient

DEFAULT_REQUESTS_PER_SECOND = 50


class HTTPClient(IClient):
    """
    Async HTTP client with bearer authentication and optional resilience.

    Features:
    - Automatic Authorization header injection
    - Optional retry logic with exponential backoff (429, 5xx, network errors)
    - Automatic rate limiting when retries are enabled

    When ``max_retries > 0`` and no ``rate_limiter`` is given, a limiter of
    ``DEFAULT_REQUESTS_PER_SECOND`` is created so retries cannot storm the service.

    Args:
        token: Authentication token
        token_type: Token type for Authorization header (default: "Bearer")
        timeout: Request timeout in seconds (default: 30.0)
        follow_redirects: Whether to follow HTTP redirects (default: True)
        verify: Verify TLS certificates (default: True)
        rate_limiter: Optional AsyncLimiter
        max_retries: Number of retry attempts (default: 0 = disabled)
        base_delay: Initial delay for exponential backoff in seconds (default: 1.0)
        max_delay: Maximum delay cap in seconds (default: 32.0)
        transport: Explicit httpx transport, bypasses the resilient transport
        logger: Optional logger instance
    """
    def __init__(
        self,
        token: str,
        token_type: str = "Bearer",
        timeout: float = 30.0,
        follow_redirects: bool = True,
        verify: bool = True,
        rate_limiter: Optional[AsyncLimiter] = None,
        max_retries: int = 0,
        base_delay: float = 1.0,
        max_delay: float = 32.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        self.headers: Dict[str, str] = {
            "Authorization": f"{token_type} {token}",
        }
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.verify = verify
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        if rate_limiter is None and max_retries > 0:
            rate_limiter = AsyncLimiter(DEFAULT_REQUESTS_PER_SECOND, 1)
        self.rate_limiter = rate_limiter
        self.client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> "HTTPClient":
        """Get the client"""
        return self

    def _build_transport(self) -> Optional[httpx.AsyncBaseTransport]:
        if self.transport is not None:
            return self.transport
        if self.rate_limiter is not None or self.max_retries > 0:
            return ResilientHTTPTransport(
                rate_limiter=self.rate_limiter,
                max_retries=self.max_retries,
                base_delay=self.base_delay,
                max_delay=self.max_delay,
                logger=self.logger,
                verify=self.verify,
            )
        return None

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Create the underlying httpx client on first use."""
        if self.client is None:
            transport = self._build_transport()
            if transport is not None:
                self.client = httpx.AsyncClient(
                    transport=transport,
                    timeout=self.timeout,
                    follow_redirects=self.follow_redirects,
                )
            else:
                self.client = httpx.AsyncClient(
                    timeout=self.timeout,
                    follow_redirects=self.follow_redirects,
                    verify=self.verify,
                )
        return self.client

    async def execute(self, request: HTTPRequest, **kwargs) -> HTTPResponse:
        """Execute an HTTP request
        Args:
            request: The HTTP request to execute
            kwargs: Additional keyword arguments passed to ``httpx.AsyncClient.request``
        Returns:
            A HTTPResponse object containing the response from the server
        Raises:
            httpx.HTTPError: on transport failures once retries are exhausted
        """
        url = request.resolved_url()
        client = await self._ensure_client()

        # request headers take precedence over client headers
        merged_headers = {**self.headers, **request.headers}
        request_kwargs = {
            "params": request.query_params,
            "headers": merged_headers,
            **kwargs
        }

        if request.files or request.form_data:
            request_kwargs["data"] = request.form_data
            request_kwargs["files"] = request.files
        elif isinstance(request.body, (dict, list)):
            content_type = merged_headers.get("Content-Type", "").lower()
            if isinstance(request.body, dict) and "application/x-www-form-urlencoded" in content_type:
                request_kwargs["data"] = request.body
            else:
                request_kwargs["json"] = request.body
        elif isinstance(request.body, bytes):
            request_kwargs["content"] = request.body

        self.logger.debug(f"➡️ {request.method} {url} params={request.query_params}")
        response = await client.request(request.method, url, **request_kwargs)
        self.logger.debug(f"⬅️ {request.method} {url} -> {response.status_code}")
        return HTTPResponse(response)

    async def close(self) -> None:
        """Close the client"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "HTTPClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
