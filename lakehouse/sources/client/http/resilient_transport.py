"""
Resilient HTTP transport.

Retries and rate limiting live at the transport layer so every operation of
the lakehouse client gets them without any per-call code.
"""

import asyncio
import logging
import random
from typing import Optional

import httpx  # type: ignore
from aiolimiter import AsyncLimiter  # type: ignore

from lakehouse.config.constants.http_status_code import HttpStatusCode

RETRYABLE_NETWORK_ERRORS = (
    httpx.TimeoutException,
    httpx.ConnectError,
    httpx.ReadError,
    httpx.RemoteProtocolError,
)


def _is_retryable_status(status_code: int) -> bool:
    return (
        status_code == HttpStatusCode.TOO_MANY_REQUESTS.value
        or HttpStatusCode.INTERNAL_SERVER_ERROR.value
        <= status_code
        <= HttpStatusCode.NETWORK_AUTHENTICATION_REQUIRED.value
    )


class ResilientHTTPTransport(httpx.AsyncHTTPTransport):
    """
    HTTP transport with optional rate limiting and retry logic.

    - The limiter (if any) is acquired once per logical request, not per attempt
    - 429, 5xx and network errors are retried up to ``max_retries`` times
    - ``Retry-After`` (in seconds) wins over the computed backoff
    - Backoff is exponential with full jitter, capped at ``max_delay``
    """

    def __init__(
        self,
        rate_limiter: Optional[AsyncLimiter] = None,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 32.0,
        logger: Optional[logging.Logger] = None,
        **kwargs
    ) -> None:
        if not isinstance(max_retries, int) or max_retries < 0:
            raise ValueError(f"max_retries must be a non-negative integer, got: {max_retries}")
        if not isinstance(base_delay, (int, float)) or base_delay < 0:
            raise ValueError(f"base_delay must be a non-negative number, got: {base_delay}")
        if not isinstance(max_delay, (int, float)) or max_delay < 0:
            raise ValueError(f"max_delay must be a non-negative number, got: {max_delay}")
        if max_delay < base_delay:
            raise ValueError(f"max_delay ({max_delay}) must be >= base_delay ({base_delay})")

        super().__init__(**kwargs)
        self.rate_limiter = rate_limiter
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.logger = logger or logging.getLogger(__name__)

    def _should_retry(self, response: httpx.Response, attempt: int) -> bool:
        """True if ``response`` has a retryable status and attempts remain."""
        return attempt < self.max_retries and _is_retryable_status(response.status_code)

    def _retry_after(self, response: Optional[httpx.Response]) -> Optional[float]:
        if response is None:
            return None
        value = response.headers.get("Retry-After")
        if not value:
            return None
        try:
            return max(0.0, float(value))
        except ValueError:
            # HTTP-date form
            return None

    def _calculate_delay(self, response: Optional[httpx.Response], attempt: int) -> float:
        """Seconds to wait before the next attempt.

        A ``Retry-After`` header wins over the computed backoff; both are
        capped at ``max_delay``.
        """
        retry_after = self._retry_after(response)
        if retry_after is not None:
            return min(self.max_delay, retry_after)
        ceiling = min(self.max_delay, self.base_delay * (2 ** attempt))
        return random.uniform(0, ceiling)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        last_exception: Optional[Exception] = None
        attempts = self.max_retries + 1

        if self.rate_limiter:
            await self.rate_limiter.acquire()

        for attempt in range(attempts):
            try:
                response = await super().handle_async_request(request)
            except RETRYABLE_NETWORK_ERRORS as e:
                last_exception = e
                if attempt >= self.max_retries:
                    break
                delay = self._calculate_delay(None, attempt)
                self.logger.warning(
                    f"⚠️ {request.method} {request.url.path}: {type(e).__name__} "
                    f"(attempt {attempt + 1}/{attempts}), retrying in {delay:.2f}s"
                )
                await asyncio.sleep(delay)
                continue

            if not self._should_retry(response, attempt):
                if attempt > 0 and _is_retryable_status(response.status_code):
                    self.logger.error(
                        f"❌ {request.method} {request.url.path} failed after {attempts} attempts "
                        f"with HTTP {response.status_code}"
                    )
                return response

            delay = self._calculate_delay(response, attempt)
            self.logger.warning(
                f"⚠️ {request.method} {request.url.path}: HTTP {response.status_code} "
                f"(attempt {attempt + 1}/{attempts}), retrying in {delay:.2f}s"
            )
            await response.aclose()
            await asyncio.sleep(delay)

        if last_exception is not None:
            self.logger.error(f"❌ {request.method} {request.url.path} failed after {attempts} attempts")
            raise last_exception

        raise RuntimeError("Request failed with no response or exception captured")
