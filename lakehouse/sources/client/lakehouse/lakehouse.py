"""Lakehouse client implementation.

This module provides the REST client for the lakehouse management API
(buckets, databases, engines, catalogs, schemas, tables, ingestion jobs),
authenticated with an already-issued bearer token.

Configuration is always explicit: build a ``LakehouseTokenConfig`` in code, or
load one from environment variables / a dotenv file with
``load_config_from_environment``.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional, Union

from aiolimiter import AsyncLimiter  # type: ignore
from dotenv import dotenv_values  # type: ignore
from pydantic import BaseModel, Field, ValidationError, field_validator  # type: ignore

from lakehouse.config.constants.service import (
    DEFAULT_SERVICE_NAME,
    DEFAULT_SERVICE_URL,
    USER_AGENT,
    EnvironmentKeys,
)
from lakehouse.sources.client.http.http_client import HTTPClient
from lakehouse.sources.client.iclient import IClient

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


class LakehouseResponse(BaseModel):
    """Standardized response wrapper for lakehouse operations.

    ``data`` is the decoded JSON result; ``status`` and ``headers`` are the
    HTTP envelope. ``status`` is ``None`` when the request never reached the
    service.
    """

    success: bool
    status: Optional[int] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    data: Optional[Any] = None
    error: Optional[str] = None
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    def to_json(self) -> str:
        return self.model_dump_json()


class LakehouseRESTClientViaToken(HTTPClient):
    """Lakehouse REST client via bearer token.

    Args:
        service_url: Base URL of the lakehouse API (e.g. https://host/lakehouse/api/v2)
        token: Bearer token
        auth_instance_id: Default instance ID sent as ``AuthInstanceId`` header
        timeout: Request timeout in seconds
        max_retries: Transport-level retries for 429/5xx/network errors
        base_delay: Initial backoff delay in seconds
        max_delay: Backoff delay cap in seconds
        requests_per_second: Optional client-side rate limit
        disable_ssl: Skip TLS certificate verification
    """

    def __init__(
        self,
        service_url: str,
        token: str,
        auth_instance_id: Optional[str] = None,
        timeout: float = 30.0,
        max_retries: int = 0,
        base_delay: float = 1.0,
        max_delay: float = 32.0,
        requests_per_second: Optional[float] = None,
        disable_ssl: bool = False,
        **kwargs: Any,
    ) -> None:
        rate_limiter = AsyncLimiter(requests_per_second, 1) if requests_per_second else None
        super().__init__(
            token=token,
            token_type="Bearer",
            timeout=timeout,
            verify=not disable_ssl,
            rate_limiter=rate_limiter,
            max_retries=max_retries,
            base_delay=base_delay,
            max_delay=max_delay,
            **kwargs,
        )
        self.headers["User-Agent"] = USER_AGENT
        self.service_url = service_url.rstrip("/")
        self.auth_instance_id = auth_instance_id
        logger.debug(f"🔧 LakehouseRESTClientViaToken initialized with base_url: '{self.service_url}'")

    def get_base_url(self) -> str:
        """Get the base URL for the lakehouse API."""
        return self.service_url

    def get_auth_instance_id(self) -> Optional[str]:
        """Get the default instance ID, if one was configured."""
        return self.auth_instance_id


class LakehouseTokenConfig(BaseModel):
    """Configuration for the lakehouse client via bearer token.

    Args:
        service_url: Base URL of the lakehouse API
        bearer_token: Bearer token
        auth_instance_id: Default instance ID for operations that accept one
        timeout: Request timeout in seconds
        max_retries: Transport-level retry attempts (0 disables retries)
        base_delay: Initial backoff delay in seconds
        max_delay: Backoff delay cap in seconds
        requests_per_second: Optional client-side rate limit
        disable_ssl: Skip TLS certificate verification
    """

    service_url: str = Field(default=DEFAULT_SERVICE_URL, description="Base URL of the lakehouse API")
    bearer_token: str = Field(..., description="Bearer token", min_length=1)
    auth_instance_id: Optional[str] = Field(default=None, description="Default instance ID")
    timeout: float = Field(default=30.0, description="Request timeout in seconds", gt=0)
    max_retries: int = Field(default=0, description="Transport retry attempts", ge=0)
    base_delay: float = Field(default=1.0, description="Initial backoff delay in seconds", ge=0)
    max_delay: float = Field(default=32.0, description="Backoff delay cap in seconds", ge=0)
    requests_per_second: Optional[float] = Field(default=None, description="Client-side rate limit", gt=0)
    disable_ssl: bool = Field(default=False, description="Skip TLS certificate verification")

    @field_validator("service_url")
    @classmethod
    def validate_service_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("service_url must start with http:// or https://")
        return v.rstrip("/")

    def create_client(self) -> LakehouseRESTClientViaToken:
        """Create a lakehouse REST client from this configuration."""
        return LakehouseRESTClientViaToken(
            service_url=self.service_url,
            token=self.bearer_token,
            auth_instance_id=self.auth_instance_id,
            timeout=self.timeout,
            max_retries=self.max_retries,
            base_delay=self.base_delay,
            max_delay=self.max_delay,
            requests_per_second=self.requests_per_second,
            disable_ssl=self.disable_ssl,
        )


def load_config_from_environment(
    service_name: str = DEFAULT_SERVICE_NAME,
    env_file: Optional[Union[str, os.PathLike]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> LakehouseTokenConfig:
    """Build a ``LakehouseTokenConfig`` from ``<SERVICE_NAME>_*`` variables.

    Values from ``env_file`` (dotenv format) are read first and overridden by
    ``environ`` (``os.environ`` by default). Nothing is written back to the
    process environment.

    Raises:
        ValueError: If the bearer token is missing or a value is invalid
    """
    values: Dict[str, Optional[str]] = {}
    if env_file is not None:
        values.update(dotenv_values(env_file))
    values.update(os.environ if environ is None else environ)

    def _get(key: EnvironmentKeys) -> Optional[str]:
        value = values.get(key.for_service(service_name))
        return value.strip() if isinstance(value, str) and value.strip() else None

    token = _get(EnvironmentKeys.BEARER_TOKEN)
    if token is None:
        raise ValueError(
            f"{EnvironmentKeys.BEARER_TOKEN.for_service(service_name)} is required to configure {service_name}"
        )

    config_dict: Dict[str, Any] = {"bearer_token": token}
    url = _get(EnvironmentKeys.URL)
    if url is not None:
        config_dict["service_url"] = url
    instance_id = _get(EnvironmentKeys.AUTH_INSTANCE_ID)
    if instance_id is not None:
        config_dict["auth_instance_id"] = instance_id
    timeout = _get(EnvironmentKeys.TIMEOUT)
    if timeout is not None:
        config_dict["timeout"] = timeout
    max_retries = _get(EnvironmentKeys.MAX_RETRIES)
    if max_retries is not None:
        config_dict["max_retries"] = max_retries
    disable_ssl = _get(EnvironmentKeys.DISABLE_SSL)
    if disable_ssl is not None:
        config_dict["disable_ssl"] = disable_ssl.lower() in _TRUE_VALUES

    try:
        return LakehouseTokenConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ValueError(f"Invalid {service_name} configuration: {e}") from e


class LakehouseClient(IClient):
    """Builder class for lakehouse clients.

    Example usage:
        config = LakehouseTokenConfig(
            service_url="https://lakehouse.example.com/lakehouse/api/v2",
            bearer_token="your_token",
        )
        client = LakehouseClient.build_with_config(config)
        rest_client = client.get_client()
    """

    def __init__(self, client: LakehouseRESTClientViaToken) -> None:
        self._client = client

    def get_client(self) -> LakehouseRESTClientViaToken:
        """Return the lakehouse REST client object."""
        return self._client

    def get_base_url(self) -> str:
        return self._client.get_base_url()

    @classmethod
    def build_with_config(cls, config: LakehouseTokenConfig) -> "LakehouseClient":
        """Build LakehouseClient with configuration.

        Args:
            config: LakehouseTokenConfig instance

        Returns:
            LakehouseClient instance
        """
        return cls(client=config.create_client())

    @classmethod
    def build_from_environment(
        cls,
        service_name: str = DEFAULT_SERVICE_NAME,
        env_file: Optional[Union[str, os.PathLike]] = None,
    ) -> "LakehouseClient":
        """Build LakehouseClient from ``<SERVICE_NAME>_*`` environment variables.

        Raises:
            ValueError: If configuration is missing or invalid
        """
        config = load_config_from_environment(service_name=service_name, env_file=env_file)
        logger.info(f"🔧 Building {service_name} client for {config.service_url}")
        return cls.build_with_config(config)

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> "LakehouseClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
