"""Async client for the lakehouse management REST API."""

from lakehouse.config.constants.service import SDK_VERSION
from lakehouse.exceptions.lakehouse_exceptions import (
    ExhaustedError,
    LakehouseError,
    ParameterValidationError,
    RequestError,
    UnknownOperationError,
)
from lakehouse.sources.client.lakehouse.lakehouse import (
    LakehouseClient,
    LakehouseResponse,
    LakehouseTokenConfig,
    load_config_from_environment,
)
from lakehouse.sources.external.lakehouse import (
    IngestionJobsPager,
    LakehouseDataSource,
    Pager,
    PagerState,
)

__version__ = SDK_VERSION

__all__ = [
    "ExhaustedError",
    "IngestionJobsPager",
    "LakehouseClient",
    "LakehouseDataSource",
    "LakehouseError",
    "LakehouseResponse",
    "LakehouseTokenConfig",
    "Pager",
    "PagerState",
    "ParameterValidationError",
    "RequestError",
    "UnknownOperationError",
    "load_config_from_environment",
]
