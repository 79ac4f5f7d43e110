from lakehouse.sources.external.lakehouse.lakehouse_ import LakehouseDataSource
from lakehouse.sources.external.lakehouse.operations import API_VERSIONS, LAKEHOUSE_API_ENDPOINTS
from lakehouse.sources.external.lakehouse.operations_v1 import LAKEHOUSE_V1_API_ENDPOINTS
from lakehouse.sources.external.lakehouse.pager import (
    IngestionJobsPager,
    PageRequest,
    PageResponse,
    Pager,
    PagerState,
)
from lakehouse.sources.external.lakehouse.params import ListIngestionJobsParams

__all__ = [
    "API_VERSIONS",
    "IngestionJobsPager",
    "LAKEHOUSE_API_ENDPOINTS",
    "LAKEHOUSE_V1_API_ENDPOINTS",
    "LakehouseDataSource",
    "ListIngestionJobsParams",
    "PageRequest",
    "PageResponse",
    "Pager",
    "PagerState",
]
