"""
Pagination over server-side paged lakehouse collections.

A ``Pager`` wraps one listing operation and walks its pages with the
continuation cursor returned by the service::

    pager = data_source.pager("list_ingestion_jobs", jobs_per_page=50)
    while pager.has_next():
        jobs = await pager.get_next()

    # or, from wherever the pager currently is
    remaining = await pager.get_all()

A pager is single pass and must not be shared between concurrent tasks.
"""

import logging
from enum import Enum
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, List, Mapping, Optional
from urllib.parse import parse_qs, urlparse

import httpx  # type: ignore
from pydantic import BaseModel, ConfigDict, Field, ValidationError  # type: ignore

from lakehouse.config.constants.http_status_code import HttpStatusCode
from lakehouse.exceptions.lakehouse_exceptions import ExhaustedError, RequestError
from lakehouse.sources.client.lakehouse.lakehouse import LakehouseResponse
from lakehouse.sources.external.lakehouse.params import validate_list_params
from lakehouse.sources.external.lakehouse.request_builder import pagination_of

logger = logging.getLogger(__name__)

ListingOperation = Callable[[Dict[str, Any]], Awaitable[LakehouseResponse]]


def _normalize_cursor(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    cursor = str(value).strip()
    return cursor or None


def extract_cursor(next_field: Any, cursor_param: str) -> Optional[str]:
    """Read the continuation cursor from a ``next`` descriptor.

    The descriptor is either the token itself (string or number), or an
    object carrying it under ``cursor_param`` (e.g. ``{"start": "2"}``) or in
    the query string of its ``href``. Absent and blank values mean there is no
    next page.
    """
    if isinstance(next_field, Mapping):
        if next_field.get(cursor_param) is not None:
            return _normalize_cursor(next_field.get(cursor_param))
        href = next_field.get("href")
        if not href:
            return None
        values = parse_qs(urlparse(str(href)).query).get(cursor_param)
        return _normalize_cursor(values[0]) if values else None
    return _normalize_cursor(next_field)


class PagerState(Enum):
    FRESH = "fresh"
    HAS_MORE = "has_more"
    EXHAUSTED = "exhausted"


class PageRequest(BaseModel):
    """Parameters of one page request.

    ``base_params`` (filters, page size) never change over the life of a
    pager; only the cursor is replaced, by building a new request.
    """

    model_config = ConfigDict(frozen=True)

    base_params: Dict[str, Any] = Field(default_factory=dict)
    cursor_param: str = "start"
    cursor: Optional[str] = None

    def with_cursor(self, cursor: Optional[str]) -> "PageRequest":
        return self.model_copy(update={"cursor": cursor})

    def as_params(self) -> Dict[str, Any]:
        params = dict(self.base_params)
        if self.cursor is not None:
            params[self.cursor_param] = self.cursor
        return params


class PageResponse(BaseModel):
    """One page of a listing result."""

    items: List[Any] = Field(default_factory=list)
    next: Optional[str] = None
    total_count: Optional[int] = None
    limit: Optional[int] = None

    @classmethod
    def from_result(cls, result: Any, items_field: str, cursor_param: str = "start") -> "PageResponse":
        """Build a page from the decoded JSON result of a listing call.

        Raises:
            ValueError: If the items field is not an array, or ``total_count``
                or ``limit`` is not an integer
        """
        if not isinstance(result, Mapping):
            result = {}
        items = result.get(items_field)
        if items is None:
            logger.debug(f"📄 Result has no '{items_field}' field, treating page as empty")
            items = []
        if not isinstance(items, list):
            raise ValueError(f"'{items_field}' must be an array, got {type(items).__name__}")
        return cls(
            items=items,
            next=extract_cursor(result.get("next"), cursor_param),
            total_count=result.get("total_count"),
            limit=result.get("limit"),
        )


class Pager:
    """Iterates the pages of one listing operation.

    Args:
        list_operation: Coroutine function taking the request parameters and
            returning a ``LakehouseResponse``
        items_field: Name of the items array in the result
        base_params: Filters and page size sent with every page request
        cursor_param: Name of the continuation parameter (default ``start``)
        operation_name: Used in logs and errors only
    """

    def __init__(
        self,
        list_operation: ListingOperation,
        items_field: str,
        base_params: Optional[Dict[str, Any]] = None,
        cursor_param: str = "start",
        operation_name: Optional[str] = None,
    ) -> None:
        self._list_operation = list_operation
        self._items_field = items_field
        self._operation_name = operation_name or items_field
        self._request = PageRequest(base_params=dict(base_params or {}), cursor_param=cursor_param)
        self._has_queried = False
        self._cursor: Optional[str] = None
        self.last_page: Optional[PageResponse] = None

    @property
    def state(self) -> PagerState:
        if not self._has_queried:
            return PagerState.FRESH
        if self._cursor is not None:
            return PagerState.HAS_MORE
        return PagerState.EXHAUSTED

    @property
    def request(self) -> PageRequest:
        return self._request

    def has_next(self) -> bool:
        """True until a response arrives without a continuation cursor."""
        return self.state is not PagerState.EXHAUSTED

    async def _fetch(self, params: Dict[str, Any]) -> LakehouseResponse:
        try:
            response = await self._list_operation(params)
        except httpx.HTTPError as e:
            raise RequestError(
                f"{self._operation_name} failed: {e}",
                operation=self._operation_name,
            ) from e

        status = response.status
        if not response.success or status is None or status >= HttpStatusCode.BAD_REQUEST.value:
            raise RequestError(
                response.error or response.message or f"{self._operation_name} failed",
                status_code=status,
                body=response.data,
                operation=self._operation_name,
            )
        return response

    async def get_next(self) -> List[Any]:
        """Fetch the next page and return its items.

        Raises:
            ExhaustedError: If there are no more pages; nothing is sent
            RequestError: If the call fails, the result is not a well formed
                page, or the service returns the cursor it was sent; the pager
                is left unchanged so the same page can be requested again
        """
        if not self.has_next():
            raise ExhaustedError(f"No more results available for {self._operation_name}")

        params = self._request.as_params()
        logger.debug(f"📄 Fetching {self._operation_name} page (cursor={self._request.cursor!r})")
        response = await self._fetch(params)
        try:
            page = PageResponse.from_result(response.data, self._items_field, self._request.cursor_param)
        except (ValidationError, ValueError) as e:
            raise RequestError(
                f"{self._operation_name} returned a malformed page: {e}",
                status_code=response.status,
                body=response.data,
                operation=self._operation_name,
            ) from e
        if page.next is not None and page.next == self._request.cursor:
            raise RequestError(
                f"{self._operation_name} returned the cursor it was sent ({page.next!r})",
                status_code=response.status,
                body=response.data,
                operation=self._operation_name,
                details={"cursor": page.next},
            )

        self._has_queried = True
        self._cursor = page.next
        self._request = self._request.with_cursor(page.next)
        self.last_page = page
        logger.debug(
            f"📄 {self._operation_name}: {len(page.items)} items, "
            f"next cursor={page.next!r}"
        )
        return page.items

    async def get_all(self) -> List[Any]:
        """Fetch every remaining page and return their items in order.

        Starts from the current position. If a call fails the error is raised,
        the items gathered by this call are dropped, and the pager stays at
        the failed page.
        """
        results: List[Any] = []
        while self.has_next():
            results.extend(await self.get_next())
        return results

    async def pages(self) -> AsyncIterator[List[Any]]:
        """Yield the items of each remaining page."""
        while self.has_next():
            yield await self.get_next()

    def __repr__(self) -> str:
        return f"Pager(operation={self._operation_name!r}, state={self.state.name})"


class IngestionJobsPager(Pager):
    """Pager over ``list_ingestion_jobs``.

    Args:
        data_source: ``LakehouseDataSource`` used to run the listing call
        auth_instance_id: Instance ID, defaults to the client's
        jobs_per_page: Number of jobs requested per page
    """

    OPERATION = "list_ingestion_jobs"

    def __init__(
        self,
        data_source: Any,
        auth_instance_id: Optional[str] = None,
        jobs_per_page: Optional[int] = None,
    ) -> None:
        base_params = validate_list_params(
            self.OPERATION,
            {"auth_instance_id": auth_instance_id, "jobs_per_page": jobs_per_page},
        )
        pagination = pagination_of(self.OPERATION)
        super().__init__(
            list_operation=data_source.listing_operation(self.OPERATION),
            items_field=pagination["items"],
            base_params=base_params,
            cursor_param=pagination["cursor"],
            operation_name=self.OPERATION,
        )
