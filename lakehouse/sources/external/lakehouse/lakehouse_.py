"""
Lakehouse REST API DataSource

Every operation of the endpoint table for the service's API version is
available by name::

    data_source = LakehouseDataSource(client)
    response = await data_source.list_catalogs(auth_instance_id="crn:...")
    response = await data_source.execute("get_table", catalog_id="c", schema_id="s",
                                         table_id="t", engine_id="e")

All operations return LakehouseResponse objects. Paged listings are walked
with ``data_source.pager(...)``. The API version (``v1`` or ``v2``) is taken
from the last segment of the service URL unless given explicitly::

    data_source = LakehouseDataSource(client, api_version="v1")
    response = await data_source.list_data_policies(lh_instance_id="...")
"""

import logging
from functools import partial
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx  # type: ignore

from lakehouse.config.constants.http_status_code import HttpStatusCode
from lakehouse.config.constants.service import AUTH_INSTANCE_ID_PARAM
from lakehouse.exceptions.lakehouse_exceptions import ParameterValidationError
from lakehouse.sources.client.lakehouse.lakehouse import LakehouseClient, LakehouseResponse
from lakehouse.sources.external.lakehouse.operations import (
    api_version_of,
    endpoints_for,
    list_operations,
)
from lakehouse.sources.external.lakehouse.pager import Pager
from lakehouse.sources.external.lakehouse.params import validate_list_params
from lakehouse.sources.external.lakehouse.request_builder import (
    build_request,
    get_operation,
    validate_params,
)

logger = logging.getLogger(__name__)


class LakehouseDataSource:
    """Lakehouse REST API DataSource
    Provides async access to the lakehouse management operations:
    - Bucket and database registrations
    - Db2, Netezza, Presto, Spark and other engines
    - Catalogs, schemas, tables, columns and snapshots
    - Ingestion jobs
    - v1 access control, saved queries and CSV uploads
    """

    def __init__(self, client: LakehouseClient, api_version: Optional[str] = None) -> None:
        """Initialize with LakehouseClient.
        Args:
            client: LakehouseClient instance with configured authentication
            api_version: ``v1`` or ``v2``; inferred from the base URL when omitted
        """
        self._client = client
        self.http = client.get_client()
        if self.http is None:
            raise ValueError('HTTP client is not initialized')
        try:
            self.base_url = self.http.get_base_url().rstrip('/')
        except AttributeError as exc:
            raise ValueError('HTTP client does not have get_base_url method') from exc
        self._api_version = api_version or api_version_of(self.base_url)
        self._endpoints = endpoints_for(self._api_version)
        logger.info(
            f"🔧 [LakehouseDataSource] Initialized with base_url: '{self.base_url}' (API {self._api_version})"
        )

    def get_data_source(self) -> 'LakehouseDataSource':
        """Return the data source instance."""
        return self

    def get_client(self) -> LakehouseClient:
        """Return the underlying LakehouseClient."""
        return self._client

    @property
    def api_version(self) -> str:
        return self._api_version

    def operations(self) -> List[str]:
        """Names of all operations of this data source's API version."""
        return list_operations(self._api_version)

    def _apply_defaults(self, endpoint: Dict[str, Any], params: Dict[str, Any]) -> Dict[str, Any]:
        default_instance_id = self.http.get_auth_instance_id()
        if (
            default_instance_id
            and AUTH_INSTANCE_ID_PARAM in endpoint["parameters"]
            and params.get(AUTH_INSTANCE_ID_PARAM) is None
        ):
            return {**params, AUTH_INSTANCE_ID_PARAM: default_instance_id}
        return params

    async def execute(
        self,
        operation_name: str,
        headers: Optional[Dict[str, str]] = None,
        **params: Any,
    ) -> LakehouseResponse:
        """Run one operation.

        Args:
            operation_name: Key of the endpoint table of ``api_version``
            headers: Extra request headers
            **params: Operation parameters

        Returns:
            LakehouseResponse with the decoded result in ``data``

        Raises:
            UnknownOperationError: If the operation does not exist
            ParameterValidationError: If parameters are unknown or missing
        """
        endpoint = get_operation(operation_name, self._api_version)
        params = self._apply_defaults(endpoint, params)
        request = build_request(
            self.base_url, operation_name, params, extra_headers=headers, api_version=self._api_version
        )
        logger.debug(f"🔧 [LakehouseDataSource] {operation_name}: {request.method} {request.url}")

        try:
            response = await self.http.execute(request)
        except httpx.HTTPError as e:
            logger.error(f"🔧 [LakehouseDataSource] {operation_name} exception: {str(e)}")
            return LakehouseResponse(
                success=False,
                error=str(e),
                message=f"Failed to execute {operation_name}",
            )

        try:
            response_data = response.json()
        except ValueError:
            response_data = response.text() or None

        success = response.status < HttpStatusCode.BAD_REQUEST.value
        if not success:
            logger.debug(f"🔧 [LakehouseDataSource] {operation_name} failed with status {response.status}")
        return LakehouseResponse(
            success=success,
            status=response.status,
            headers=response.headers,
            data=response_data,
            error=None if success else response.text(),
            message=(
                f"Successfully executed {operation_name}"
                if success
                else f"Failed with status {response.status}"
            ),
        )

    def listing_operation(self, operation_name: str) -> Callable[[Dict[str, Any]], Awaitable[LakehouseResponse]]:
        """Return ``operation_name`` as a coroutine function of a parameter dict."""
        get_operation(operation_name, self._api_version)

        async def _list(params: Dict[str, Any]) -> LakehouseResponse:
            return await self.execute(operation_name, **params)

        return _list

    def pager(self, operation_name: str, **params: Any) -> Pager:
        """Create a pager over a paged listing operation.

        Args:
            operation_name: A listing operation with a pagination descriptor
            **params: Filters and page size; the cursor is managed by the pager

        Raises:
            ParameterValidationError: If the operation is not paged or the
                parameters are invalid
        """
        endpoint = get_operation(operation_name, self._api_version)
        pagination = endpoint.get("pagination")
        if pagination is None:
            raise ParameterValidationError(
                f"{operation_name} is not a paged listing operation",
                operation=operation_name,
            )

        cursor_param = pagination["cursor"]
        if params.get(cursor_param) is not None:
            raise ParameterValidationError(
                f"'{cursor_param}' is managed by the pager and cannot be passed to {operation_name}",
                operation=operation_name,
            )
        params = {name: value for name, value in params.items() if value is not None}

        base_params = validate_list_params(operation_name, params)
        if base_params is None:
            validate_params(operation_name, endpoint, params)
            base_params = params

        return Pager(
            list_operation=self.listing_operation(operation_name),
            items_field=pagination["items"],
            base_params=base_params,
            cursor_param=cursor_param,
            operation_name=operation_name,
        )

    def __getattr__(self, name: str) -> Callable[..., Awaitable[LakehouseResponse]]:
        if not name.startswith("_") and name in self._endpoints:
            return partial(self.execute, name)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
