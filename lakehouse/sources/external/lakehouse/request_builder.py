"""
Generic request building for the lakehouse endpoint table.

``build_request`` turns an operation name and its keyword parameters into an
``HTTPRequest``. It performs no I/O: a request that cannot be built raises
before anything is sent.
"""

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

from lakehouse.config.constants.service import (
    DEFAULT_SERVICE_NAME,
    SDK_ANALYTICS_HEADER,
    SERVICE_VERSION,
)
from lakehouse.exceptions.lakehouse_exceptions import (
    ParameterValidationError,
    UnknownOperationError,
)
from lakehouse.sources.client.http.http_request import HTTPRequest
from lakehouse.sources.external.lakehouse.operations import get_endpoint

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPE = "multipart/form-data"
DEFAULT_UPLOAD_CONTENT_TYPE = "application/octet-stream"


def get_sdk_headers(
    operation_name: str,
    service_name: str = DEFAULT_SERVICE_NAME,
    api_version: str = SERVICE_VERSION,
) -> Dict[str, str]:
    """Analytics header identifying the calling operation."""
    return {
        SDK_ANALYTICS_HEADER: (
            f"service_name={service_name};service_version={api_version};operation_id={operation_name}"
        )
    }


def _serialize_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_serialize_query_value(v) for v in value)
    return str(value)


def _serialize_form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def validate_params(operation_name: str, endpoint: Mapping[str, Any], params: Mapping[str, Any]) -> None:
    """Check ``params`` against the endpoint definition.

    Raises:
        ParameterValidationError: On unknown parameters or missing required ones
    """
    known = endpoint["parameters"]
    unknown = sorted(name for name in params if name not in known)
    if unknown:
        raise ParameterValidationError(
            f"Found invalid parameters for {operation_name}: {', '.join(unknown)}",
            operation=operation_name,
            details={"unknown": unknown},
        )

    missing = [name for name in endpoint.get("required", []) if params.get(name) is None]
    if missing:
        raise ParameterValidationError(
            f"Missing required parameters for {operation_name}: {', '.join(missing)}",
            operation=operation_name,
            details={"missing": missing},
        )


def get_operation(operation_name: str, api_version: str = SERVICE_VERSION) -> Dict[str, Any]:
    endpoint = get_endpoint(operation_name, api_version)
    if endpoint is None:
        raise UnknownOperationError(operation_name)
    return endpoint


def build_request(
    base_url: str,
    operation_name: str,
    params: Mapping[str, Any],
    default_headers: Optional[Mapping[str, str]] = None,
    extra_headers: Optional[Mapping[str, str]] = None,
    api_version: str = SERVICE_VERSION,
) -> HTTPRequest:
    """Build the HTTP request for ``operation_name``.

    Args:
        base_url: Service base URL, without trailing slash
        operation_name: Key of the endpoint table of ``api_version``
        params: Operation parameters by Python name; ``None`` values are omitted
        default_headers: Headers sent with every request (e.g. auth, user agent)
        extra_headers: Caller supplied headers, applied last
        api_version: Endpoint table to use, ``v1`` or ``v2``

    Returns:
        HTTPRequest ready for ``HTTPClient.execute``

    Raises:
        UnknownOperationError: If the operation is not in the table
        ParameterValidationError: If parameters are unknown or missing
    """
    endpoint = get_operation(operation_name, api_version)
    validate_params(operation_name, endpoint, params)

    path_params: Dict[str, str] = {}
    query_params: Dict[str, str] = {}
    param_headers: Dict[str, str] = {}
    body: Dict[str, Any] = {}
    payload: Any = None
    form_data: Dict[str, str] = {}
    files: Dict[str, Any] = {}
    file_content_types: Dict[str, str] = {}
    file_names: Dict[str, str] = {}

    for name, spec in endpoint["parameters"].items():
        value = params.get(name)
        if value is None:
            continue
        wire_name = spec.get("name", name)
        location = spec["location"]

        if location == "path":
            path_params[wire_name] = quote(str(value), safe="")
        elif location == "query":
            query_params[wire_name] = _serialize_query_value(value)
        elif location == "header":
            param_headers[wire_name] = str(value)
        elif location == "body":
            body[wire_name] = value
        elif location == "payload":
            payload = value
        elif location == "form":
            form_data[wire_name] = _serialize_form_value(value)
        elif location == "file":
            files[wire_name] = value
            if spec.get("filename_param") and params.get(spec["filename_param"]) is not None:
                file_names[wire_name] = str(params[spec["filename_param"]])
        elif location == "file_content_type":
            file_content_types[wire_name] = str(value)
        else:
            raise ValueError(f"Unsupported parameter location '{location}' for {operation_name}.{name}")

    content_type = endpoint.get("content_type")
    file_parts = {
        field: (file_names.get(field), content, file_content_types.get(field, DEFAULT_UPLOAD_CONTENT_TYPE))
        for field, content in files.items()
    }
    if content_type == MULTIPART_CONTENT_TYPE and form_data and not file_parts:
        # httpx only encodes multipart when at least one file part is present
        file_parts = {field: (None, value.encode("utf-8"), None) for field, value in form_data.items()}
        form_data = {}

    request_body: Any = payload if payload is not None else (body or None)

    headers: Dict[str, str] = dict(default_headers or {})
    headers.update(get_sdk_headers(operation_name, api_version=api_version))
    headers["Accept"] = JSON_CONTENT_TYPE
    if content_type and content_type != MULTIPART_CONTENT_TYPE and request_body is not None:
        headers["Content-Type"] = content_type
    headers.update(param_headers)
    if extra_headers:
        headers.update(extra_headers)

    logger.debug(
        f"🔧 Built {endpoint['method']} {endpoint['path']} for {operation_name} "
        f"(path={list(path_params)}, query={list(query_params)})"
    )

    return HTTPRequest(
        url=base_url.rstrip("/") + endpoint["path"],
        method=endpoint["method"],
        headers=headers,
        body=request_body,
        path_params=path_params,
        query_params=query_params,
        form_data=form_data,
        files=file_parts,
    )


def pagination_of(operation_name: str, api_version: str = SERVICE_VERSION) -> Optional[Dict[str, str]]:
    """Pagination descriptor of a listing operation, ``None`` if not paged."""
    return get_operation(operation_name, api_version).get("pagination")

