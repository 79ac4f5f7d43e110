import json
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field  # type: ignore

# (filename, content, content_type) as accepted by httpx for multipart parts
FilePart = Tuple[Optional[str], bytes, Optional[str]]


class HTTPRequest(BaseModel):
    """HTTP request
    Args:
        url: The URL of the request, may contain ``{name}`` placeholders
        method: The HTTP method to use
        headers: The headers to send with the request
        body: The JSON body (object or array) or raw bytes of the request
        path_params: Values substituted into the URL placeholders
        query_params: The query parameters to use
        form_data: Plain multipart form fields
        files: Multipart file parts keyed by field name
    """
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(alias="uri")
    method: str = Field(default="GET")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Union[Dict[str, Any], List[Any], bytes, None] = None
    path_params: Dict[str, str] = Field(default_factory=dict, alias="path")
    query_params: Dict[str, str] = Field(default_factory=dict, alias="query")
    form_data: Dict[str, str] = Field(default_factory=dict)
    files: Dict[str, FilePart] = Field(default_factory=dict)

    def resolved_url(self) -> str:
        """Return the URL with path parameters substituted."""
        return self.url.format(**self.path_params)

    def to_json(self) -> str:
        """
        Convert request to a JSON string.
        Files are listed by field name, bytes are decoded as UTF-8.
        The Authorization header is masked.
        """
        data = self.model_dump(exclude={"files"})
        data["headers"] = {
            k: ("***" if k.lower() == "authorization" else v)
            for k, v in self.headers.items()
        }
        data["files"] = sorted(self.files)

        if isinstance(self.body, bytes):
            data["body"] = self.body.decode("utf-8", errors="replace")

        return json.dumps(data, indent=2)
