from typing import Any, Dict

import httpx  # type: ignore


class HTTPResponse:
    """Thin wrapper over ``httpx.Response`` used by the data sources"""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.response.headers)

    @property
    def is_success(self) -> bool:
        return self.response.is_success

    def text(self) -> str:
        return self.response.text

    def bytes(self) -> bytes:
        return self.response.content

    def json(self) -> Any:
        """Decode the body as JSON. An empty body decodes to ``None``."""
        if not self.response.content:
            return None
        return self.response.json()

    def __repr__(self) -> str:
        return f"HTTPResponse(status={self.status})"
