from typing import Any, Optional


class LakehouseError(Exception):
    """Base exception for lakehouse client errors"""

    def __init__(self, message: str, details: dict = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class RequestError(LakehouseError):
    """Raised when a service call fails or returns an error status"""

    def __init__(
        self,
        message: str = "Request to the lakehouse service failed",
        status_code: Optional[int] = None,
        body: Any = None,
        operation: Optional[str] = None,
        details: dict = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
        self.body = body
        self.operation = operation

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (status {self.status_code})"


class ExhaustedError(LakehouseError):
    """Raised when the next page is requested from an exhausted pager"""

    def __init__(self, message: str = "No more results available") -> None:
        super().__init__(message)


class ParameterValidationError(LakehouseError):
    """Raised when operation parameters are missing, unknown or invalid"""

    def __init__(
        self,
        message: str = "Invalid operation parameters",
        operation: Optional[str] = None,
        details: dict = None,
    ) -> None:
        super().__init__(message, details)
        self.operation = operation


class UnknownOperationError(ParameterValidationError):
    """Raised when an operation name is not in the endpoint table"""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Unknown operation: {operation}", operation=operation)
