from lakehouse.exceptions.lakehouse_exceptions import (
    ExhaustedError,
    LakehouseError,
    ParameterValidationError,
    RequestError,
    UnknownOperationError,
)

__all__ = [
    "LakehouseError",
    "RequestError",
    "ExhaustedError",
    "ParameterValidationError",
    "UnknownOperationError",
]
