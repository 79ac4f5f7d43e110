"""
Parameter structures for paged listing operations.

Each model lists the filters and page size an operation accepts, with their
defaults. Parameters are validated here before a pager is constructed; the
cursor parameter is owned by the pager and cannot be set by callers.
"""

from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError  # type: ignore

from lakehouse.exceptions.lakehouse_exceptions import ParameterValidationError


class ListParams(BaseModel):
    """Base class for listing parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_params(self) -> Dict[str, Any]:
        """Operation parameters, without unset (``None``) values."""
        return self.model_dump(exclude_none=True)


class ListIngestionJobsParams(ListParams):
    """Parameters of ``list_ingestion_jobs``.

    Args:
        auth_instance_id: Instance ID; defaults to the client's instance ID
        jobs_per_page: Number of jobs per page; the service default when unset
    """

    auth_instance_id: Optional[str] = Field(default=None, description="Instance ID")
    jobs_per_page: Optional[int] = Field(default=None, gt=0, description="Number of requested ingestion jobs")


LIST_PARAMS_MODELS: Dict[str, Type[ListParams]] = {
    "list_ingestion_jobs": ListIngestionJobsParams,
}


def validate_list_params(operation_name: str, params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Validate ``params`` with the model registered for ``operation_name``.

    Returns:
        The normalized parameters, or ``None`` if no model is registered

    Raises:
        ParameterValidationError: If the parameters do not match the model
    """
    model = LIST_PARAMS_MODELS.get(operation_name)
    if model is None:
        return None
    try:
        return model.model_validate(params).to_params()
    except ValidationError as e:
        raise ParameterValidationError(
            f"Invalid parameters for {operation_name}: {e}",
            operation=operation_name,
            details={"errors": e.errors()},
        ) from e
