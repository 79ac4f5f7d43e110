from lakehouse.sources.client.lakehouse.lakehouse import (
    LakehouseClient,
    LakehouseResponse,
    LakehouseRESTClientViaToken,
    LakehouseTokenConfig,
    load_config_from_environment,
)

__all__ = [
    "LakehouseClient",
    "LakehouseResponse",
    "LakehouseRESTClientViaToken",
    "LakehouseTokenConfig",
    "load_config_from_environment",
]
