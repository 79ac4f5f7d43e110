from enum import Enum

DEFAULT_SERVICE_URL = "https://ibmcloud/lakehouse/api/v2"
DEFAULT_SERVICE_NAME = "lakehouse"
SERVICE_VERSION = "v2"
SDK_VERSION = "0.3.0"

USER_AGENT = f"lakehouse-python-sdk/{SDK_VERSION}"
SDK_ANALYTICS_HEADER = "X-Lakehouse-SDK-Analytics"
AUTH_INSTANCE_ID_PARAM = "auth_instance_id"


class EnvironmentKeys(str, Enum):
    """Suffixes of the environment variables read for a service.

    The full variable name is ``<SERVICE_NAME>_<SUFFIX>``, e.g. ``LAKEHOUSE_URL``.
    """

    URL = "URL"
    BEARER_TOKEN = "BEARER_TOKEN"
    AUTH_INSTANCE_ID = "AUTH_INSTANCE_ID"
    TIMEOUT = "TIMEOUT"
    MAX_RETRIES = "MAX_RETRIES"
    DISABLE_SSL = "DISABLE_SSL"

    def for_service(self, service_name: str) -> str:
        return f"{service_name.upper().replace('-', '_')}_{self.value}"
