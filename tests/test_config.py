"""
Client configuration tests: explicit config objects and environment loading.
"""
import pytest  # type: ignore
from pydantic import ValidationError  # type: ignore

from lakehouse.config.constants.service import DEFAULT_SERVICE_URL, EnvironmentKeys
from lakehouse.sources.client.http.resilient_transport import ResilientHTTPTransport
from lakehouse.sources.client.lakehouse.lakehouse import (
    LakehouseClient,
    LakehouseRESTClientViaToken,
    LakehouseTokenConfig,
    load_config_from_environment,
)
from tests.utils.mock_service import SERVICE_URL


@pytest.mark.config
class TestLakehouseTokenConfig:
    """Explicit configuration objects."""

    def test_defaults(self, faker_instance):
        config = LakehouseTokenConfig(bearer_token=faker_instance.sha256())

        assert config.service_url == DEFAULT_SERVICE_URL
        assert config.timeout == 30.0
        assert config.max_retries == 0
        assert config.disable_ssl is False
        assert config.auth_instance_id is None

    def test_service_url_trailing_slash_is_stripped(self):
        config = LakehouseTokenConfig(service_url=f"{SERVICE_URL}/", bearer_token="t")

        assert config.service_url == SERVICE_URL

    @pytest.mark.parametrize(
        "overrides",
        [
            {"service_url": "lakehouse.test/api/v2"},
            {"bearer_token": ""},
            {"timeout": 0},
            {"max_retries": -1},
            {"requests_per_second": 0},
        ],
    )
    def test_invalid_values(self, overrides):
        values = {"service_url": SERVICE_URL, "bearer_token": "t", **overrides}

        with pytest.raises(ValidationError):
            LakehouseTokenConfig(**values)

    @pytest.mark.asyncio
    async def test_create_client(self, faker_instance):
        token = faker_instance.sha256()
        config = LakehouseTokenConfig(
            service_url=SERVICE_URL,
            bearer_token=token,
            auth_instance_id="crn:instance",
            max_retries=2,
            requests_per_second=5,
            disable_ssl=True,
        )

        async with LakehouseClient.build_with_config(config) as client:
            rest_client = client.get_client()

            assert isinstance(rest_client, LakehouseRESTClientViaToken)
            assert client.get_base_url() == SERVICE_URL
            assert rest_client.get_auth_instance_id() == "crn:instance"
            assert rest_client.headers["Authorization"] == f"Bearer {token}"
            assert rest_client.verify is False
            assert rest_client.rate_limiter is not None
            assert isinstance(rest_client._build_transport(), ResilientHTTPTransport)


@pytest.mark.config
class TestLoadConfigFromEnvironment:
    """Environment and dotenv loading."""

    def test_environment_keys(self):
        assert EnvironmentKeys.BEARER_TOKEN.for_service("lakehouse") == "LAKEHOUSE_BEARER_TOKEN"
        assert EnvironmentKeys.URL.for_service("watsonx_data") == "WATSONX_DATA_URL"

    def test_reads_all_values(self):
        environ = {
            "LAKEHOUSE_URL": SERVICE_URL,
            "LAKEHOUSE_BEARER_TOKEN": "token-1",
            "LAKEHOUSE_AUTH_INSTANCE_ID": "crn:instance",
            "LAKEHOUSE_TIMEOUT": "12.5",
            "LAKEHOUSE_MAX_RETRIES": "4",
            "LAKEHOUSE_DISABLE_SSL": "true",
        }

        config = load_config_from_environment(environ=environ)

        assert config.service_url == SERVICE_URL
        assert config.bearer_token == "token-1"
        assert config.auth_instance_id == "crn:instance"
        assert config.timeout == 12.5
        assert config.max_retries == 4
        assert config.disable_ssl is True

    def test_missing_token(self):
        with pytest.raises(ValueError, match="LAKEHOUSE_BEARER_TOKEN"):
            load_config_from_environment(environ={"LAKEHOUSE_URL": SERVICE_URL})

    def test_blank_token_is_missing(self):
        with pytest.raises(ValueError, match="LAKEHOUSE_BEARER_TOKEN"):
            load_config_from_environment(environ={"LAKEHOUSE_BEARER_TOKEN": "   "})

    def test_invalid_value_is_reported(self):
        environ = {"LAKEHOUSE_BEARER_TOKEN": "t", "LAKEHOUSE_TIMEOUT": "soon"}

        with pytest.raises(ValueError, match="Invalid lakehouse configuration"):
            load_config_from_environment(environ=environ)

    def test_custom_service_name(self):
        environ = {"WXD_BEARER_TOKEN": "t", "WXD_URL": SERVICE_URL, "LAKEHOUSE_BEARER_TOKEN": "other"}

        config = load_config_from_environment(service_name="wxd", environ=environ)

        assert config.bearer_token == "t"
        assert config.service_url == SERVICE_URL

    def test_dotenv_file_overridden_by_environment(self, tmp_path):
        env_file = tmp_path / "lakehouse.env"
        env_file.write_text(
            f"LAKEHOUSE_URL={SERVICE_URL}\n"
            "LAKEHOUSE_BEARER_TOKEN=from-file\n"
            "LAKEHOUSE_AUTH_INSTANCE_ID=crn:file\n"
        )

        config = load_config_from_environment(env_file=env_file, environ={"LAKEHOUSE_BEARER_TOKEN": "from-env"})

        assert config.bearer_token == "from-env"
        assert config.auth_instance_id == "crn:file"
        assert config.service_url == SERVICE_URL

    def test_process_environment_is_the_default(self, monkeypatch):
        monkeypatch.setenv("LAKEHOUSE_BEARER_TOKEN", "process-token")
        monkeypatch.delenv("LAKEHOUSE_URL", raising=False)

        config = load_config_from_environment()

        assert config.bearer_token == "process-token"
        assert config.service_url == DEFAULT_SERVICE_URL

    @pytest.mark.asyncio
    async def test_build_from_environment(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(f"LAKEHOUSE_URL={SERVICE_URL}\nLAKEHOUSE_BEARER_TOKEN=file-token\n")
        monkeypatch.delenv("LAKEHOUSE_BEARER_TOKEN", raising=False)
        monkeypatch.delenv("LAKEHOUSE_URL", raising=False)

        client = LakehouseClient.build_from_environment(env_file=env_file)

        assert client.get_base_url() == SERVICE_URL
        assert client.get_client().headers["Authorization"] == "Bearer file-token"
        await client.close()
