"""
LakehouseDataSource tests over an in-process mock service.
"""
import json

import httpx  # type: ignore
import pytest  # type: ignore
import pytest_asyncio  # type: ignore

from lakehouse.config.constants.service import SDK_ANALYTICS_HEADER, USER_AGENT
from lakehouse.exceptions.lakehouse_exceptions import (
    ExhaustedError,
    ParameterValidationError,
    RequestError,
    UnknownOperationError,
)
from lakehouse.sources.client.lakehouse.lakehouse import LakehouseClient, LakehouseRESTClientViaToken
from lakehouse.sources.external.lakehouse.lakehouse_ import LakehouseDataSource
from lakehouse.sources.external.lakehouse.pager import IngestionJobsPager, PagerState
from tests.utils.mock_service import SERVICE_URL, V1_SERVICE_URL


def ingestion_job(faker_instance, job_id=None):
    return {
        "job_id": job_id or f"ingestion-{faker_instance.random_number(digits=13)}",
        "status": "running",
        "target_table": "demodb.test.targettable",
        "username": faker_instance.user_name(),
    }


class TestExecute:
    """Single operations through execute and attribute dispatch."""

    @pytest.mark.asyncio
    async def test_dispatch_sends_request_and_wraps_result(self, data_source, mock_service, rest_client, auth_instance_id):
        catalogs = {"catalogs": [{"catalog_name": "iceberg_data", "catalog_type": "iceberg"}]}
        mock_service.queue(200, catalogs)

        response = await data_source.list_catalogs()

        assert response.success is True
        assert response.status == 200
        assert response.data == catalogs
        assert response.headers["content-type"] == "application/json"

        request = mock_service.last_request
        assert request.method == "GET"
        assert str(request.url) == f"{SERVICE_URL}/catalogs"
        assert request.headers["Authorization"] == rest_client.headers["Authorization"]
        assert request.headers["AuthInstanceId"] == auth_instance_id
        assert request.headers["User-Agent"] == USER_AGENT
        assert request.headers[SDK_ANALYTICS_HEADER].endswith("operation_id=list_catalogs")

    @pytest.mark.asyncio
    async def test_explicit_instance_id_wins_over_default(self, data_source, mock_service):
        await data_source.execute("list_catalogs", auth_instance_id="crn:explicit")

        assert mock_service.last_request.headers["AuthInstanceId"] == "crn:explicit"

    @pytest.mark.asyncio
    async def test_extra_headers_are_sent(self, data_source, mock_service):
        await data_source.list_catalogs(headers={"X-Correlation-Id": "corr-1"})

        assert mock_service.last_request.headers["X-Correlation-Id"] == "corr-1"

    @pytest.mark.asyncio
    async def test_path_and_query_params(self, data_source, mock_service):
        mock_service.queue(200, {"table_name": "orders", "columns": []})

        response = await data_source.get_table(
            catalog_id="iceberg_data", schema_id="sales", table_id="orders", engine_id="presto01"
        )

        assert response.data["table_name"] == "orders"
        url = mock_service.last_request.url
        assert url.path == "/lakehouse/api/v2/catalogs/iceberg_data/schemas/sales/tables/orders"
        assert url.params["engine_id"] == "presto01"

    @pytest.mark.asyncio
    async def test_json_body(self, data_source, mock_service, faker_instance):
        mock_service.queue(202, ingestion_job(faker_instance, job_id="ingestion-1"))

        response = await data_source.create_ingestion_jobs(
            job_id="ingestion-1",
            source_data_files="s3://demobucket/data/yellow_tripdata_2022-01.parquet",
            target_table="demodb.test.targettable",
            username="user1",
        )

        assert response.success is True
        assert response.status == 202
        assert mock_service.last_request.headers["Content-Type"] == "application/json"
        assert mock_service.last_json() == {
            "job_id": "ingestion-1",
            "source_data_files": "s3://demobucket/data/yellow_tripdata_2022-01.parquet",
            "target_table": "demodb.test.targettable",
            "username": "user1",
        }

    @pytest.mark.asyncio
    async def test_json_patch_body(self, data_source, mock_service):
        patch = [{"op": "add", "path": "/description", "value": "updated"}]

        await data_source.update_bucket_registration(bucket_id="bucket-1", body=patch)

        request = mock_service.last_request
        assert request.method == "PATCH"
        assert request.headers["Content-Type"] == "application/json-patch+json"
        assert json.loads(request.content) == patch

    @pytest.mark.asyncio
    async def test_multipart_upload(self, data_source, mock_service):
        mock_service.queue(201, {"database_id": "new_db_id"})

        response = await data_source.create_driver_database_catalog(
            database_display_name="sample",
            database_type="postgresql",
            catalog_name="pg_catalog",
            hostname="db.example.com",
            port="5432",
            driver=b"driver-jar-bytes",
            driver_content_type="application/java-archive",
        )

        assert response.data == {"database_id": "new_db_id"}
        request = mock_service.last_request
        assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert b'name="catalog_name"' in request.content
        assert b"driver-jar-bytes" in request.content
        assert b"Content-Type: application/java-archive" in request.content

    @pytest.mark.asyncio
    async def test_multipart_upload_with_driver_file_name(self, data_source, mock_service):
        await data_source.create_driver_database_catalog(
            database_display_name="sample",
            database_type="postgresql",
            catalog_name="pg_catalog",
            hostname="db.example.com",
            port="5432",
            driver=b"driver-jar-bytes",
            driver_file_name="postgresql-42.7.3.jar",
        )

        content = mock_service.last_request.content
        assert b'name="driver"; filename="postgresql-42.7.3.jar"' in content
        assert b'name="driver_file_name"' in content

    @pytest.mark.asyncio
    async def test_multipart_operation_without_file_is_still_multipart(self, data_source, mock_service):
        await data_source.create_driver_database_catalog(
            database_display_name="sample",
            database_type="postgresql",
            catalog_name="pg_catalog",
            hostname="db.example.com",
            port="5432",
        )

        request = mock_service.last_request
        assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert b'name="hostname"' in request.content
        assert b"db.example.com" in request.content

    @pytest.mark.asyncio
    async def test_empty_response_body(self, data_source, mock_service):
        mock_service.queue(204, text="")

        response = await data_source.delete_table(
            catalog_id="c", schema_id="s", table_id="t", engine_id="e"
        )

        assert response.success is True
        assert response.status == 204
        assert response.data is None

    @pytest.mark.asyncio
    async def test_non_json_response_body(self, data_source, mock_service):
        mock_service.queue(200, text="ok")

        response = await data_source.test_lh_console()

        assert response.success is True
        assert response.data == "ok"

    @pytest.mark.asyncio
    async def test_error_status_is_unsuccessful(self, data_source, mock_service):
        error_body = {"errors": [{"code": "not_found", "message": "catalog not found"}], "trace": "abc"}
        mock_service.queue(404, error_body)

        response = await data_source.get_catalog(catalog_id="missing")

        assert response.success is False
        assert response.status == 404
        assert response.data == error_body
        assert "catalog not found" in response.error
        assert response.message == "Failed with status 404"

    @pytest.mark.asyncio
    async def test_transport_error_is_unsuccessful(self, data_source, mock_service):
        mock_service.queue_error(httpx.ConnectError("connection refused"))

        response = await data_source.list_catalogs()

        assert response.success is False
        assert response.status is None
        assert "connection refused" in response.error
        assert response.message == "Failed to execute list_catalogs"

    @pytest.mark.asyncio
    async def test_validation_errors_raise_before_io(self, data_source, mock_service):
        with pytest.raises(ParameterValidationError):
            await data_source.get_catalog()
        with pytest.raises(ParameterValidationError):
            await data_source.list_catalogs(catalog_name="x")
        with pytest.raises(UnknownOperationError):
            await data_source.execute("drop_everything")

        assert mock_service.requests == []


class TestDispatch:
    """Attribute lookup and operation listing."""

    @pytest.mark.asyncio
    async def test_unknown_attribute(self, data_source):
        with pytest.raises(AttributeError):
            data_source.drop_everything
        with pytest.raises(AttributeError):
            data_source._private_thing

    @pytest.mark.asyncio
    async def test_operations(self, data_source):
        operations = data_source.operations()

        assert "list_ingestion_jobs" in operations
        assert operations == sorted(operations)
        assert all(callable(getattr(data_source, name)) for name in operations)

    @pytest.mark.asyncio
    async def test_data_source_accessors(self, data_source):
        assert data_source.get_data_source() is data_source
        assert data_source.base_url == SERVICE_URL
        assert data_source.get_client().get_base_url() == SERVICE_URL


@pytest.mark.pager
class TestDataSourcePager:
    """Pagers built by the data source, over HTTP."""

    @pytest.mark.asyncio
    async def test_pager_walks_ingestion_jobs(self, data_source, mock_service, faker_instance, auth_instance_id):
        first = [ingestion_job(faker_instance) for _ in range(2)]
        second = [ingestion_job(faker_instance) for _ in range(2)]
        third = [ingestion_job(faker_instance)]
        mock_service.queue(200, {
            "ingestion_jobs": first,
            "first": {"href": f"{SERVICE_URL}/lhingestion/api/v1/ingestion/jobs?jobs_per_page=2"},
            "next": {"href": f"{SERVICE_URL}/lhingestion/api/v1/ingestion/jobs?start=2&jobs_per_page=2", "start": "2"},
        })
        mock_service.queue(200, {
            "ingestion_jobs": second,
            "next": {"href": f"{SERVICE_URL}/lhingestion/api/v1/ingestion/jobs?start=3&jobs_per_page=2"},
        })
        mock_service.queue(200, {"ingestion_jobs": third})

        pager = data_source.pager("list_ingestion_jobs", jobs_per_page=2)

        assert await pager.get_all() == first + second + third
        assert pager.has_next() is False

        sent = [dict(request.url.params) for request in mock_service.requests]
        assert sent == [
            {"jobs_per_page": "2"},
            {"jobs_per_page": "2", "start": "2"},
            {"jobs_per_page": "2", "start": "3"},
        ]
        assert all(r.headers["AuthInstanceId"] == auth_instance_id for r in mock_service.requests)

    @pytest.mark.asyncio
    async def test_pager_http_error_raises_request_error(self, data_source, mock_service):
        error_body = {"errors": [{"code": "unauthorized", "message": "token expired"}]}
        mock_service.queue(401, error_body)

        pager = data_source.pager("list_ingestion_jobs")

        with pytest.raises(RequestError) as exc_info:
            await pager.get_next()

        assert exc_info.value.status_code == 401
        assert exc_info.value.body == error_body
        assert pager.state is PagerState.FRESH

    @pytest.mark.asyncio
    async def test_pager_transport_error_raises_request_error(self, data_source, mock_service):
        mock_service.queue_error(httpx.ReadTimeout("timed out"))

        pager = data_source.pager("list_ingestion_jobs")

        with pytest.raises(RequestError) as exc_info:
            await pager.get_next()

        assert exc_info.value.status_code is None
        assert "timed out" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_ingestion_jobs_pager(self, data_source, mock_service, faker_instance):
        jobs = [ingestion_job(faker_instance)]
        mock_service.queue(200, {"ingestion_jobs": jobs})

        pager = IngestionJobsPager(data_source, auth_instance_id="crn:other", jobs_per_page=10)

        assert await pager.get_next() == jobs
        with pytest.raises(ExhaustedError):
            await pager.get_next()
        request = mock_service.last_request
        assert request.headers["AuthInstanceId"] == "crn:other"
        assert request.url.params["jobs_per_page"] == "10"
        assert len(mock_service.requests) == 1

    @pytest.mark.asyncio
    async def test_pager_rejects_non_paged_operation(self, data_source):
        with pytest.raises(ParameterValidationError, match="not a paged listing operation"):
            data_source.pager("list_catalogs")

    @pytest.mark.asyncio
    async def test_pager_rejects_cursor_param(self, data_source):
        with pytest.raises(ParameterValidationError, match="managed by the pager"):
            data_source.pager("list_ingestion_jobs", start="5")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{"jobs_per_page": 0}, {"jobs_per_page": "many"}, {"status": "running"}])
    async def test_pager_validates_listing_params(self, data_source, mock_service, params):
        with pytest.raises(ParameterValidationError):
            data_source.pager("list_ingestion_jobs", **params)

        assert mock_service.requests == []

    @pytest.mark.asyncio
    async def test_pager_unknown_operation(self, data_source):
        with pytest.raises(UnknownOperationError):
            data_source.pager("list_everything")


class TestApiVersions:
    """Endpoint table selection by API version."""

    @pytest_asyncio.fixture
    async def v1_rest_client(self, mock_service, auth_instance_id):
        client = LakehouseRESTClientViaToken(
            service_url=V1_SERVICE_URL,
            token="t",
            auth_instance_id=auth_instance_id,
            transport=httpx.MockTransport(mock_service),
        )
        yield client
        await client.close()

    @pytest.mark.asyncio
    async def test_version_inferred_from_base_url(self, v1_rest_client, mock_service, auth_instance_id):
        policies = {"data_policies": [{"policy_name": "mask_ssn", "status": "active"}]}
        mock_service.queue(200, policies)
        data_source = LakehouseDataSource(LakehouseClient(v1_rest_client))

        response = await data_source.list_data_policies(lh_instance_id="lh-1", status="active")

        assert data_source.api_version == "v1"
        assert response.data == policies
        request = mock_service.last_request
        assert str(request.url) == f"{V1_SERVICE_URL}/access/data_policies?status=active"
        assert request.headers["LhInstanceId"] == "lh-1"
        assert request.headers["AuthInstanceId"] == auth_instance_id
        assert request.headers[SDK_ANALYTICS_HEADER].startswith("service_name=lakehouse;service_version=v1;")

    @pytest.mark.asyncio
    async def test_v1_path_operation(self, v1_rest_client, mock_service):
        data_source = LakehouseDataSource(LakehouseClient(v1_rest_client))

        await data_source.delete_query(query_name="daily revenue")

        request = mock_service.last_request
        assert request.method == "DELETE"
        assert request.url.path == "/lakehouse/api/v1/queries/daily%20revenue"

    @pytest.mark.asyncio
    async def test_explicit_version_wins(self, data_source, rest_client, mock_service):
        v1_data_source = LakehouseDataSource(LakehouseClient(rest_client), api_version="v1")

        assert data_source.api_version == "v2"
        assert v1_data_source.api_version == "v1"
        assert "list_data_policies" in v1_data_source.operations()
        assert "list_data_policies" not in data_source.operations()
        assert "list_ingestion_jobs" not in v1_data_source.operations()
        with pytest.raises(AttributeError):
            data_source.list_data_policies

    @pytest.mark.asyncio
    async def test_v1_has_no_paged_operations(self, v1_rest_client):
        data_source = LakehouseDataSource(LakehouseClient(v1_rest_client))

        with pytest.raises(UnknownOperationError):
            data_source.pager("list_ingestion_jobs")
        with pytest.raises(ParameterValidationError, match="not a paged listing operation"):
            data_source.pager("get_queries")

    @pytest.mark.asyncio
    async def test_unsupported_version(self, rest_client):
        with pytest.raises(ValueError, match="Unsupported API version"):
            LakehouseDataSource(LakehouseClient(rest_client), api_version="v3")
