"""
Global pytest configuration and fixtures for the lakehouse client tests.

This file contains shared fixtures that are available to all test modules
without explicit import. HTTP round-trips go through ``httpx.MockTransport``;
nothing leaves the process.
"""

import os
from typing import AsyncGenerator, Dict, Generator

import httpx  # type: ignore
import pytest  # type: ignore
import pytest_asyncio  # type: ignore
from faker import Faker  # type: ignore

from lakehouse.sources.client.lakehouse.lakehouse import LakehouseClient, LakehouseRESTClientViaToken
from lakehouse.sources.external.lakehouse.lakehouse_ import LakehouseDataSource
from tests.utils.mock_service import SERVICE_URL, MockLakehouseService

# Initialize Faker for generating test data
fake: Faker = Faker()


# ============================================================================
# Session-level fixtures
# ============================================================================


@pytest.fixture(scope="session")
def faker_instance() -> Faker:
    """
    Provide a Faker instance for generating test data.

    Returns:
        Configured Faker instance
    """
    return fake


# ============================================================================
# Function-level fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """
    Reset environment state after each test.
    This ensures tests don't interfere with each other.
    """
    original_env: Dict[str, str] = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def auth_instance_id(faker_instance: Faker) -> str:
    return f"crn:v1:staging:public:lakehouse:us-south:a/{faker_instance.uuid4()}"


@pytest.fixture
def mock_service() -> MockLakehouseService:
    return MockLakehouseService()


@pytest_asyncio.fixture
async def rest_client(
    mock_service: MockLakehouseService,
    auth_instance_id: str,
    faker_instance: Faker,
) -> AsyncGenerator[LakehouseRESTClientViaToken, None]:
    """
    Provide a REST client wired to the mock service.

    Yields:
        LakehouseRESTClientViaToken instance
    """
    client = LakehouseRESTClientViaToken(
        service_url=SERVICE_URL,
        token=faker_instance.sha256(),
        auth_instance_id=auth_instance_id,
        transport=httpx.MockTransport(mock_service),
    )

    yield client

    await client.close()


@pytest.fixture
def data_source(rest_client: LakehouseRESTClientViaToken) -> LakehouseDataSource:
    return LakehouseDataSource(LakehouseClient(rest_client))


# ============================================================================
# Test lifecycle hooks
# ============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Modify test items after collection.

    Every test in this suite runs without network access, so all of them
    are unit tests.
    """
    for item in items:
        item.add_marker(pytest.mark.unit)
