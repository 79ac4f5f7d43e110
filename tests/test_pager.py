"""
Pager tests: state machine, cursor handling and failure behaviour.
"""
import asyncio

import httpx  # type: ignore
import pytest  # type: ignore
from pydantic import ValidationError  # type: ignore

from lakehouse.exceptions.lakehouse_exceptions import ExhaustedError, RequestError
from lakehouse.sources.client.lakehouse.lakehouse import LakehouseResponse
from lakehouse.sources.external.lakehouse.pager import (
    PageRequest,
    PageResponse,
    Pager,
    PagerState,
    extract_cursor,
)
from tests.utils.mock_service import ScriptedListing

page = ScriptedListing.page


def make_pager(listing: ScriptedListing, **base_params) -> Pager:
    return Pager(
        list_operation=listing,
        items_field="ingestion_jobs",
        base_params=base_params,
        cursor_param="start",
        operation_name="list_ingestion_jobs",
    )


@pytest.mark.pager
class TestPagerIteration:
    """Walking pages until the cursor runs out."""

    def test_fresh_pager_has_next_without_io(self):
        listing = ScriptedListing()
        pager = make_pager(listing)

        assert pager.has_next() is True
        assert pager.state is PagerState.FRESH
        assert listing.calls == []

    @pytest.mark.asyncio
    async def test_get_all_concatenates_pages_until_blank_cursor(self):
        listing = ScriptedListing(page(["a", "b"], "tok1"), page(["c"], ""))
        pager = make_pager(listing)

        assert await pager.get_all() == ["a", "b", "c"]
        assert pager.has_next() is False
        assert pager.state is PagerState.EXHAUSTED
        assert listing.calls == [{}, {"start": "tok1"}]

    @pytest.mark.asyncio
    async def test_empty_page_with_cursor_keeps_iterating(self):
        listing = ScriptedListing(page([], "tok1"), page(["x"], None))
        pager = make_pager(listing)

        assert await pager.get_next() == []
        assert pager.has_next() is True
        assert pager.state is PagerState.HAS_MORE

        assert await pager.get_next() == ["x"]
        assert pager.has_next() is False

    @pytest.mark.asyncio
    async def test_get_all_matches_successive_get_next(self):
        pages = [page([1, 2], "2"), page([3], "3"), page([4, 5], None)]

        by_page = make_pager(ScriptedListing(*pages))
        collected = []
        while by_page.has_next():
            collected.extend(await by_page.get_next())

        assert await make_pager(ScriptedListing(*pages)).get_all() == collected == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_get_all_resumes_from_current_position(self):
        listing = ScriptedListing(page(["a"], "tok1"), page(["b"], "tok2"), page(["c"], None))
        pager = make_pager(listing)

        assert await pager.get_next() == ["a"]
        assert await pager.get_all() == ["b", "c"]
        assert await pager.get_all() == []

    @pytest.mark.asyncio
    async def test_base_params_sent_with_every_page(self, faker_instance):
        instance_id = faker_instance.uuid4()
        listing = ScriptedListing(page(["a"], {"start": "2"}), page(["b"], None))
        pager = make_pager(listing, auth_instance_id=instance_id, jobs_per_page=1)

        await pager.get_all()

        assert listing.calls == [
            {"auth_instance_id": instance_id, "jobs_per_page": 1},
            {"auth_instance_id": instance_id, "jobs_per_page": 1, "start": "2"},
        ]

    @pytest.mark.asyncio
    async def test_pages_yields_each_page(self):
        listing = ScriptedListing(page(["a", "b"], "tok1"), page([], "tok2"), page(["c"], None))
        pager = make_pager(listing)

        assert [items async for items in pager.pages()] == [["a", "b"], [], ["c"]]
        assert pager.has_next() is False

    @pytest.mark.asyncio
    async def test_last_page_keeps_totals(self):
        response = page(["a"], None)
        response.data.update({"total_count": 1, "limit": 10})
        pager = make_pager(ScriptedListing(response))

        await pager.get_next()

        assert pager.last_page.total_count == 1
        assert pager.last_page.limit == 10


@pytest.mark.pager
class TestPagerExhaustion:
    """Behaviour once the last page has been read."""

    @pytest.mark.asyncio
    async def test_get_next_after_exhaustion_raises_without_call(self):
        listing = ScriptedListing(page(["a"], None))
        pager = make_pager(listing)
        await pager.get_next()

        with pytest.raises(ExhaustedError):
            await pager.get_next()

        assert len(listing.calls) == 1

    @pytest.mark.asyncio
    async def test_get_all_on_exhausted_pager_returns_empty(self):
        listing = ScriptedListing(page(["a"], None))
        pager = make_pager(listing)
        await pager.get_all()

        assert await pager.get_all() == []
        assert len(listing.calls) == 1

    @pytest.mark.asyncio
    async def test_missing_items_field_is_an_empty_page(self):
        listing = ScriptedListing(ScriptedListing.page([], None, items_field="other"))
        pager = make_pager(listing)

        assert await pager.get_next() == []
        assert pager.has_next() is False


@pytest.mark.pager
class TestPagerFailures:
    """Failed calls leave the pager where it was."""

    @pytest.mark.asyncio
    async def test_failed_call_raises_request_error_and_keeps_cursor(self):
        body = {"errors": [{"code": "internal_error", "message": "try later"}]}
        listing = ScriptedListing(
            page(["a"], "tok1"),
            ScriptedListing.failure(500, body),
            page(["b"], None),
        )
        pager = make_pager(listing)
        await pager.get_next()

        with pytest.raises(RequestError) as exc_info:
            await pager.get_next()

        assert exc_info.value.status_code == 500
        assert exc_info.value.body == body
        assert exc_info.value.operation == "list_ingestion_jobs"
        assert pager.has_next() is True
        assert pager.state is PagerState.HAS_MORE

        assert await pager.get_next() == ["b"]
        assert listing.calls[1] == listing.calls[2] == {"start": "tok1"}

    @pytest.mark.asyncio
    async def test_first_call_failure_leaves_pager_fresh(self):
        listing = ScriptedListing(ScriptedListing.failure(404), page(["a"], None))
        pager = make_pager(listing)

        with pytest.raises(RequestError) as exc_info:
            await pager.get_next()

        assert exc_info.value.status_code == 404
        assert pager.state is PagerState.FRESH
        assert await pager.get_next() == ["a"]

    @pytest.mark.asyncio
    async def test_transport_error_is_wrapped(self):
        cause = httpx.ConnectError("connection refused")
        pager = make_pager(ScriptedListing(cause))

        with pytest.raises(RequestError) as exc_info:
            await pager.get_next()

        assert exc_info.value.__cause__ is cause
        assert exc_info.value.status_code is None
        assert pager.state is PagerState.FRESH

    @pytest.mark.asyncio
    async def test_unsuccessful_response_without_status(self):
        failure = ScriptedListing.failure(500)
        failure.status = None
        failure.error = "connection reset"
        pager = make_pager(ScriptedListing(failure))

        with pytest.raises(RequestError, match="connection reset"):
            await pager.get_next()

    @pytest.mark.asyncio
    async def test_get_all_failure_drops_partial_results_and_resumes(self):
        listing = ScriptedListing(
            page(["a"], "tok1"),
            page(["b"], "tok2"),
            ScriptedListing.failure(503),
        )
        pager = make_pager(listing)

        with pytest.raises(RequestError):
            await pager.get_all()

        assert pager.has_next() is True
        listing.push(page(["c"], None))
        assert await pager.get_all() == ["c"]
        assert listing.calls[-1] == {"start": "tok2"}

    @pytest.mark.asyncio
    async def test_cancellation_leaves_state_unchanged(self):
        listing = ScriptedListing(page(["a"], "tok1"), asyncio.CancelledError(), page(["b"], None))
        pager = make_pager(listing)
        await pager.get_next()

        with pytest.raises(asyncio.CancelledError):
            await pager.get_next()

        assert pager.request.cursor == "tok1"
        assert await pager.get_next() == ["b"]

    @pytest.mark.asyncio
    async def test_repeated_cursor_raises_instead_of_looping(self):
        listing = ScriptedListing(*(page([1], "t1") for _ in range(3)))
        pager = make_pager(listing)
        assert await pager.get_next() == [1]

        with pytest.raises(RequestError, match="returned the cursor it was sent") as exc_info:
            await pager.get_all()

        assert exc_info.value.operation == "list_ingestion_jobs"
        assert exc_info.value.details == {"cursor": "t1"}
        assert exc_info.value.status_code == 200
        assert pager.state is PagerState.HAS_MORE
        assert pager.request.cursor == "t1"
        assert len(listing.calls) == 2

    @pytest.mark.asyncio
    async def test_items_object_is_a_malformed_page(self):
        body = {"ingestion_jobs": {"job_id": "j1", "status": "running"}, "next": "tok1"}
        listing = ScriptedListing(
            page(["a"], "tok0"),
            LakehouseResponse(success=True, status=200, data=body),
        )
        pager = make_pager(listing)
        await pager.get_next()

        with pytest.raises(RequestError, match="malformed page") as exc_info:
            await pager.get_next()

        assert exc_info.value.status_code == 200
        assert exc_info.value.body == body
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert pager.request.cursor == "tok0"
        assert pager.last_page.items == ["a"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["total_count", "limit"])
    async def test_non_integer_count_is_a_malformed_page(self, field):
        body = {"ingestion_jobs": [{"job_id": "j1"}], field: "many"}
        pager = make_pager(ScriptedListing(LakehouseResponse(success=True, status=200, data=body)))

        with pytest.raises(RequestError) as exc_info:
            await pager.get_next()

        assert exc_info.value.body == body
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert pager.state is PagerState.FRESH
        assert pager.last_page is None


@pytest.mark.pager
class TestPageModels:
    """PageRequest and PageResponse."""

    def test_page_request_is_immutable(self):
        request = PageRequest(base_params={"jobs_per_page": 5})

        with pytest.raises(ValidationError):
            request.cursor = "tok"

        advanced = request.with_cursor("tok")
        assert request.cursor is None
        assert advanced.as_params() == {"jobs_per_page": 5, "start": "tok"}
        assert request.as_params() == {"jobs_per_page": 5}

    def test_as_params_does_not_share_base_params(self):
        request = PageRequest(base_params={"jobs_per_page": 5})

        request.as_params()["jobs_per_page"] = 100

        assert request.base_params == {"jobs_per_page": 5}

    @pytest.mark.parametrize(
        "next_field, expected",
        [
            ("tok1", "tok1"),
            (2, "2"),
            ({"start": "3"}, "3"),
            ({"href": "https://host/lhingestion/api/v1/ingestion/jobs?start=4&jobs_per_page=10"}, "4"),
            ({"href": "https://host/lhingestion/api/v1/ingestion/jobs?jobs_per_page=10"}, None),
            ("", None),
            ("   ", None),
            (None, None),
            ({}, None),
        ],
    )
    def test_extract_cursor(self, next_field, expected):
        assert extract_cursor(next_field, "start") == expected

    def test_page_response_from_result(self):
        result = {
            "ingestion_jobs": [{"job_id": "j1"}, {"job_id": "j2"}],
            "next": {"href": "https://host/jobs?start=2", "start": "2"},
            "total_count": 7,
        }

        response = PageResponse.from_result(result, "ingestion_jobs")

        assert response.items == [{"job_id": "j1"}, {"job_id": "j2"}]
        assert response.next == "2"
        assert response.total_count == 7
        assert response.limit is None

    def test_page_response_null_items(self):
        response = PageResponse.from_result({"ingestion_jobs": None, "next": None}, "ingestion_jobs")

        assert response.items == []
        assert response.next is None

    def test_page_response_from_empty_body(self):
        response = PageResponse.from_result(None, "ingestion_jobs")

        assert response.items == []
        assert response.next is None

    @pytest.mark.parametrize("items", [{"job_id": "j1"}, "j1", 3])
    def test_page_response_rejects_non_array_items(self, items):
        with pytest.raises(ValueError, match="'ingestion_jobs' must be an array"):
            PageResponse.from_result({"ingestion_jobs": items}, "ingestion_jobs")
