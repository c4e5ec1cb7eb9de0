"""Tests for test resource operations."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from aioresponses import aioresponses
from yarl import URL

from runscope.radar.errors import (
    IncompleteListError,
    InvalidArgumentError,
    TransportError,
)
from runscope.radar.filters import PAGE_SIZE
from runscope.radar.models.client_config import ClientConfig
from runscope.radar.models.requests import (
    ListTestOptions,
    NewTestRequest,
    UpdateTestRequest,
)
from runscope.radar.models.test import Test
from runscope.radar.resources.tests import TestsResource
from runscope.radar.transport import HttpTransport

BASE_URL = "https://api.runscope.com"
TESTS_URL = f"{BASE_URL}/buckets/bk/tests"


@pytest.fixture
def tests_resource() -> TestsResource:
    """Create tests resource on the default API host."""
    return TestsResource(HttpTransport(ClientConfig(token="rs-token")))


def make_tests(count: int, start: int = 0) -> list[Test]:
    """Build a page of tests with sequential IDs."""
    return [Test(id=f"t{i}", name=f"test {i}") for i in range(start, start + count)]


def page_payload(count: int, start: int = 0) -> dict[str, object]:
    """Build a list response envelope with sequential test IDs."""
    return {"data": [{"id": f"t{i}"} for i in range(start, start + count)]}


async def test_list_tests_without_options(tests_resource: TestsResource) -> None:
    """list_tests omits pagination parameters by default."""
    with aioresponses() as m:
        m.get(TESTS_URL, payload=page_payload(3))

        tests = await tests_resource.list_tests("bk")

    assert [t.id for t in tests] == ["t0", "t1", "t2"]


async def test_list_tests_with_window(tests_resource: TestsResource) -> None:
    """list_tests sends count and offset when a count is requested."""
    with aioresponses() as m:
        m.get(f"{TESTS_URL}?count=10&offset=20", payload=page_payload(2, start=20))

        tests = await tests_resource.list_tests(
            "bk", ListTestOptions(count=10, offset=20)
        )

    assert [t.id for t in tests] == ["t20", "t21"]


async def test_list_tests_empty(tests_resource: TestsResource) -> None:
    """list_tests returns an empty list for an empty bucket."""
    with aioresponses() as m:
        m.get(TESTS_URL, payload={"data": []})

        assert await tests_resource.list_tests("bk") == []


async def test_list_tests_error(tests_resource: TestsResource) -> None:
    """list_tests propagates transport errors."""
    with aioresponses() as m:
        m.get(TESTS_URL, status=401, body="Unauthorized")

        with pytest.raises(TransportError, match="401"):
            await tests_resource.list_tests("bk")


async def test_list_all_tests_multiple_pages(tests_resource: TestsResource) -> None:
    """list_all_tests pages until a short page and advances offset by 50."""
    pages = [make_tests(50), make_tests(50, start=50), make_tests(23, start=100)]

    with patch.object(
        tests_resource, "list_tests", AsyncMock(side_effect=pages)
    ) as mock_list:
        tests = await tests_resource.list_all_tests("bk")

    assert len(tests) == 123
    assert [t.id for t in tests] == [f"t{i}" for i in range(123)]
    assert mock_list.call_count == 3
    offsets = [call.args[1].offset for call in mock_list.call_args_list]
    counts = {call.args[1].count for call in mock_list.call_args_list}
    assert offsets == [0, 50, 100]
    assert counts == {PAGE_SIZE}


async def test_list_all_tests_single_short_page(tests_resource: TestsResource) -> None:
    """list_all_tests stops after a first page shorter than the page size."""
    with patch.object(
        tests_resource, "list_tests", AsyncMock(return_value=make_tests(10))
    ) as mock_list:
        tests = await tests_resource.list_all_tests("bk")

    assert len(tests) == 10
    mock_list.assert_called_once_with("bk", ListTestOptions(count=50, offset=0))


async def test_list_all_tests_exact_page_requests_again(
    tests_resource: TestsResource,
) -> None:
    """list_all_tests requests another page after a full one."""
    with patch.object(
        tests_resource, "list_tests", AsyncMock(side_effect=[make_tests(50), []])
    ) as mock_list:
        tests = await tests_resource.list_all_tests("bk")

    assert len(tests) == 50
    assert mock_list.call_count == 2


async def test_list_all_tests_partial_failure(tests_resource: TestsResource) -> None:
    """list_all_tests keeps the fetched prefix when a later page fails."""
    error = TransportError("GET failed: 500 boom", status=500, body="boom")

    with patch.object(
        tests_resource, "list_tests", AsyncMock(side_effect=[make_tests(50), error])
    ):
        with pytest.raises(IncompleteListError) as exc_info:
            await tests_resource.list_all_tests("bk")

    assert len(exc_info.value.items) == 50
    assert exc_info.value.cause is error
    assert exc_info.value.__cause__ is error


async def test_list_all_tests_first_page_failure(
    tests_resource: TestsResource,
) -> None:
    """list_all_tests reports an empty prefix when the first page fails."""
    with aioresponses() as m:
        m.get(f"{TESTS_URL}?count=50&offset=0", status=503, body="Unavailable")

        with pytest.raises(IncompleteListError) as exc_info:
            await tests_resource.list_all_tests("bk")

    assert exc_info.value.items == []
    assert isinstance(exc_info.value.cause, TransportError)


async def test_list_all_tests_over_http(tests_resource: TestsResource) -> None:
    """list_all_tests issues windowed requests against the API."""
    with aioresponses() as m:
        m.get(f"{TESTS_URL}?count=50&offset=0", payload=page_payload(50))
        m.get(f"{TESTS_URL}?count=50&offset=50", payload=page_payload(3, start=50))

        tests = await tests_resource.list_all_tests("bk")

    assert len(tests) == 53
    assert tests[-1].id == "t52"


async def test_get_test(tests_resource: TestsResource) -> None:
    """get_test decodes the test at the resource path."""
    with aioresponses() as m:
        m.get(
            f"{TESTS_URL}/t1",
            payload={
                "data": {
                    "id": "t1",
                    "name": "smoke test",
                    "created_by": {"id": "u1", "name": "Ada"},
                    "trigger_url": f"{BASE_URL}/radar/trig/trigger",
                    "environments": [{"id": "e1", "name": "prod"}],
                    "schedules": [{"id": "s1", "interval": "1h"}],
                    "last_run": {"status": "completed", "substitution_count": 2},
                }
            },
        )

        test = await tests_resource.get_test("bk", "t1")

    assert test.name == "smoke test"
    assert test.created_by.name == "Ada"
    assert test.environments[0].name == "prod"
    assert test.schedules[0].interval == "1h"
    assert test.last_run.substitution_count == 2


async def test_new_test(tests_resource: TestsResource) -> None:
    """new_test posts only the set fields and returns the created test."""
    with aioresponses() as m:
        m.post(TESTS_URL, status=201, payload={"data": {"id": "new1", "name": "n"}})

        test = await tests_resource.new_test("bk", NewTestRequest(name="n"))

        call = m.requests[("POST", URL(TESTS_URL))][0]

    assert test.id == "new1"
    assert json.loads(call.kwargs["data"]) == {"name": "n"}


async def test_update_test(tests_resource: TestsResource) -> None:
    """update_test puts only the fields the caller set."""
    with aioresponses() as m:
        m.put(f"{TESTS_URL}/t1", payload={"data": {"id": "t1", "name": "renamed"}})

        test = await tests_resource.update_test(
            "bk", "t1", UpdateTestRequest(name="renamed")
        )

        call = m.requests[("PUT", URL(f"{TESTS_URL}/t1"))][0]

    assert test.name == "renamed"
    assert json.loads(call.kwargs["data"]) == {"name": "renamed"}


async def test_import_test_sends_raw_body(tests_resource: TestsResource) -> None:
    """import_test posts the caller's document verbatim."""
    document = b'{"name": "imported", "steps": [{"step_type": "pause"}]}'
    with aioresponses() as m:
        m.post(TESTS_URL, status=201, payload={"data": {"id": "i1"}})

        test = await tests_resource.import_test("bk", document)

        call = m.requests[("POST", URL(TESTS_URL))][0]

    assert test.id == "i1"
    assert call.kwargs["data"] == document


async def test_reimport_test_sends_raw_body(tests_resource: TestsResource) -> None:
    """reimport_test puts the caller's document verbatim."""
    document = b'{"name": "reimported"}'
    with aioresponses() as m:
        m.put(f"{TESTS_URL}/t1", payload={"data": {"id": "t1"}})

        await tests_resource.reimport_test("bk", "t1", document)

        call = m.requests[("PUT", URL(f"{TESTS_URL}/t1"))][0]

    assert call.kwargs["data"] == document


async def test_delete_test(tests_resource: TestsResource) -> None:
    """delete_test issues a DELETE to the test path."""
    with aioresponses() as m:
        m.delete(f"{TESTS_URL}/t1", status=204)

        await tests_resource.delete_test("bk", "t1")

        assert ("DELETE", URL(f"{TESTS_URL}/t1")) in m.requests


async def test_delete_test_not_found(tests_resource: TestsResource) -> None:
    """delete_test raises TransportError when the test doesn't exist."""
    with aioresponses() as m:
        m.delete(f"{TESTS_URL}/t1", status=404, body="Not Found")

        with pytest.raises(TransportError) as exc_info:
            await tests_resource.delete_test("bk", "t1")

    assert exc_info.value.status == 404


async def test_trigger(tests_resource: TestsResource) -> None:
    """trigger requests the trigger path and decodes the started runs."""
    url = f"{BASE_URL}/radar/trig1/trigger?runscope_environment=env1"
    with aioresponses() as m:
        m.get(
            url,
            payload={
                "data": {
                    "runs": [
                        {
                            "bucket_key": "bk",
                            "test_id": "t1",
                            "test_run_id": "run1",
                            "status": "init",
                            "variables": {"base_url": "https://example.com"},
                        }
                    ],
                    "runs_started": 1,
                    "runs_total": 1,
                    "runs_failed": 0,
                }
            },
        )

        result = await tests_resource.trigger(url)

    assert result.runs_started == 1
    assert result.runs[0].test_run_id == "run1"
    assert result.runs[0].variables == {"base_url": "https://example.com"}


async def test_trigger_other_host(tests_resource: TestsResource) -> None:
    """trigger rejects URLs outside the configured base URL."""
    with aioresponses() as m:
        with pytest.raises(InvalidArgumentError, match="does not start with"):
            await tests_resource.trigger("https://evil.example.com/radar/x/trigger")

        assert m.requests == {}


async def test_trigger_prefix_lookalike_host(tests_resource: TestsResource) -> None:
    """trigger doesn't accept hosts that merely extend the base URL."""
    with pytest.raises(InvalidArgumentError):
        await tests_resource.trigger("https://api.runscope.com.evil/radar/x/trigger")
