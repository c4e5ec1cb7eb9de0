"""Operations on Radar tests: list, fetch, create, update, delete, trigger."""

import logging

from runscope.radar.codec import decode, encode
from runscope.radar.errors import (
    IncompleteListError,
    InvalidArgumentError,
    RunscopeError,
)
from runscope.radar.filters import PAGE_SIZE, build_page_query
from runscope.radar.models.requests import (
    ListTestOptions,
    NewTestRequest,
    UpdateTestRequest,
)
from runscope.radar.models.test import Test
from runscope.radar.models.trigger import TriggerResult
from runscope.radar.resources.base import Resource

logger = logging.getLogger(__name__)


class TestsResource(Resource):
    """Operations on the tests of a bucket."""

    __test__ = False

    async def list_tests(
        self, bucket_key: str, options: ListTestOptions | None = None
    ) -> list[Test]:
        """Return one page of tests for a bucket.

        Without an explicit count the service applies its default page size.
        """
        options = options or ListTestOptions()
        path = self.tests_path(bucket_key) + build_page_query(
            options.count, options.offset
        )
        return await self._get(path, list[Test])

    async def list_all_tests(self, bucket_key: str) -> list[Test]:
        """Return every test in a bucket, one page at a time.

        Raises:
            IncompleteListError: If a page fails; ``items`` holds the tests
                fetched before it and the original error is the cause

        """
        tests: list[Test] = []
        offset = 0

        while True:
            logger.debug(f"Listing tests in {bucket_key} from offset {offset}")
            try:
                page = await self.list_tests(
                    bucket_key, ListTestOptions(count=PAGE_SIZE, offset=offset)
                )
            except RunscopeError as e:
                raise IncompleteListError(tests, e) from e

            tests.extend(page)

            if len(page) < PAGE_SIZE:
                return tests

            offset += PAGE_SIZE

    async def get_test(self, bucket_key: str, test_id: str) -> Test:
        """Return details about a test."""
        return await self._get(self.tests_path(bucket_key, test_id), Test)

    async def new_test(self, bucket_key: str, request: NewTestRequest) -> Test:
        """Create a test in a bucket and return it with its assigned ID."""
        data = encode(request)
        content = await self.transport.post(self.tests_path(bucket_key), data)
        return decode(content, Test)

    async def update_test(
        self, bucket_key: str, test_id: str, request: UpdateTestRequest
    ) -> Test:
        """Update the fields set on ``request``; other fields are preserved."""
        data = encode(request)
        content = await self.transport.put(self.tests_path(bucket_key, test_id), data)
        return decode(content, Test)

    async def import_test(self, bucket_key: str, data: bytes) -> Test:
        """Create a test from a JSON document in the service's native schema."""
        content = await self.transport.post(self.tests_path(bucket_key), data)
        return decode(content, Test)

    async def reimport_test(self, bucket_key: str, test_id: str, data: bytes) -> Test:
        """Replace a test with a JSON document in the service's native schema."""
        content = await self.transport.put(self.tests_path(bucket_key, test_id), data)
        return decode(content, Test)

    async def delete_test(self, bucket_key: str, test_id: str) -> None:
        """Remove a test from a bucket."""
        await self.transport.delete(self.tests_path(bucket_key, test_id))

    async def trigger(self, url: str) -> TriggerResult:
        """Start one or more test runs through a trigger URL.

        Args:
            url: Full trigger URL on the configured API host, e.g.
                ``https://api.runscope.com/radar/:trigger_id/trigger?runscope_environment=:uuid``

        Raises:
            InvalidArgumentError: If ``url`` is not under the configured base URL

        """
        prefix = self.transport.base_url + "/"
        if not url.startswith(prefix):
            raise InvalidArgumentError(
                f"Trigger URL {url} does not start with base URL "
                f"{self.transport.base_url}"
            )

        return await self._get(url[len(prefix) :], TriggerResult)
