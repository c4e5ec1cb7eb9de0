"""Operations on Radar test results."""

import asyncio
import logging
from datetime import datetime

from runscope.radar.filters import build_filter_query
from runscope.radar.models.result import Result
from runscope.radar.resources.base import Resource

logger = logging.getLogger(__name__)

LATEST = "latest"


class ResultsResource(Resource):
    """Read-only access to the results of a test."""

    def results_path(
        self, bucket_key: str, test_id: str, test_run_id: str | None = None
    ) -> str:
        """Path of a test's result collection, or of one result in it."""
        path = f"{self.tests_path(bucket_key, test_id)}/results"
        if test_run_id is not None:
            path = f"{path}/{test_run_id}"
        return path

    async def list_results(self, bucket_key: str, test_id: str) -> list[Result]:
        """Return the service's default page of results for a test."""
        return await self._get(self.results_path(bucket_key, test_id), list[Result])

    async def filter_results(
        self,
        bucket_key: str,
        test_id: str,
        count: int,
        since: datetime | None = None,
        before: datetime | None = None,
    ) -> list[Result]:
        """Return up to ``count`` results started after ``since`` or before ``before``.

        Raises:
            InvalidFilterError: If both bounds are given or count exceeds 50

        """
        query = build_filter_query(count, since, before)
        path = self.results_path(bucket_key, test_id) + query
        return await self._get(path, list[Result])

    async def get_result(
        self, bucket_key: str, test_id: str, test_run_id: str
    ) -> Result:
        """Return the detailed result of one test run."""
        path = self.results_path(bucket_key, test_id, test_run_id)
        return await self._get(path, Result)

    async def get_result_latest(self, bucket_key: str, test_id: str) -> Result:
        """Return the most recent result of a test."""
        return await self.get_result(bucket_key, test_id, LATEST)

    async def wait_for_result(
        self,
        bucket_key: str,
        test_id: str,
        test_run_id: str,
        timeout: float = 1800,
        poll_interval: float = 30,
    ) -> Result:
        """Poll a test run until it passes or fails.

        Args:
            bucket_key: Bucket holding the test
            test_id: Test the run belongs to
            test_run_id: Run identifier, e.g. from a trigger call
            timeout: Maximum wait time in seconds (default: 30 minutes)
            poll_interval: Seconds between polls (default: 30)

        Returns:
            The completed result

        Raises:
            TimeoutError: If the run doesn't complete within timeout

        """
        loop = asyncio.get_running_loop()
        end_time = loop.time() + timeout

        while True:
            result = await self.get_result(bucket_key, test_id, test_run_id)

            if result.is_complete:
                return result

            logger.debug(f"Test run {test_run_id} is {result.result or 'pending'}")
            if loop.time() >= end_time:
                raise TimeoutError(
                    f"Test run {test_run_id} did not complete within {timeout} seconds"
                )

            await asyncio.sleep(poll_interval)
