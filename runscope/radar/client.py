"""Entry point tying the transport to the test and result operations."""

import logging

from runscope.radar.models.client_config import ClientConfig
from runscope.radar.models.result import Result
from runscope.radar.resources.results import ResultsResource
from runscope.radar.resources.tests import TestsResource
from runscope.radar.transport import HttpTransport

logger = logging.getLogger(__name__)


class RadarClient:
    """Client for the Runscope Radar API.

    Example:
        client = RadarClient(ClientConfig(token="..."))
        tests = await client.tests.list_all_tests("bucket-key")
        latest = await client.results.get_result_latest("bucket-key", tests[0].id)

    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize client with configuration."""
        self.config = config
        self.transport = HttpTransport(config)
        self.tests = TestsResource(self.transport)
        self.results = ResultsResource(self.transport)

    async def trigger_and_wait(
        self,
        url: str,
        timeout: float = 1800,
        poll_interval: float = 30,
    ) -> list[Result]:
        """Start runs through a trigger URL and wait for each in turn.

        Returns:
            Completed results, in the order the trigger reported the runs

        """
        triggered = await self.tests.trigger(url)
        logger.info(
            f"Trigger started {triggered.runs_started}/{triggered.runs_total} runs"
        )

        results: list[Result] = []
        for run in triggered.runs:
            logger.info(f"Waiting for {run.test_name or run.test_id}: {run.test_run_id}")
            result = await self.results.wait_for_result(
                run.bucket_key,
                run.test_id,
                run.test_run_id,
                timeout=timeout,
                poll_interval=poll_interval,
            )
            results.append(result)
        return results
