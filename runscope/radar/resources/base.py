"""Shared plumbing for Radar resource operations."""

from typing import TypeVar

from runscope.radar.codec import decode
from runscope.radar.transport import HttpTransport

T = TypeVar("T")


class Resource:
    """Base for a group of operations on one kind of Radar resource."""

    def __init__(self, transport: HttpTransport) -> None:
        """Initialize resource with the shared transport."""
        self.transport = transport

    @staticmethod
    def tests_path(bucket_key: str, test_id: str | None = None) -> str:
        """Path of a bucket's test collection, or of one test in it."""
        path = f"buckets/{bucket_key}/tests"
        if test_id is not None:
            path = f"{path}/{test_id}"
        return path

    async def _get(self, path: str, target: type[T]) -> T:
        content = await self.transport.get(path)
        return decode(content, target)
