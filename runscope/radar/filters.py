"""Query-string construction for result filters and test pagination."""

from datetime import datetime, timezone

from runscope.radar.errors import InvalidFilterError

# Maximum page size the service returns; also the offset step when listing
# a whole collection.
PAGE_SIZE = 50
MAX_FILTER_COUNT = 50


def to_unix_seconds(moment: datetime) -> float:
    """Convert a point in time to fractional seconds since the Unix epoch.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.timestamp()


def build_filter_query(
    count: int,
    since: datetime | None = None,
    before: datetime | None = None,
) -> str:
    """Build the query string for filtering test results.

    Args:
        count: Maximum number of results to return (at most 50)
        since: Only return results started after this moment
        before: Only return results started before this moment

    Returns:
        Query string starting with ``?count=``

    Raises:
        InvalidFilterError: If both bounds are given or count exceeds 50

    """
    if since is not None and before is not None:
        raise InvalidFilterError("since and before are exclusive")

    if count > MAX_FILTER_COUNT:
        raise InvalidFilterError(f"count exceeds maximum of {MAX_FILTER_COUNT}")

    query = f"?count={count}"
    if since is not None:
        query += f"&since={to_unix_seconds(since):f}"
    if before is not None:
        query += f"&before={to_unix_seconds(before):f}"
    return query


def build_page_query(count: int, offset: int) -> str:
    """Build the pagination query for listing tests; empty when count is 0."""
    if not count:
        return ""
    return f"?count={count}&offset={offset}"
