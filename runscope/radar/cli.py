"""CLI entry point for the Runscope Radar client."""

import asyncio
import json
import logging
import sys
from collections.abc import Coroutine, Sequence
from datetime import datetime
from pathlib import Path
from typing import Any, TypeVar

import typer
from pydantic import BaseModel, ValidationError

from runscope.radar.client import RadarClient
from runscope.radar.errors import IncompleteListError, RunscopeError
from runscope.radar.models.client_config import DEFAULT_BASE_URL, ClientConfig
from runscope.radar.models.requests import (
    ListTestOptions,
    NewTestRequest,
    UpdateTestRequest,
)
from runscope.radar.test_loader import load_test_document

# Configure logging - force reconfiguration
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,
)
logger = logging.getLogger(__name__)

T = TypeVar("T")

app = typer.Typer(help="Manage Runscope Radar tests and results.")
tests_app = typer.Typer(help="List, create, update and delete tests.")
results_app = typer.Typer(help="Inspect test run results.")
app.add_typer(tests_app, name="tests")
app.add_typer(results_app, name="results")


@app.callback()
def main(
    ctx: typer.Context,
    token: str = typer.Option(
        ..., envvar="RUNSCOPE_ACCESS_TOKEN", help="Runscope access token"
    ),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, envvar="RUNSCOPE_API_URL", help="Runscope API base URL"
    ),
    timeout: float = typer.Option(30.0, help="Per-request timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Configure the API client shared by all commands."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = ClientConfig(token=token, base_url=base_url, timeout=timeout)
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(code=1)

    ctx.obj = RadarClient(config)


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a client coroutine, turning client errors into exit code 1."""
    try:
        return asyncio.run(coro)
    except IncompleteListError as e:
        logger.error(f"Fetched {len(e.items)} records before the failure")
        typer.echo(f"Error: {e.cause}", err=True)
        raise typer.Exit(code=1)
    except (RunscopeError, ValueError, FileNotFoundError, TimeoutError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _echo(value: BaseModel | Sequence[BaseModel]) -> None:
    if isinstance(value, BaseModel):
        output: Any = value.model_dump(mode="json")
    else:
        output = [item.model_dump(mode="json") for item in value]
    typer.echo(json.dumps(output, indent=2))


@tests_app.command("list")
def list_tests(
    ctx: typer.Context,
    bucket_key: str = typer.Argument(..., help="Bucket key"),
    count: int = typer.Option(0, min=0, help="Page size (0: service default)"),
    offset: int = typer.Option(0, min=0, help="Number of tests to skip"),
    all_pages: bool = typer.Option(False, "--all", help="Fetch every page"),
) -> None:
    """List the tests in a bucket."""
    client: RadarClient = ctx.obj
    if all_pages:
        tests = _run(client.tests.list_all_tests(bucket_key))
    else:
        options = ListTestOptions(count=count, offset=offset)
        tests = _run(client.tests.list_tests(bucket_key, options))
    logger.info(f"Found {len(tests)} tests in {bucket_key}")
    _echo(tests)


@tests_app.command("get")
def get_test(
    ctx: typer.Context,
    bucket_key: str = typer.Argument(..., help="Bucket key"),
    test_id: str = typer.Argument(..., help="Test ID"),
) -> None:
    """Show details about a test."""
    client: RadarClient = ctx.obj
    _echo(_run(client.tests.get_test(bucket_key, test_id)))


@tests_app.command("create")
def create_test(
    ctx: typer.Context,
    bucket_key: str = typer.Argument(..., help="Bucket key"),
    name: str = typer.Option(..., help="Test name"),
    description: str | None = typer.Option(None, help="Test description"),
) -> None:
    """Create an empty test."""
    client: RadarClient = ctx.obj
    request = NewTestRequest(name=name)
    if description is not None:
        request.description = description
    _echo(_run(client.tests.new_test(bucket_key, request)))


@tests_app.command("update")
def update_test(
    ctx: typer.Context,
    bucket_key: str = typer.Argument(..., help="Bucket key"),
    test_id: str = typer.Argument(..., help="Test ID"),
    name: str | None = typer.Option(None, help="New test name"),
    description: str | None = typer.Option(None, help="New description"),
    default_environment_id: str | None = typer.Option(
        None, help="New default environment ID"
    ),
) -> None:
    """Update a test; options left out keep their current value."""
    client: RadarClient = ctx.obj
    fields = {
        "name": name,
        "description": description,
        "default_environment_id": default_environment_id,
    }
    request = UpdateTestRequest(
        **{key: value for key, value in fields.items() if value is not None}
    )
    if not request.model_fields_set:
        typer.echo("Error: nothing to update", err=True)
        raise typer.Exit(code=1)
    _echo(_run(client.tests.update_test(bucket_key, test_id, request)))


@tests_app.command("import")
def import_test(
    ctx: typer.Context,
    bucket_key: str = typer.Argument(..., help="Bucket key"),
    test_file: Path = typer.Argument(..., help="YAML or JSON test document"),  # noqa: B008
) -> None:
    """Create a test from an exported test document."""
    client: RadarClient = ctx.obj
    try:
        data = load_test_document(test_file)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _echo(_run(client.tests.import_test(bucket_key, data)))


@tests_app.command("reimport")
def reimport_test(
    ctx: typer.Context,
    bucket_key: str = typer.Argument(..., help="Bucket key"),
    test_id: str = typer.Argument(..., help="Test ID"),
    test_file: Path = typer.Argument(..., help="YAML or JSON test document"),  # noqa: B008
) -> None:
    """Replace a test with an exported test document."""
    client: RadarClient = ctx.obj
    try:
        data = load_test_document(test_file)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    _echo(_run(client.tests.reimport_test(bucket_key, test_id, data)))


@tests_app.command("delete")
def delete_test(
    ctx: typer.Context,
    bucket_key: str = typer.Argument(..., help="Bucket key"),
    test_id: str = typer.Argument(..., help="Test ID"),
) -> None:
    """Delete a test."""
    client: RadarClient = ctx.obj
    _run(client.tests.delete_test(bucket_key, test_id))
    logger.info(f"Deleted test {test_id} from {bucket_key}")


@results_app.command("list")
def list_results(
    ctx: typer.Context,
    bucket_key: str = typer.Argument(..., help="Bucket key"),
    test_id: str = typer.Argument(..., help="Test ID"),
    count: int | None = typer.Option(None, help="Maximum results (at most 50)"),
    since: datetime | None = typer.Option(None, help="Only runs after (UTC)"),  # noqa: B008
    before: datetime | None = typer.Option(None, help="Only runs before (UTC)"),  # noqa: B008
) -> None:
    """List results of a test, optionally filtered."""
    client: RadarClient = ctx.obj
    if count is None and since is None and before is None:
        results = _run(client.results.list_results(bucket_key, test_id))
    else:
        results = _run(
            client.results.filter_results(
                bucket_key, test_id, count if count is not None else 10, since, before
            )
        )
    _echo(results)


@results_app.command("get")
def get_result(
    ctx: typer.Context,
    bucket_key: str = typer.Argument(..., help="Bucket key"),
    test_id: str = typer.Argument(..., help="Test ID"),
    test_run_id: str = typer.Argument(..., help="Test run ID"),
) -> None:
    """Show the detailed result of a test run."""
    client: RadarClient = ctx.obj
    _echo(_run(client.results.get_result(bucket_key, test_id, test_run_id)))


@results_app.command("latest")
def latest_result(
    ctx: typer.Context,
    bucket_key: str = typer.Argument(..., help="Bucket key"),
    test_id: str = typer.Argument(..., help="Test ID"),
) -> None:
    """Show the most recent result of a test."""
    client: RadarClient = ctx.obj
    _echo(_run(client.results.get_result_latest(bucket_key, test_id)))


@results_app.command("wait")
def wait_result(
    ctx: typer.Context,
    bucket_key: str = typer.Argument(..., help="Bucket key"),
    test_id: str = typer.Argument(..., help="Test ID"),
    test_run_id: str = typer.Argument(..., help="Test run ID"),
    timeout: float = typer.Option(1800, help="Maximum wait in seconds"),
    poll_interval: float = typer.Option(30, help="Seconds between polls"),
) -> None:
    """Wait for a test run to finish; exit 1 if it failed."""
    client: RadarClient = ctx.obj
    result = _run(
        client.results.wait_for_result(
            bucket_key, test_id, test_run_id, timeout, poll_interval
        )
    )
    _echo(result)
    if not result.passed:
        raise typer.Exit(code=1)


@app.command()
def trigger(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Trigger URL"),
    wait: bool = typer.Option(False, help="Wait for the started runs to finish"),
    timeout: float = typer.Option(1800, help="Maximum wait per run in seconds"),
    poll_interval: float = typer.Option(30, help="Seconds between polls"),
) -> None:
    """Start test runs through a trigger URL."""
    client: RadarClient = ctx.obj
    if not wait:
        _echo(_run(client.tests.trigger(url)))
        return

    results = _run(client.trigger_and_wait(url, timeout, poll_interval))
    _echo(results)

    failed = [r for r in results if not r.passed]
    if failed:
        logger.error(f"Test runs failed: {len(failed)}/{len(results)}")
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
