"""Models for test run results."""

from typing import Any

from pydantic import Field

from runscope.radar.models.base import RadarModel

COMPLETE_RESULTS = frozenset({"pass", "fail"})


class Assertion(RadarModel):
    """Outcome of one assertion in a request."""

    source: str = ""
    property: str = ""
    comparison: str = ""
    value: Any = None
    target_value: Any = None
    result: str = ""
    error: str = ""


class Script(RadarModel):
    """Outcome of one script in a request."""

    result: str = ""
    output: str = ""
    error: str = ""


class Variable(RadarModel):
    """Outcome of one variable extraction in a request."""

    name: str = ""
    property: str = ""
    source: str = ""
    value: Any = None
    result: str = ""
    error: str = ""


class Request(RadarModel):
    """Outcome of one HTTP request made during a test run."""

    result: str = ""
    url: str = ""
    method: str = ""
    assertions_defined: int = 0
    assertions_failed: int = 0
    assertions_passed: int = 0
    scripts_defined: int = 0
    scripts_failed: int = 0
    scripts_passed: int = 0
    variables_defined: int = 0
    variables_failed: int = 0
    variables_passed: int = 0
    assertions: list[Assertion] = Field(default_factory=list)
    scripts: list[Script] = Field(default_factory=list)
    variables: list[Variable] = Field(default_factory=list)


class Result(RadarModel):
    """Outcome of a single test run."""

    assertions_defined: int = 0
    assertions_failed: int = 0
    assertions_passed: int = 0
    bucket_key: str = ""
    finished_at: float = 0.0
    region: str = ""
    requests_executed: int = 0
    result: str = ""
    scripts_defined: int = 0
    scripts_failed: int = 0
    scripts_passed: int = 0
    started_at: float = 0.0
    test_run_id: str = ""
    test_run_url: str = ""
    test_id: str = ""
    variables_defined: int = 0
    variables_failed: int = 0
    variables_passed: int = 0
    environment_id: str = ""
    environment_name: str = ""
    requests: list[Request] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """Whether the run has finished with a pass or fail verdict."""
        return self.result in COMPLETE_RESULTS

    @property
    def passed(self) -> bool:
        """Whether the run finished with a pass verdict."""
        return self.result == "pass"
