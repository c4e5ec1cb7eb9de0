"""Models for Radar tests and the records nested inside them."""

from typing import Any

from pydantic import Field

from runscope.radar.models.base import RadarModel


class Person(RadarModel):
    """Account that created or modified a resource."""

    id: str = ""
    name: str = ""
    email: str = ""


class Step(RadarModel):
    """A single step (request, pause, condition, ...) of a test."""

    id: str = ""
    step_type: str = ""
    url: str = ""
    method: str = ""
    note: str = ""
    skipped: bool = False
    headers: dict[str, list[str]] = Field(default_factory=dict)
    body: str = ""
    form: dict[str, list[str]] = Field(default_factory=dict)
    assertions: list[dict[str, Any]] = Field(default_factory=list)
    variables: list[dict[str, Any]] = Field(default_factory=list)
    scripts: list[str] = Field(default_factory=list)
    before_scripts: list[str] = Field(default_factory=list)
    duration: int = 0
    steps: list["Step"] = Field(default_factory=list)


class Environment(RadarModel):
    """Shared or test-specific settings a test runs against."""

    id: str = ""
    name: str = ""
    script: str = ""
    preserve_cookies: bool = False
    test_id: str = ""
    parent_environment_id: str = ""
    initial_variables: dict[str, str] = Field(default_factory=dict)
    regions: list[str] = Field(default_factory=list)
    verify_ssl: bool = False
    retry_on_failure: bool = False
    stop_on_failure: bool = False
    remote_agents: list[dict[str, Any]] = Field(default_factory=list)
    integrations: list[dict[str, Any]] = Field(default_factory=list)
    webhooks: list[str] = Field(default_factory=list)
    emails: dict[str, Any] = Field(default_factory=dict)
    exported_at: float = 0.0
    script_library: list[str] = Field(default_factory=list)
    headers: dict[str, list[str]] = Field(default_factory=dict)
    client_certificate: str = ""


class Schedule(RadarModel):
    """Recurring run of a test in a given environment."""

    id: str = ""
    environment_id: str = ""
    interval: str = ""
    note: str = ""
    exported_at: float = 0.0


class LastRun(RadarModel):
    """Summary of the most recent run of a test."""

    id: str = ""
    uuid: str = ""
    test_uuid: str = ""
    environment_uuid: str = ""
    environment_name: str = ""
    remote_agent_uuid: str = ""
    remote_agent_name: str = ""
    remote_agent_version: str = ""
    status: str = ""
    created_at: float = 0.0
    finished_at: float = 0.0
    error_count: int = 0
    message_success: int = 0
    source: str = ""
    extractor_count: int = 0
    extractor_success: int = 0
    substitution_count: int = 0
    substitution_success: int = 0
    script_count: int = 0
    script_success: int = 0
    assertion_count: int = 0
    assertion_success: int = 0
    bucket_key: str = ""
    region: str = ""
    messages: list[str] = Field(default_factory=list)
    message_count: int = 0
    template_uuids: list[str] = Field(default_factory=list)


class Test(RadarModel):
    """A named collection of steps executed together."""

    __test__ = False

    id: str = ""
    name: str = ""
    description: str = ""
    created_by: Person = Field(default_factory=Person)
    created_at: int = 0
    default_environment_id: str = ""
    trigger_url: str = ""
    last_run: LastRun = Field(default_factory=LastRun)
    steps: list[Step] = Field(default_factory=list)
    environments: list[Environment] = Field(default_factory=list)
    schedules: list[Schedule] = Field(default_factory=list)
