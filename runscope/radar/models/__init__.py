"""Data models for Radar tests, results, and client configuration."""

from runscope.radar.models.client_config import ClientConfig
from runscope.radar.models.requests import (
    ListTestOptions,
    NewTestRequest,
    UpdateTestRequest,
)
from runscope.radar.models.result import (
    Assertion,
    Request,
    Result,
    Script,
    Variable,
)
from runscope.radar.models.test import (
    Environment,
    LastRun,
    Person,
    Schedule,
    Step,
    Test,
)
from runscope.radar.models.trigger import TestRun, TriggerResult

__all__ = [
    "Assertion",
    "ClientConfig",
    "Environment",
    "LastRun",
    "ListTestOptions",
    "NewTestRequest",
    "Person",
    "Request",
    "Result",
    "Schedule",
    "Script",
    "Step",
    "Test",
    "TestRun",
    "TriggerResult",
    "UpdateTestRequest",
    "Variable",
]
