"""Models returned when starting runs through a trigger URL."""

from pydantic import Field

from runscope.radar.models.base import RadarModel


class TestRun(RadarModel):
    """One run started by a trigger call."""

    __test__ = False

    bucket_key: str = ""
    environment_id: str = ""
    environment_name: str = ""
    region: str = ""
    status: str = ""
    test_id: str = ""
    test_name: str = ""
    test_run_id: str = ""
    test_run_url: str = ""
    test_url: str = ""
    url: str = ""
    variables: dict[str, str] = Field(default_factory=dict)


class TriggerResult(RadarModel):
    """Envelope describing the runs a trigger call started."""

    runs: list[TestRun] = Field(default_factory=list)
    runs_failed: int = 0
    runs_started: int = 0
    runs_total: int = 0
