"""Configuration model for the Radar API client."""

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://api.runscope.com"


class ClientConfig(BaseModel):
    """Connection settings for the Runscope API."""

    token: str = Field(..., description="Runscope OAuth access token")
    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="Runscope API base URL"
    )
    timeout: float = Field(
        default=30.0, gt=0, description="Total per-request timeout in seconds"
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
