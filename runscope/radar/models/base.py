"""Base model shared by every record exchanged with the Radar API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class RadarModel(BaseModel):
    """Record decoded from, or encoded to, the Radar API.

    Unknown fields are ignored and explicit nulls fall back to the field
    default, so a missing value always reads as its type's zero value.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
