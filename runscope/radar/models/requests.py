"""Request payloads and options for test operations.

Only fields the caller sets explicitly are sent. Pydantic records which
fields were set on each instance, and the encoder dumps with
``exclude_unset=True``, so an unset field never reaches the wire while a
field explicitly set to an empty value does.
"""

from pydantic import BaseModel, Field

from runscope.radar.models.test import Step


class NewTestRequest(BaseModel):
    """Parameters for creating a test."""

    name: str = Field(..., description="Test name")
    description: str | None = Field(default=None, description="Test description")


class UpdateTestRequest(BaseModel):
    """Parameters for updating an existing test; all fields optional."""

    name: str | None = None
    description: str | None = None
    default_environment_id: str | None = None
    steps: list[Step] | None = None


class ListTestOptions(BaseModel):
    """Pagination window for listing tests.

    A ``count`` of zero leaves page size to the service and sends no
    pagination parameters.
    """

    count: int = Field(default=0, ge=0)
    offset: int = Field(default=0, ge=0)
