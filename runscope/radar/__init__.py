"""Client library for Runscope Radar tests and results."""

from runscope.radar.client import RadarClient
from runscope.radar.errors import (
    DecodeError,
    EncodeError,
    IncompleteListError,
    InvalidArgumentError,
    InvalidFilterError,
    RunscopeError,
    TransportError,
)
from runscope.radar.filters import PAGE_SIZE
from runscope.radar.models.client_config import ClientConfig

__all__ = [
    "PAGE_SIZE",
    "ClientConfig",
    "DecodeError",
    "EncodeError",
    "IncompleteListError",
    "InvalidArgumentError",
    "InvalidFilterError",
    "RadarClient",
    "RunscopeError",
    "TransportError",
]
