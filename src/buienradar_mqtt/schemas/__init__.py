"""Buienradar bridge data schemas.

Pydantic models for parsed feed data and outbound MQTT messages.
"""

from .enums import Measurement
from .message import OutboundMessage
from .observation import (
    MISSING_VALUE,
    StationObservation,
    normalize_region,
    normalize_value,
)

__all__ = [
    "MISSING_VALUE",
    "Measurement",
    "OutboundMessage",
    "StationObservation",
    "normalize_region",
    "normalize_value",
]
