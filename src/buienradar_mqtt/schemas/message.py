"""Outbound message schema passed from producers to the MQTT publisher."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from .enums import Measurement


class OutboundMessage(BaseModel):
    """A single MQTT publication.

    `topic` is relative to the broker prefix, which the publisher prepends.
    """

    model_config = ConfigDict(frozen=True)

    topic: Annotated[str, Field(min_length=1)]
    payload: str
    retain: bool = False

    @classmethod
    def for_measurement(
        cls, base_topic: str, measurement: Measurement, payload: str
    ) -> "OutboundMessage":
        """Build the message for a measurement under a base topic."""
        return cls(topic=f"{base_topic}/{measurement.value}", payload=payload, retain=False)
