"""Enums for buienradar measurement schemas."""

from enum import Enum


class Measurement(str, Enum):
    """Measurements republished to MQTT, valued by their topic name.

    Declaration order is the order messages are emitted in.
    """

    HUMIDITY = "humidity"
    TEMPERATURE_GROUND = "temperature.ground"
    TEMPERATURE_10CM = "temperature.10cm"
    WIND = "wind"
    GUST = "gust"
    PRESSURE = "pressure"
    RAIN = "rain"
    SIGHT = "sight"
