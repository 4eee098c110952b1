"""Producers turning weather data sources into MQTT messages."""

from .base import BaseProducer
from .buienradar import FETCH_INTERVAL_SECONDS, BuienradarProducer

__all__ = [
    "BaseProducer",
    "BuienradarProducer",
    "FETCH_INTERVAL_SECONDS",
]
