"""Buienradar MQTT bridge - republish buienradar.nl observations to MQTT.

This package polls the buienradar.nl XML feed, selects the stations of one
region and publishes each available measurement to an MQTT topic:

    {MQTT_PREFIX}/{MQTT_TOPIC}/{measurement}

Usage:
    from buienradar_mqtt.producers import BuienradarProducer
    from buienradar_mqtt.outputs import MQTTPublisher
    from buienradar_mqtt.schemas import OutboundMessage, StationObservation
"""

__version__ = "0.1.0"

from .channel import MessageChannel
from .config import Settings, get_settings
from .outputs import MQTTPublisher
from .producers import BuienradarProducer
from .schemas import Measurement, OutboundMessage, StationObservation

__all__ = [
    "BuienradarProducer",
    "MQTTPublisher",
    "Measurement",
    "MessageChannel",
    "OutboundMessage",
    "Settings",
    "StationObservation",
    "get_settings",
]
