"""Output writers for buienradar measurements."""

from .mqtt_publisher import BrokerAddress, MQTTPublisher, parse_broker_url
from .protocols import MQTTClientProtocol

__all__ = ["BrokerAddress", "MQTTClientProtocol", "MQTTPublisher", "parse_broker_url"]
