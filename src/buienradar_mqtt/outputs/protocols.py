"""Protocols for the MQTT client to allow mocking."""

from typing import Any, Protocol


class MQTTMessageInfoProtocol(Protocol):
    """Handle returned by a publish call."""

    rc: int

    def wait_for_publish(self, timeout: float | None = None) -> None:
        """Block until the message is sent."""
        ...


class MQTTClientProtocol(Protocol):
    """Subset of `paho.mqtt.client.Client` used by the publisher."""

    on_connect: Any
    on_disconnect: Any

    def connect(self, host: str, port: int = 1883, keepalive: int = 60) -> Any:
        """Connect to a broker."""
        ...

    def loop_start(self) -> Any:
        """Start the network loop thread."""
        ...

    def loop_stop(self) -> Any:
        """Stop the network loop thread."""
        ...

    def publish(
        self,
        topic: str,
        payload: str | bytes | None = None,
        qos: int = 0,
        retain: bool = False,
    ) -> MQTTMessageInfoProtocol:
        """Publish a message."""
        ...

    def disconnect(self) -> Any:
        """Disconnect from the broker."""
        ...
