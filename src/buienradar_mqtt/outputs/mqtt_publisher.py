"""MQTT publisher draining the message channel."""

import asyncio
import logging
import threading
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

import paho.mqtt.client as mqtt

from ..channel import MessageChannel
from ..config import MQTTConfig
from ..errors import BrokerConnectionError, ConfigurationError, PublishError
from ..schemas import OutboundMessage
from .protocols import MQTTClientProtocol

# scheme -> (transport, tls, default port)
BROKER_SCHEMES: dict[str, tuple[str, bool, int]] = {
    "tcp": ("tcp", False, 1883),
    "mqtt": ("tcp", False, 1883),
    "ssl": ("tcp", True, 8883),
    "tls": ("tcp", True, 8883),
    "mqtts": ("tcp", True, 8883),
    "ws": ("websockets", False, 80),
    "wss": ("websockets", True, 443),
}


@dataclass(frozen=True)
class BrokerAddress:
    """Parsed broker URL."""

    host: str
    port: int
    transport: str = "tcp"
    tls: bool = False
    path: str = "/mqtt"  # websockets only


def parse_broker_url(url: str) -> BrokerAddress:
    """Parse a broker URL such as `tcp://127.0.0.1:1883`.

    A URL without scheme is treated as plain TCP.

    Raises:
        ConfigurationError: If the scheme is unknown or the host is missing.
    """
    if "://" not in url:
        url = f"tcp://{url}"

    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme not in BROKER_SCHEMES:
        raise ConfigurationError(f"unsupported broker scheme {scheme!r} in {url!r}")

    try:
        port = parts.port
    except ValueError as e:
        raise ConfigurationError(f"invalid broker port in {url!r}") from e

    if not parts.hostname:
        raise ConfigurationError(f"no broker host in {url!r}")

    transport, tls, default_port = BROKER_SCHEMES[scheme]
    return BrokerAddress(
        host=parts.hostname,
        port=port or default_port,
        transport=transport,
        tls=tls,
        path=parts.path or "/mqtt",
    )


class MQTTPublisher:
    """Sole writer to the MQTT connection.

    Messages are taken from the channel one at a time and each publish is
    awaited before the next message is accepted.
    """

    def __init__(
        self,
        config: MQTTConfig,
        client: MQTTClientProtocol | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize MQTT publisher.

        Args:
            config: MQTT configuration settings.
            client: Optional MQTT client for testing.
            logger: Logger for publish records, defaults to the module logger.
        """
        if not config.host:
            raise ConfigurationError("`MQTT_HOST` is not set")

        self.config = config
        self.address = parse_broker_url(config.host)
        self.prefix = config.get_prefix()
        self.logger = logger or logging.getLogger(__name__)
        self._client: MQTTClientProtocol | None = client
        self._connected = threading.Event()
        self._connect_error: str | None = None

    @property
    def client(self) -> MQTTClientProtocol:
        """Lazy-initialize MQTT client."""
        if self._client is None:
            client = mqtt.Client(
                callback_api_version=mqtt.CallbackAPIVersion.VERSION2,
                client_id=self.config.client_id,
                protocol=mqtt.MQTTv311,
                transport=self.address.transport,
            )
            if self.address.tls:
                client.tls_set()
            if self.address.transport == "websockets":
                client.ws_set_options(path=self.address.path)
            self._client = client  # type: ignore[assignment]
        assert self._client is not None
        return self._client

    def topic_for(self, message: OutboundMessage) -> str:
        """Full topic of a message: the broker prefix joined with its topic."""
        return f"{self.prefix}/{message.topic}"

    def _on_connect(
        self, client: Any, userdata: Any, flags: Any, reason_code: Any, properties: Any = None
    ) -> None:
        """Callback for CONNACK."""
        if getattr(reason_code, "is_failure", False):
            self._connect_error = str(reason_code)
        else:
            self._connect_error = None
        self._connected.set()

    def _on_disconnect(
        self, client: Any, userdata: Any, flags: Any, reason_code: Any, properties: Any = None
    ) -> None:
        """Callback for disconnects."""
        if getattr(reason_code, "is_failure", False):
            self.logger.warning("Disconnected from MQTT broker: %s", reason_code)

    def connect(self) -> None:
        """Connect to the broker and wait for its acknowledgment.

        Blocks the calling thread.

        Raises:
            BrokerConnectionError: If the broker cannot be reached, refuses
                the connection or does not answer in time.
        """
        client = self.client
        client.on_connect = self._on_connect
        client.on_disconnect = self._on_disconnect

        self.logger.info(
            "Connecting to MQTT broker %s:%d as %r",
            self.address.host,
            self.address.port,
            self.config.client_id,
        )
        try:
            client.connect(
                self.address.host,
                self.address.port,
                keepalive=self.config.keepalive_seconds,
            )
        except OSError as e:
            raise BrokerConnectionError(
                f"could not connect to {self.address.host}:{self.address.port}: {e}"
            ) from e

        client.loop_start()

        if not self._connected.wait(self.config.connect_timeout_seconds):
            client.loop_stop()
            raise BrokerConnectionError(
                f"no answer from {self.address.host}:{self.address.port} "
                f"within {self.config.connect_timeout_seconds} seconds"
            )

        if self._connect_error is not None:
            client.loop_stop()
            raise BrokerConnectionError(f"connection refused: {self._connect_error}")

        self.logger.info("Connected to MQTT broker")

    async def publish(self, message: OutboundMessage) -> None:
        """Publish a message and wait until the client has sent it.

        Raises:
            PublishError: If the client reports a failure.
        """
        topic = self.topic_for(message)

        try:
            info = self.client.publish(
                topic,
                message.payload,
                qos=self.config.qos,
                retain=message.retain,
            )
            if info.rc != mqtt.MQTT_ERR_SUCCESS:
                raise PublishError(topic, mqtt.error_string(info.rc))
            await asyncio.to_thread(info.wait_for_publish)
        except (RuntimeError, ValueError) as e:
            raise PublishError(topic, str(e)) from e

        self.logger.info("Published topic='%s' payload='%s'", topic, message.payload)

    async def run(self, channel: MessageChannel) -> int:
        """Publish messages from the channel until it is closed.

        Returns:
            Number of messages published.
        """
        published = 0
        async for message in channel:
            await self.publish(message)
            published += 1

        self.logger.info("Message channel closed after %d messages", published)
        return published

    def close(self) -> None:
        """Disconnect from the broker and stop the network loop."""
        if self._client is None:
            return

        self._client.disconnect()
        self._client.loop_stop()
        self.logger.info("Disconnected from MQTT broker")
