"""Exceptions raised by the bridge components.

Components never terminate the process themselves. Anything derived from
`BridgeError` except `ChannelClosed` is fatal and is turned into a non-zero
exit status by `buienradar_mqtt.main`.
"""


class BridgeError(Exception):
    """Base class for all bridge errors."""


class ConfigurationError(BridgeError):
    """Required configuration is missing or invalid."""


class BrokerConnectionError(BridgeError):
    """The MQTT broker could not be reached or refused the connection."""


class FeedFetchError(BridgeError):
    """The feed could not be retrieved."""


class FeedParseError(BridgeError):
    """The feed response is not the expected XML document."""


class PublishError(BridgeError):
    """The broker client failed to publish a message."""

    def __init__(self, topic: str, reason: str) -> None:
        super().__init__(f"could not publish to {topic!r}: {reason}")
        self.topic = topic
        self.reason = reason


class ChannelClosed(BridgeError):
    """The message channel was closed."""
