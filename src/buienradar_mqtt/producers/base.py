"""Base producer class feeding the message channel."""

import asyncio
import logging
from abc import ABC, abstractmethod

from ..channel import MessageChannel
from ..errors import ChannelClosed
from ..schemas import OutboundMessage


class BaseProducer(ABC):
    """Base class for all data source producers.

    A producer polls its source every `interval_seconds` and hands each
    resulting message to the channel. The wait between cycles ends early
    when `shutdown_event` is set.
    """

    def __init__(
        self,
        channel: MessageChannel,
        interval_seconds: float,
        shutdown_event: asyncio.Event | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.channel = channel
        self.interval_seconds = interval_seconds
        self.shutdown_event = shutdown_event or asyncio.Event()
        self.logger = logger or logging.getLogger(__name__)

    async def publish(self, message: OutboundMessage) -> None:
        """Send a message to the publisher, waiting until it is accepted."""
        await self.channel.send(message)

    async def wait_for_next_cycle(self) -> bool:
        """Sleep for one interval.

        Returns:
            True if shutdown was requested while waiting.
        """
        try:
            await asyncio.wait_for(
                self.shutdown_event.wait(),
                timeout=self.interval_seconds,
            )
        except asyncio.TimeoutError:
            return False
        return True

    @abstractmethod
    def is_enabled(self) -> bool:
        """Check required configuration, logging what is missing."""

    @abstractmethod
    async def run_once(self) -> int:
        """Fetch data and publish it once, returning the message count."""

    async def run_forever(self) -> None:
        """Run the polling loop until shutdown.

        Errors raised by `run_once` propagate to the caller.
        """
        if not self.is_enabled():
            return

        self.logger.info(
            "Starting %s with %d second interval",
            self.__class__.__name__,
            self.interval_seconds,
        )

        try:
            while not self.shutdown_event.is_set():
                await self.run_once()
                if await self.wait_for_next_cycle():
                    break
        except ChannelClosed:
            self.logger.info("Message channel closed")

        self.logger.info("%s stopped", self.__class__.__name__)

    async def close(self) -> None:
        """Clean up resources."""
