"""Rendezvous channel carrying outbound messages from producers to the publisher."""

import asyncio
from collections.abc import AsyncIterator, Awaitable
from typing import TypeVar

from .errors import ChannelClosed
from .schemas import OutboundMessage

T = TypeVar("T")


class MessageChannel:
    """Unbuffered FIFO channel between one producer and one consumer.

    `send` only returns once the consumer has received the message, so a
    slow consumer throttles the producer. After `close` the consumer still
    gets a message that was already handed over, then iteration ends.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[OutboundMessage] = asyncio.Queue(maxsize=1)
        self._closed = asyncio.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def close(self) -> None:
        """Close the channel, waking up a blocked sender or receiver."""
        self._closed.set()

    async def send(self, message: OutboundMessage) -> None:
        """Hand a message to the consumer and wait until it is taken.

        Raises:
            ChannelClosed: If the channel is closed before the consumer
                received the message.
        """
        if self.closed:
            raise ChannelClosed("send on closed channel")

        await self._until_closed(self._queue.put(message))
        await self._until_closed(self._queue.join())

    async def receive(self) -> OutboundMessage:
        """Take the next message.

        Raises:
            ChannelClosed: If the channel is closed and no message is pending.
        """
        try:
            message = await self._until_closed(self._queue.get())
        except ChannelClosed:
            if self._queue.empty():
                raise
            message = self._queue.get_nowait()

        self._queue.task_done()
        return message

    def __aiter__(self) -> AsyncIterator[OutboundMessage]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[OutboundMessage]:
        while True:
            try:
                message = await self.receive()
            except ChannelClosed:
                return
            yield message

    async def _until_closed(self, operation: Awaitable[T]) -> T:
        """Await a queue operation, abandoning it if the channel closes first."""
        task = asyncio.ensure_future(operation)
        closer = asyncio.ensure_future(self._closed.wait())
        try:
            done, _ = await asyncio.wait(
                {task, closer}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            closer.cancel()
            if not task.done():
                task.cancel()

        if task in done:
            return task.result()
        raise ChannelClosed("channel closed")
