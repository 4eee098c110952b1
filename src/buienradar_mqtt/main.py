"""Main entry point for the buienradar to MQTT bridge."""

import asyncio
import logging
import signal
import sys
from typing import NoReturn

from pydantic import ValidationError

from .channel import MessageChannel
from .config import DEFAULT_PREFIX, Settings, get_settings
from .errors import BridgeError
from .outputs import MQTTPublisher
from .producers import BaseProducer, BuienradarProducer

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    # Reduce noise from httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def handle_shutdown(signum: int, shutdown_event: asyncio.Event) -> None:
    """Handle shutdown signals gracefully."""
    sig_name = signal.Signals(signum).name
    logger.info("Received %s, initiating shutdown...", sig_name)
    shutdown_event.set()


async def close_on_shutdown(channel: MessageChannel, shutdown_event: asyncio.Event) -> None:
    """Close the channel once shutdown is requested."""
    await shutdown_event.wait()
    channel.close()


async def run_bridge(
    publisher: MQTTPublisher,
    producer: BaseProducer,
    shutdown_event: asyncio.Event,
) -> int:
    """Connect, then run the producer and the publisher until shutdown.

    A disabled producer leaves the publisher idle. An exception from either
    loop cancels the other one and propagates.

    Returns:
        Number of messages published.
    """
    await asyncio.to_thread(publisher.connect)

    channel = producer.channel
    producer_task = asyncio.create_task(producer.run_forever(), name="producer")
    publisher_task = asyncio.create_task(publisher.run(channel), name="publisher")
    closer_task = asyncio.create_task(
        close_on_shutdown(channel, shutdown_event), name="closer"
    )
    tasks = (producer_task, publisher_task, closer_task)

    try:
        pending: set[asyncio.Task] = {producer_task, publisher_task}
        while publisher_task in pending:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            for task in done:
                # Re-raises fatal errors
                task.result()

        return publisher_task.result()

    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

        await producer.close()
        publisher.close()


async def run(settings: Settings) -> int:
    """Build the bridge from settings and run it until shutdown."""
    shutdown_event = asyncio.Event()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, lambda s=sig: handle_shutdown(s, shutdown_event))

    publisher = MQTTPublisher(settings.mqtt)
    producer = BuienradarProducer(
        MessageChannel(),
        mqtt_config=settings.mqtt,
        buienradar_config=settings.buienradar,
        shutdown_event=shutdown_event,
    )

    return await run_bridge(publisher, producer, shutdown_event)


def main() -> NoReturn:
    """Main entry point."""
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.critical("Invalid configuration: %s", e)
        sys.exit(1)

    setup_logging(settings.log_level)

    if not settings.mqtt.host:
        logger.critical(
            "buienradar-mqtt needs `MQTT_HOST` set in the environment "
            "to a value such as `tcp://127.0.0.1:1883`."
        )
        sys.exit(1)

    if settings.mqtt.prefix is None:
        logger.info("`MQTT_PREFIX` undefined using default `%s`-prefix.", DEFAULT_PREFIX)
    else:
        logger.info("`MQTT_PREFIX` set to `%s`.", settings.mqtt.prefix)

    try:
        published = asyncio.run(run(settings))
    except BridgeError as e:
        logger.critical("Fatal error: %s", e, exc_info=True)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    else:
        logger.info("Published %d messages", published)

    logger.info("Shutdown complete")
    sys.exit(0)


if __name__ == "__main__":
    main()
