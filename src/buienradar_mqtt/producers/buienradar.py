"""buienradar.nl observation producer."""

import asyncio
import logging

from ..channel import MessageChannel
from ..clients.buienradar import BuienradarClient
from ..config import BuienradarConfig, MQTTConfig
from ..schemas import OutboundMessage, StationObservation
from .base import BaseProducer

FETCH_INTERVAL_SECONDS = 300


class BuienradarProducer(BaseProducer):
    """Producer that republishes the observations of one region."""

    def __init__(
        self,
        channel: MessageChannel,
        client: BuienradarClient | None = None,
        mqtt_config: MQTTConfig | None = None,
        buienradar_config: BuienradarConfig | None = None,
        interval_seconds: float = FETCH_INTERVAL_SECONDS,
        shutdown_event: asyncio.Event | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(
            channel,
            interval_seconds,
            shutdown_event,
            logger or logging.getLogger(__name__),
        )
        self.mqtt_config = mqtt_config or MQTTConfig()
        self.buienradar_config = buienradar_config or BuienradarConfig()
        self._client = client

    @property
    def client(self) -> BuienradarClient:
        """Lazy-initialize buienradar client."""
        if self._client is None:
            self._client = BuienradarClient(logger=self.logger)
        return self._client

    @property
    def topic(self) -> str | None:
        return self.mqtt_config.topic

    @property
    def region(self) -> str | None:
        return self.buienradar_config.region

    def is_enabled(self) -> bool:
        if self.topic is None:
            self.logger.warning(
                "Buienradar producer needs `MQTT_TOPIC` set in the environment, disabled."
            )
            return False

        if self.region is None:
            self.logger.warning(
                "Buienradar producer needs `BUIENRADAR_REGION` set in the environment, disabled."
            )
            return False

        return True

    def build_messages(self, observation: StationObservation) -> list[OutboundMessage]:
        """Messages for every available measurement of an observation.

        Payloads are the raw feed values.
        """
        assert self.topic is not None
        return [
            OutboundMessage.for_measurement(self.topic, measurement, value)
            for measurement, value in observation.present_measurements()
        ]

    def select_region(
        self, observations: list[StationObservation]
    ) -> list[StationObservation]:
        """Keep the observations whose normalized region is the target region."""
        return [obs for obs in observations if obs.normalized_region == self.region]

    async def run_once(self) -> int:
        """Fetch the feed and publish the target region's measurements."""
        observations = await self.client.get_observations()
        matching = self.select_region(observations)

        if not matching:
            self.logger.debug(
                "No station in region %r among %d stations", self.region, len(observations)
            )
            return 0

        published = 0
        for observation in matching:
            messages = self.build_messages(observation)
            self.logger.debug(
                "Station %s (%s): %d measurements available",
                observation.station_code,
                observation.station_name,
                len(messages),
            )

            for message in messages:
                await self.publish(message)
                published += 1

        self.logger.info(
            "Buienradar fetch complete: %d stations matched, %d messages published",
            len(matching),
            published,
        )
        return published

    async def close(self) -> None:
        """Clean up resources."""
        if self._client is not None:
            await self._client.close()
