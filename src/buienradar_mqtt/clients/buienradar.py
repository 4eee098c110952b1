"""buienradar.nl XML feed HTTP client."""

import logging
import xml.etree.ElementTree as ET

import httpx

from ..errors import FeedFetchError, FeedParseError
from ..schemas import StationObservation

FEED_URL = "https://data.buienradar.nl/1.0/feed/xml"
REQUEST_TIMEOUT_SECONDS = 30.0

ROOT_TAG = "buienradarnl"
STATIONS_PATH = "weergegevens/actueel_weer/weerstations/weerstation"

# Feed element name for each StationObservation field
FIELD_ELEMENTS: dict[str, str] = {
    "station_code": "stationcode",
    "latitude": "lat",
    "longitude": "lon",
    "humidity": "luchtvochtigheid",
    "temperature_ground": "temperatuurGC",
    "temperature_10cm": "temperatuur10cm",
    "wind_speed": "windsnelheidMS",
    "gust_speed": "windstotenMS",
    "air_pressure": "luchtdruk",
    "sight_range": "zichtmeters",
    "rain": "regenMMPU",
}


class BuienradarClient:
    """HTTP client for fetching current observations from buienradar.nl."""

    def __init__(
        self,
        feed_url: str = FEED_URL,
        http_client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.feed_url = feed_url
        self._http_client = http_client
        self.logger = logger or logging.getLogger(__name__)

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=REQUEST_TIMEOUT_SECONDS,
                follow_redirects=True,
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def fetch_feed(self) -> bytes:
        """Download the raw feed document.

        Raises:
            FeedFetchError: On transport errors, timeouts or an error status.
        """
        try:
            response = await self.http_client.get(self.feed_url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise FeedFetchError(f"could not fetch {self.feed_url}: {e}") from e

        return response.content

    async def get_observations(self) -> list[StationObservation]:
        """Fetch the feed and return the observations of every station."""
        content = await self.fetch_feed()
        observations = self._parse_feed(content)
        self.logger.debug("Fetched %d station observations", len(observations))
        return observations

    def _parse_feed(self, content: bytes | str) -> list[StationObservation]:
        """Parse the feed document into station observations, in feed order.

        Structure:
        <buienradarnl><weergegevens><actueel_weer><weerstations>
          <weerstation id="6260">
            <stationcode>6260</stationcode>
            <stationnaam regio="Utrecht">Meetstation De Bilt</stationnaam>
            ...
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise FeedParseError(f"malformed feed document: {e}") from e

        if root.tag != ROOT_TAG:
            raise FeedParseError(f"unexpected root element <{root.tag}>")

        return [self._parse_station(element) for element in root.findall(STATIONS_PATH)]

    def _parse_station(self, element: ET.Element) -> StationObservation:
        """Parse a single <weerstation> element."""
        values = {
            field: element.findtext(tag, default="")
            for field, tag in FIELD_ELEMENTS.items()
        }

        name = element.find("stationnaam")
        if name is not None:
            values["station_name"] = name.text or ""
            values["region"] = name.get("regio", "")

        return StationObservation(**values)
