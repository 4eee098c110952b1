"""Unit test fixtures - mocks and sample data."""

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from buienradar_mqtt.config import BuienradarConfig, MQTTConfig


@pytest.fixture
def sample_observation_data() -> dict:
    """Valid observation data matching the StationObservation schema."""
    return {
        "station_code": "6330",
        "station_name": "Meetstation Hoek van Holland",
        "region": "Zuid-Holland",
        "latitude": "51.98",
        "longitude": "4.10",
        "humidity": "77",
        "temperature_ground": "6.4",
        "temperature_10cm": "5.9",
        "wind_speed": "6.21",
        "gust_speed": "9.8",
        "air_pressure": "1012.36",
        "sight_range": "23500",
        "rain": "0.2",
    }


@pytest.fixture
def mqtt_config(sample_topic: str) -> MQTTConfig:
    """MQTT configuration for testing."""
    return MQTTConfig(
        host="tcp://broker.local:1883",
        prefix="/home.arpa",
        topic=sample_topic,
        connect_timeout_seconds=1.0,
    )


@pytest.fixture
def buienradar_config(sample_region: str) -> BuienradarConfig:
    """Buienradar configuration for testing."""
    return BuienradarConfig(region=sample_region)


@pytest.fixture
def mock_mqtt_client() -> MagicMock:
    """Mock paho MQTT client that accepts the connection and every publish."""
    client = MagicMock()

    def connect(host: str, port: int = 1883, keepalive: int = 60) -> int:
        client.on_connect(client, None, {}, SimpleNamespace(is_failure=False), None)
        return 0

    client.connect = MagicMock(side_effect=connect)
    client.publish = MagicMock(return_value=MagicMock(rc=0))
    return client


@pytest.fixture
def zuid_holland_feed(fixtures_dir: Path) -> str:
    """Feed with one Zuid-Holland station reporting only humidity."""
    return (fixtures_dir / "zuid_holland.xml").read_text()


@pytest.fixture
def friesland_feed(fixtures_dir: Path) -> str:
    """Feed with one Friesland station."""
    return (fixtures_dir / "friesland.xml").read_text()


@pytest.fixture
def full_feed(fixtures_dir: Path) -> str:
    """Feed with several stations and partially missing values."""
    return (fixtures_dir / "feed.xml").read_text()
