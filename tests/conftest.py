"""Shared test fixtures for all tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "buienradar"

BRIDGE_ENV_VARS = (
    "MQTT_HOST",
    "MQTT_PREFIX",
    "MQTT_TOPIC",
    "MQTT_CLIENT_ID",
    "MQTT_KEEPALIVE_SECONDS",
    "MQTT_CONNECT_TIMEOUT_SECONDS",
    "MQTT_QOS",
    "BUIENRADAR_REGION",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of the configuration."""
    for name in BRIDGE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample feed documents."""
    return FIXTURES_DIR


@pytest.fixture
def sample_region() -> str:
    """Normalized region used by most tests."""
    return "zuid-holland"


@pytest.fixture
def sample_topic() -> str:
    """Base topic used by most tests."""
    return "weather"
