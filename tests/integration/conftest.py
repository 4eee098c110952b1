"""Integration test fixtures - requires a running MQTT broker."""

import pytest


@pytest.fixture
def mqtt_broker_url() -> str:
    """MQTT broker address for integration tests."""
    import os
    return os.environ.get("MQTT_TEST_HOST", "tcp://localhost:1883")


@pytest.fixture
def test_topic_prefix() -> str:
    """Prefix for test topics to avoid collisions."""
    return "test/buienradar"
