"""Unit tests for environment configuration."""

import pytest
from pydantic import ValidationError

from buienradar_mqtt.config import (
    DEFAULT_PREFIX,
    BuienradarConfig,
    MQTTConfig,
    Settings,
    get_settings,
)


class TestMQTTConfig:
    def test_defaults(self):
        config = MQTTConfig()

        assert config.host is None
        assert config.topic is None
        assert config.client_id == "mqtt-cron"
        assert config.keepalive_seconds == 2
        assert config.qos == 0

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        """Test MQTT_* variables are read."""
        monkeypatch.setenv("MQTT_HOST", "tcp://127.0.0.1:1883")
        monkeypatch.setenv("MQTT_PREFIX", "home")
        monkeypatch.setenv("MQTT_TOPIC", "weather")

        config = MQTTConfig()

        assert config.host == "tcp://127.0.0.1:1883"
        assert config.get_prefix() == "home"
        assert config.topic == "weather"

    def test_default_prefix(self):
        assert MQTTConfig().get_prefix() == DEFAULT_PREFIX == "/home.arpa"

    def test_empty_prefix_kept(self, monkeypatch: pytest.MonkeyPatch):
        """Test an explicitly empty prefix is not replaced by the default."""
        monkeypatch.setenv("MQTT_PREFIX", "")
        assert MQTTConfig().get_prefix() == ""

    def test_invalid_number(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MQTT_KEEPALIVE_SECONDS", "often")
        with pytest.raises(ValidationError):
            MQTTConfig()


class TestBuienradarConfig:
    def test_region_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BUIENRADAR_REGION", "zuid-holland")
        assert BuienradarConfig().region == "zuid-holland"

    def test_region_unset(self):
        assert BuienradarConfig().region is None


class TestGetSettings:
    def test_reads_current_environment(self, monkeypatch: pytest.MonkeyPatch):
        """Test settings reflect the environment at call time."""
        monkeypatch.setenv("MQTT_HOST", "tcp://broker.local")
        monkeypatch.setenv("BUIENRADAR_REGION", "utrecht")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings.mqtt.host == "tcp://broker.local"
        assert settings.buienradar.region == "utrecht"
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("qos", ["-1", "3"])
    def test_qos_out_of_range(self, monkeypatch: pytest.MonkeyPatch, qos: str):
        """Test a QoS level the broker cannot accept is rejected at load."""
        monkeypatch.setenv("MQTT_QOS", qos)
        with pytest.raises(ValidationError):
            get_settings()

    def test_nested_defaults_built_per_instance(self, monkeypatch: pytest.MonkeyPatch):
        """Test Settings() reads MQTT_* and BUIENRADAR_* when constructed."""
        monkeypatch.setenv("MQTT_TOPIC", "weather")
        monkeypatch.setenv("BUIENRADAR_REGION", "friesland")

        settings = Settings()

        assert settings.mqtt.topic == "weather"
        assert settings.buienradar.region == "friesland"
