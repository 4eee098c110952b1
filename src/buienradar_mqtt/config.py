"""Configuration settings loaded from environment variables."""

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_PREFIX = "/home.arpa"


class MQTTConfig(BaseSettings):
    """MQTT broker configuration."""

    host: str | None = None  # e.g. tcp://127.0.0.1:1883
    prefix: str | None = None  # Falls back to DEFAULT_PREFIX
    topic: str | None = None  # Base topic for measurements, required for the feed
    client_id: str = "mqtt-cron"
    keepalive_seconds: int = 2
    connect_timeout_seconds: float = 10.0
    qos: Annotated[int, Field(ge=0, le=2)] = 0

    model_config = {"env_prefix": "MQTT_"}

    def get_prefix(self) -> str:
        """Return the configured topic prefix or the default one."""
        if self.prefix is None:
            return DEFAULT_PREFIX
        return self.prefix


class BuienradarConfig(BaseSettings):
    """buienradar.nl data source configuration."""

    region: str | None = None  # Lower-cased, spaces as hyphens (e.g. "zuid-holland")

    model_config = {"env_prefix": "BUIENRADAR_"}


class Settings(BaseSettings):
    """Application settings combining all configs."""

    log_level: str = "INFO"
    mqtt: MQTTConfig = Field(default_factory=MQTTConfig)
    buienradar: BuienradarConfig = Field(default_factory=BuienradarConfig)


def get_settings() -> Settings:
    """Load settings from environment."""
    return Settings(mqtt=MQTTConfig(), buienradar=BuienradarConfig())
