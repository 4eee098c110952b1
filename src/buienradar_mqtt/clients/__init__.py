"""HTTP clients for weather data sources."""

from .buienradar import FEED_URL, BuienradarClient

__all__ = [
    "FEED_URL",
    "BuienradarClient",
]
