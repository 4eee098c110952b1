"""Observation schema for buienradar.nl station data."""

from pydantic import BaseModel

from .enums import Measurement

# buienradar.nl reports unavailable values as a single dash
MISSING_VALUE = "-"


def normalize_value(value: str) -> str:
    """Return an empty string for the missing value marker, else the value."""
    if value == MISSING_VALUE:
        return ""
    return value


def normalize_region(region: str) -> str:
    """Lower-case a region name and replace spaces with hyphens."""
    return region.lower().replace(" ", "-")


class StationObservation(BaseModel):
    """Current readings of one buienradar.nl weather station.

    Values are kept as the text found in the feed. Elements missing from the
    feed are empty strings.
    """

    station_code: str = ""
    station_name: str = ""
    region: str = ""
    latitude: str = ""
    longitude: str = ""

    humidity: str = ""
    temperature_ground: str = ""
    temperature_10cm: str = ""
    wind_speed: str = ""
    gust_speed: str = ""
    air_pressure: str = ""
    sight_range: str = ""
    rain: str = ""

    @property
    def normalized_region(self) -> str:
        return normalize_region(self.region)

    def measurement_values(self) -> list[tuple[Measurement, str]]:
        """Raw value of every tracked measurement, in emission order."""
        return [
            (Measurement.HUMIDITY, self.humidity),
            (Measurement.TEMPERATURE_GROUND, self.temperature_ground),
            (Measurement.TEMPERATURE_10CM, self.temperature_10cm),
            (Measurement.WIND, self.wind_speed),
            (Measurement.GUST, self.gust_speed),
            (Measurement.PRESSURE, self.air_pressure),
            (Measurement.RAIN, self.rain),
            (Measurement.SIGHT, self.sight_range),
        ]

    def present_measurements(self) -> list[tuple[Measurement, str]]:
        """Measurements with an available value, paired with the raw value."""
        return [
            (measurement, value)
            for measurement, value in self.measurement_values()
            if normalize_value(value)
        ]
