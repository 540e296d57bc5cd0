"""Request-side enumerations shared across the client."""

from enum import StrEnum

TIME_NOW = "now"


class Units(StrEnum):
    CA = "ca"
    SI = "si"
    US = "us"
    UK = "uk"
    AUTO = "auto"


class DataBlockType(StrEnum):
    """Top-level blocks of a forecast response, as named by the `exclude` parameter."""

    CURRENTLY = "currently"
    MINUTELY = "minutely"
    HOURLY = "hourly"
    DAILY = "daily"
    ALERTS = "alerts"
    FLAGS = "flags"
