"""Client binding for the forecast.io weather forecast API."""

from forecastio.config.loader import load_config
from forecastio.config.schema import ClientConfig
from forecastio.errors import DecodeError, ForecastError, TransportError
from forecastio.ingest.decoder import decode, encode, parse_api_calls
from forecastio.ingest.forecast_client import ForecastClient, build_url, get
from forecastio.models.common import TIME_NOW, DataBlockType, Units
from forecastio.models.forecast import Alert, DataBlock, DataPoint, Flags, Forecast

__all__ = [
    "TIME_NOW",
    "Alert",
    "ClientConfig",
    "DataBlock",
    "DataBlockType",
    "DataPoint",
    "DecodeError",
    "Flags",
    "Forecast",
    "ForecastClient",
    "ForecastError",
    "TransportError",
    "Units",
    "build_url",
    "decode",
    "encode",
    "get",
    "load_config",
    "parse_api_calls",
]
