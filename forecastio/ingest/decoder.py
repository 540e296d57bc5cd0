"""Decoding of forecast response payloads and headers."""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from forecastio.errors import DecodeError
from forecastio.models.forecast import Forecast

logger = logging.getLogger(__name__)

API_CALLS_HEADER = "X-Forecast-API-Calls"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def decode(raw: bytes | str) -> Forecast:
    """Decode a raw JSON body into a Forecast.

    Raises DecodeError if the body is not JSON, is not a JSON object, or
    carries a recognized field with a value of the wrong type.
    """
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.error("Forecast payload is not valid JSON: %s", e)
        raise DecodeError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        logger.error("Forecast payload is a JSON %s, not an object", type(data).__name__)
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        forecast = Forecast.model_validate(data, strict=True)
    except ValidationError as e:
        logger.error("Forecast payload failed validation: %s", e)
        raise DecodeError(f"Payload does not match forecast schema: {e}") from e

    logger.debug(
        "Decoded forecast for %s,%s: %d minutely, %d hourly, %d daily, %d alerts",
        forecast.latitude, forecast.longitude,
        len(forecast.minutely.data), len(forecast.hourly.data),
        len(forecast.daily.data), len(forecast.alerts),
    )
    return forecast


def encode(forecast: Forecast) -> bytes:
    """Serialize a Forecast back to JSON using the wire field names."""
    return forecast.model_dump_json(by_alias=True).encode()


def parse_api_calls(headers: Mapping[str, str]) -> int:
    """Read the API call counter header. Missing or unparsable values yield 0."""
    value = headers.get(API_CALLS_HEADER)
    if value is None:
        return 0
    try:
        return int(value)
    except ValueError:
        logger.debug("Ignoring unparsable %s header: %r", API_CALLS_HEADER, value)
        return 0
