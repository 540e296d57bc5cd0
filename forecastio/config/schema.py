"""Pydantic v2 client configuration schema."""

from pydantic import BaseModel, Field

from forecastio.models.common import Units

FORECAST_BASE_URL = "https://api.forecast.io/forecast"


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = FORECAST_BASE_URL
    timeout: float | None = Field(default=None, gt=0.0)  # None: no client-side timeout
    units: Units = Units.US
    api_key: str = ""
