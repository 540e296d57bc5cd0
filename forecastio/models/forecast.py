"""Forecast response models.

Every field maps to exactly one wire name. Fields the service omits, or
sends as null, fall back to the zero value of their type; wire fields
not listed here are dropped. Null list items become zero items.

The models are built from wire payloads, so aliased fields are only
populated through their wire name: `DataPoint(wind_speed=5.0)` is an
unknown key and leaves `wind_speed` at 0.0. Use `model_validate` with
wire names, or `model_copy(update=...)` with Python names.
"""

from typing import Any, get_args

from pydantic import BaseModel, Field, model_validator


class WireModel(BaseModel):
    model_config = {"extra": "ignore", "frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _zero_nulls(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        list_items = {
            field.alias or name: get_args(field.annotation)[0]
            for name, field in cls.model_fields.items()
            if get_args(field.annotation)
        }
        cleaned = {}
        for key, value in data.items():
            if value is None:
                continue
            if key in list_items and isinstance(value, list):
                zero = {} if issubclass(list_items[key], BaseModel) else list_items[key]()
                value = [zero if item is None else item for item in value]
            cleaned[key] = value
        return cleaned


class DataPoint(WireModel):
    time: float = 0.0
    summary: str = ""
    icon: str = ""
    sunrise_time: float = 0.0
    sunset_time: float = 0.0
    moon_phase: float = 0.0
    precip_intensity: float = Field(default=0.0, alias="precipIntensity")
    precip_intensity_max: float = Field(default=0.0, alias="precipIntensityMax")
    precip_intensity_max_time: float = Field(default=0.0, alias="precipIntensityMaxTime")
    precip_probability: float = Field(default=0.0, alias="precipProbability")
    precip_type: str = Field(default="", alias="precipType")
    precip_accumulation: float = Field(default=0.0, alias="precipAccumulation")
    temperature: float = 0.0
    apparent_temperature: float = Field(default=0.0, alias="apparentTemperature")
    temperature_low: float = Field(default=0.0, alias="temperatureLow")
    temperature_low_time: float = Field(default=0.0, alias="temperatureLowTime")
    temperature_high: float = Field(default=0.0, alias="temperatureHigh")
    temperature_high_time: float = Field(default=0.0, alias="temperatureHighTime")
    apparent_temperature_high: float = Field(default=0.0, alias="apparentTemperatureHigh")
    apparent_temperature_high_time: float = Field(default=0.0, alias="apparentTemperatureHighTime")
    apparent_temperature_low: float = Field(default=0.0, alias="apparentTemperatureLow")
    apparent_temperature_low_time: float = Field(default=0.0, alias="apparentTemperatureLowTime")
    temperature_min: float = 0.0
    temperature_min_time: float = 0.0
    temperature_max: float = 0.0
    temperature_max_time: float = 0.0
    apparent_temperature_min: float = Field(default=0.0, alias="apparentTemperatureMin")
    apparent_temperature_min_time: float = Field(default=0.0, alias="apparentTemperatureMinTime")
    apparent_temperature_max: float = Field(default=0.0, alias="apparentTemperatureMax")
    apparent_temperature_max_time: float = Field(default=0.0, alias="apparentTemperatureMaxTime")
    dew_point: float = 0.0
    humidity: float = 0.0
    pressure: float = 0.0
    wind_speed: float = Field(default=0.0, alias="windSpeed")
    wind_gust: float = Field(default=0.0, alias="windGust")
    wind_gust_time: float = Field(default=0.0, alias="windGustTime")
    wind_bearing: float = Field(default=0.0, alias="windBearing")
    cloud_cover: float = Field(default=0.0, alias="cloudCover")
    uv_index: int = Field(default=0, alias="uvIndex")
    uv_index_time: int = Field(default=0, alias="uvIndexTime")
    ozone: float = 0.0
    visibility: float = 0.0


class DataBlock(WireModel):
    summary: str = ""
    icon: str = ""
    data: list[DataPoint] = Field(default_factory=list)  # chronological


class Alert(WireModel):
    title: str = ""
    description: str = ""
    time: float = 0.0
    expires: float = 0.0
    uri: str = ""


class Flags(WireModel):
    darksky_unavailable: str = Field(default="", alias="darksky-unavailable")
    darksky_stations: list[str] = Field(default_factory=list, alias="darksky-stations")
    datapoint_stations: list[str] = Field(default_factory=list, alias="datapoint-stations")
    isd_stations: list[str] = Field(default_factory=list, alias="isds-stations")
    lamp_stations: list[str] = Field(default_factory=list, alias="lamp-stations")
    metar_stations: list[str] = Field(default_factory=list, alias="metars-stations")
    metno_license: str = Field(default="", alias="metnol-license")
    sources: list[str] = Field(default_factory=list)
    units: str = ""

    @property
    def stations(self) -> dict[str, list[str]]:
        """Station lists keyed by their wire name."""
        return {
            "darksky-stations": self.darksky_stations,
            "datapoint-stations": self.datapoint_stations,
            "isds-stations": self.isd_stations,
            "lamp-stations": self.lamp_stations,
            "metars-stations": self.metar_stations,
        }


class Forecast(WireModel):
    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = ""
    offset: float = 0.0
    currently: DataPoint = Field(default_factory=DataPoint)
    minutely: DataBlock = Field(default_factory=DataBlock)
    hourly: DataBlock = Field(default_factory=DataBlock)
    daily: DataBlock = Field(default_factory=DataBlock)
    alerts: list[Alert] = Field(default_factory=list)
    flags: Flags = Field(default_factory=Flags)
    # Taken from the X-Forecast-API-Calls header after decoding.
    api_calls: int = Field(default=0, alias="apicalls")
    code: int = 0
