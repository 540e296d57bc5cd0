"""forecast.io API client.

URL example: https://api.forecast.io/forecast/APIKEY/LATITUDE,LONGITUDE,TIME?units=ca
"""

import logging
import os
from collections.abc import Iterable

import httpx

from forecastio.config.schema import FORECAST_BASE_URL, ClientConfig
from forecastio.errors import ForecastError, TransportError
from forecastio.ingest.decoder import decode, parse_api_calls
from forecastio.models.common import TIME_NOW, DataBlockType, Units
from forecastio.models.forecast import Forecast

logger = logging.getLogger(__name__)

API_KEY_ENV = "FORECAST_API_KEY"


def build_url(
    api_key: str,
    latitude: str,
    longitude: str,
    time_spec: str = TIME_NOW,
    units: Units | str = Units.US,
    exclude: Iterable[DataBlockType | str] | None = None,
    base_url: str = FORECAST_BASE_URL,
) -> str:
    """Build the forecast request URL.

    Inputs are concatenated as given; callers must supply URL-safe values.
    The time segment is only added when time_spec is not "now".
    """
    coord = f"{latitude},{longitude}"
    if time_spec != TIME_NOW:
        coord = f"{coord},{time_spec}"
    url = f"{base_url}/{api_key}/{coord}?units={Units(units)}"

    blocks = ",".join(DataBlockType(b) for b in exclude or ())
    if blocks:
        url = f"{url}&exclude={blocks}"
    return url


def _redact(url: str, api_key: str) -> str:
    return url.replace(f"/{api_key}/", "/***/", 1) if api_key else url


class ForecastClient:
    """Single round-trip client for the forecast endpoint.

    Owns an httpx.Client unless one is passed in, in which case closing
    it stays the caller's job.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = FORECAST_BASE_URL,
        timeout: float | None = None,
        units: Units | str = Units.US,
        http_client: httpx.Client | None = None,
    ):
        self.api_key = api_key or os.environ.get(API_KEY_ENV, "")
        self.base_url = base_url
        self.timeout = timeout
        self.units = Units(units)
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)

    @classmethod
    def from_config(
        cls, config: ClientConfig, http_client: httpx.Client | None = None
    ) -> "ForecastClient":
        return cls(
            api_key=config.api_key or None,
            base_url=config.base_url,
            timeout=config.timeout,
            units=config.units,
            http_client=http_client,
        )

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "ForecastClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _resolve_key(self, api_key: str | None) -> str:
        key = api_key or self.api_key
        if not key:
            raise ForecastError(f"No API key given and {API_KEY_ENV} not set")
        return key

    def get_response(
        self,
        api_key: str | None,
        latitude: str,
        longitude: str,
        time_spec: str = TIME_NOW,
        units: Units | str | None = None,
        exclude: Iterable[DataBlockType | str] | None = None,
    ) -> httpx.Response:
        """Issue the GET and return the open, unread response.

        The caller must close the response. HTTP error statuses are
        returned like any other response.
        """
        key = self._resolve_key(api_key)
        url = build_url(
            key, latitude, longitude, time_spec,
            units if units is not None else self.units,
            exclude=exclude, base_url=self.base_url,
        )
        logger.debug("GET %s", _redact(url, key))

        try:
            request = self._http.build_request("GET", url)
            return self._http.send(request, stream=True)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error("Forecast request failed for %s: %s", _redact(url, key), e)
            raise TransportError(f"Request failed: {e}") from e

    def get(
        self,
        api_key: str | None,
        latitude: str,
        longitude: str,
        time_spec: str = TIME_NOW,
        units: Units | str | None = None,
        exclude: Iterable[DataBlockType | str] | None = None,
    ) -> Forecast:
        """Fetch and decode a forecast, attaching the API call counter."""
        response = self.get_response(
            api_key, latitude, longitude, time_spec, units, exclude=exclude
        )
        try:
            body = response.read()
        except (httpx.RequestError, httpx.StreamError) as e:
            logger.error("Failed reading forecast response body: %s", e)
            raise TransportError(f"Body read failed: {e}") from e
        finally:
            response.close()

        if response.is_error:
            # Not fatal: the body may still carry a code field.
            logger.warning("Forecast API returned HTTP %d", response.status_code)

        forecast = decode(body)
        return forecast.model_copy(
            update={"api_calls": parse_api_calls(response.headers)}
        )


def get(
    api_key: str | None,
    latitude: str,
    longitude: str,
    time_spec: str = TIME_NOW,
    units: Units | str = Units.US,
    exclude: Iterable[DataBlockType | str] | None = None,
) -> Forecast:
    """One-shot forecast fetch with a throwaway client."""
    with ForecastClient() as client:
        return client.get(api_key, latitude, longitude, time_spec, units, exclude=exclude)
