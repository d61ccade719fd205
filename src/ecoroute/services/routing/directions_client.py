"""HTTP client for the Google Maps Directions web service."""

from __future__ import annotations

import logging
import time
from typing import Sequence

import httpx

from ...config import settings
from ...errors import ProviderError, ProviderFailure
from .estimator import select_best_alternative
from .models import DirectionsRoute, OptimizedDirections, RouteSavings

logger = logging.getLogger(__name__)

QUOTA_STATUSES = ("OVER_QUERY_LIMIT", "OVER_DAILY_LIMIT")


def _format_point(point: Sequence[float]) -> str:
    lat, lon = point
    return f"{lat},{lon}"


class DirectionsClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        connect_timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or settings.google_maps_api_key
        if not self.api_key:
            raise ProviderError(
                ProviderFailure.CREDENTIAL_MISSING,
                "Google Maps API key is missing. Please set the GOOGLE_MAPS_API_KEY environment variable.",
            )
        self.base_url = base_url or settings.directions_base_url
        self.timeout = timeout if timeout is not None else settings.provider_timeout_seconds
        self.connect_timeout = (
            connect_timeout if connect_timeout is not None else settings.provider_connect_timeout_seconds
        )
        self.max_retries = max_retries if max_retries is not None else settings.provider_max_retries
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.provider_backoff_seconds
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=self.connect_timeout),
            transport=self._transport,
        )

    def _request(self, params: dict) -> dict:
        """GET the directions endpoint, retrying timeouts and network errors."""
        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.get(self.base_url, params={**params, "key": self.api_key})
                    response.raise_for_status()
                    return response.json()
                except httpx.HTTPStatusError as e:
                    raise ProviderError(
                        ProviderFailure.HTTP_ERROR,
                        f"Directions request failed with HTTP {e.response.status_code}",
                    ) from e
                except httpx.TimeoutException as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        logger.warning(f"Directions request timed out after {self.max_retries} retries: {e}")
                        raise ProviderError(ProviderFailure.TIMEOUT, f"Directions request timed out: {e}") from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"Directions timeout, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries})")
                    time.sleep(wait_time)
                except httpx.TransportError as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise ProviderError(
                            ProviderFailure.NETWORK,
                            f"Failed to connect to the directions service at {self.base_url}: {e}",
                        ) from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"Directions network error, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries}): {e}")
                    time.sleep(wait_time)
                except ValueError as e:
                    raise ProviderError(
                        ProviderFailure.MALFORMED_RESPONSE, f"Directions response is not valid JSON: {e}"
                    ) from e
        finally:
            client.close()

    def directions(
        self,
        origin: Sequence[float],
        destination: Sequence[float],
        mode: str = "driving",
        alternatives: bool = False,
    ) -> list[DirectionsRoute]:
        """Fetch candidate routes between two (lat, lon) points.

        Raises:
            ProviderError: for any denial, empty result or malformed payload.
        """
        params = {
            "origin": _format_point(origin),
            "destination": _format_point(destination),
            "mode": mode.lower(),
        }
        if alternatives:
            params["alternatives"] = "true"

        data = self._request(params)
        status = data.get("status") if isinstance(data, dict) else None

        if status == "REQUEST_DENIED":
            logger.error(f"Directions request denied: {data.get('error_message', 'Request denied')}")
            raise ProviderError(
                ProviderFailure.CREDENTIAL_UNAUTHORIZED,
                "API key is not authorized for Directions API. Please enable the Directions API "
                "in the Google Cloud Console for this API key.",
            )
        if status in QUOTA_STATUSES:
            raise ProviderError(ProviderFailure.REQUEST_DENIED, f"Directions request refused: {status}")
        if status is None:
            raise ProviderError(ProviderFailure.MALFORMED_RESPONSE, "Directions response has no status.")
        if status != "OK" or not data.get("routes"):
            raise ProviderError(ProviderFailure.NO_ROUTE, f"Google Maps API error: {status}")

        try:
            return [
                DirectionsRoute(
                    distance_km=float(route["legs"][0]["distance"]["value"]) / 1000,
                    duration_s=float(route["legs"][0]["duration"]["value"]),
                    polyline=route["overview_polyline"]["points"],
                )
                for route in data["routes"]
            ]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ProviderError(
                ProviderFailure.MALFORMED_RESPONSE, f"Directions route is missing field {e}"
            ) from e

    def optimized_route(
        self,
        origin: Sequence[float],
        destination: Sequence[float],
        optimization_level: float = 85,
    ) -> OptimizedDirections:
        """Compare the provider's default route with its alternatives and keep the best.

        ``optimization_level`` weighs distance against travel time when ranking
        alternatives; savings are measured against the default route.
        """
        baseline = self.directions(origin, destination)[0]
        candidates = self.directions(origin, destination, alternatives=True)
        best = select_best_alternative(candidates, optimization_level)

        distance_saving = baseline.distance_km - best.distance_km
        duration_saving = baseline.duration_s - best.duration_s
        percentage = distance_saving / baseline.distance_km * 100 if baseline.distance_km > 0 else 0.0

        try:
            points = decode_polyline(best.polyline)
        except (IndexError, TypeError) as e:
            raise ProviderError(
                ProviderFailure.MALFORMED_RESPONSE, f"Directions polyline could not be decoded: {e}"
            ) from e
        if len(points) < 2:
            raise ProviderError(
                ProviderFailure.MALFORMED_RESPONSE,
                f"Directions polyline has {len(points)} point(s); a route needs at least two.",
            )

        logger.info(
            f"Directions: {len(candidates)} alternative(s), chose {best.distance_km:.1f} km "
            f"(baseline {baseline.distance_km:.1f} km)"
        )
        return OptimizedDirections(
            distance_km=best.distance_km,
            duration_s=best.duration_s,
            polyline=best.polyline,
            coordinates=[(lon, lat) for lat, lon in points],
            savings=RouteSavings(
                distance_km=distance_saving,
                duration_s=duration_saving,
                percentage=percentage,
            ),
        )


def decode_polyline(polyline: str) -> list[tuple[float, float]]:
    """Decode Google polyline string to list of (lat, lon) coordinates.

    Args:
        polyline: Encoded polyline string

    Returns:
        List of (latitude, longitude) tuples
    """
    coordinates = []
    index = 0
    lat = 0
    lon = 0

    while index < len(polyline):
        deltas = []
        for _ in range(2):
            shift = 0
            result = 0
            while True:
                b = ord(polyline[index]) - 63
                index += 1
                result |= (b & 0x1f) << shift
                shift += 5
                if b < 0x20:
                    break
            deltas.append(~(result >> 1) if (result & 1) else (result >> 1))
        lat += deltas[0]
        lon += deltas[1]
        coordinates.append((lat / 1e5, lon / 1e5))

    return coordinates


def check_health(client: DirectionsClient | None) -> bool:
    """Probe the provider with a short request between two fixed points."""
    if client is None:
        return False
    try:
        client.directions((52.517037, 13.388860), (52.496891, 13.385983))
        return True
    except ProviderError:
        return False
