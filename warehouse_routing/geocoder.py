"""Pincode geocoding via the OpenStreetMap Nominatim search API."""

import requests

from warehouse_routing.log import get_logger
from warehouse_routing.models import Coordinates

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
DEFAULT_COUNTRY = "India"
DEFAULT_TIMEOUT = 10
USER_AGENT = "warehouse-routing/0.1"

logger = get_logger(__name__)


class GeocodingError(Exception):
    """Base class for pincode lookup failures."""


class NoCoordinatesFound(GeocodingError):
    """The lookup succeeded but returned no match for the pincode."""


class UpstreamUnavailable(GeocodingError):
    """The geocoding service could not be reached or sent an unusable reply."""


class NominatimGeocoder:
    """Resolve postal codes to coordinates, restricted to one country."""

    def __init__(
        self,
        country: str = DEFAULT_COUNTRY,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.country = country
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def _search(self, postal_code: str) -> list:
        params = {
            "postalcode": postal_code,
            "country": self.country,
            "format": "json",
        }
        try:
            resp = self.session.get(NOMINATIM_URL, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise UpstreamUnavailable(f"Geocoding lookup failed: {exc}") from exc

        if not isinstance(data, list):
            raise UpstreamUnavailable("Geocoding lookup returned an unexpected payload.")
        return data

    def resolve(self, postal_code: str) -> Coordinates:
        """Return the coordinates of the first match for *postal_code*.

        Raises:
            NoCoordinatesFound: The lookup returned zero matches.
            UpstreamUnavailable: The request failed or the reply was malformed.
        """
        matches = self._search(postal_code)
        if not matches:
            raise NoCoordinatesFound("No coordinates found for the given pincode.")

        first = matches[0]
        try:
            coords = Coordinates(
                latitude=float(first["lat"]),
                longitude=float(first["lon"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamUnavailable(
                "Geocoding lookup returned a match without coordinates."
            ) from exc

        logger.debug("Pincode {} resolved to {}", postal_code, coords)
        return coords
