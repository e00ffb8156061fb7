"""Nearest-warehouse lookup using great-circle distance."""

from math import atan2, cos, radians, sin, sqrt

from warehouse_routing.models import Coordinates, NearestResult, WarehouseRegistry

# Approximate radius of Earth in kilometres.
_EARTH_RADIUS_KM = 6371.0


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the great-circle distance in km between two lat/lon points."""
    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    return _EARTH_RADIUS_KM * 2 * atan2(sqrt(a), sqrt(1 - a))


def distance_km(a: Coordinates, b: Coordinates) -> float:
    return haversine(a.latitude, a.longitude, b.latitude, b.longitude)


def find_nearest_warehouse(
    user_coords: Coordinates,
    registry: WarehouseRegistry,
) -> NearestResult | None:
    """Find the warehouse closest to *user_coords*.

    Every warehouse is compared against the running minimum with a strict
    ``<``, so when two warehouses are equidistant the one listed first in
    the registry is returned.

    Args:
        user_coords: Customer location.
        registry: Warehouses to choose from.

    Returns:
        The nearest warehouse, or None if the registry is empty.
    """
    nearest: NearestResult | None = None
    best_dist = float("inf")

    for warehouse in registry:
        d = distance_km(user_coords, warehouse.coordinates)
        if d < best_dist:
            best_dist = d
            nearest = NearestResult(
                identifier=warehouse.identifier,
                coordinates=warehouse.coordinates,
                distance_km=d,
            )

    return nearest
