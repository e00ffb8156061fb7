"""Shared data models for warehouse selection."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Coordinates:
    """A WGS84 latitude/longitude pair in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Warehouse:
    """A fulfilment location, keyed by its own pincode."""

    identifier: str
    name: str
    coordinates: Coordinates


@dataclass(frozen=True)
class WarehouseRegistry:
    """Read-only set of warehouses and the commerce location names that map to them.

    Iteration order is the order the warehouses were given in, which is
    also the tie-break order used by the nearest-warehouse search.
    """

    warehouses: tuple[Warehouse, ...]
    location_names: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        identifiers = [w.identifier for w in self.warehouses]
        duplicates = sorted({i for i in identifiers if identifiers.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate warehouse identifiers: {', '.join(duplicates)}")
        object.__setattr__(self, "warehouses", tuple(self.warehouses))
        object.__setattr__(
            self, "location_names", MappingProxyType(dict(self.location_names))
        )

    @classmethod
    def from_warehouses(cls, warehouses: list[Warehouse]) -> "WarehouseRegistry":
        """Build a registry whose location names are the warehouse names."""
        return cls(
            warehouses=tuple(warehouses),
            location_names={w.name: w.identifier for w in warehouses},
        )

    def __iter__(self) -> Iterator[Warehouse]:
        return iter(self.warehouses)

    def __len__(self) -> int:
        return len(self.warehouses)

    def coordinates(self) -> dict[str, Coordinates]:
        return {w.identifier: w.coordinates for w in self.warehouses}

    def identifier_for(self, location_name: str) -> str | None:
        """Return the warehouse identifier a commerce location name maps to."""
        return self.location_names.get(location_name)


@dataclass(frozen=True)
class InventoryRecord:
    """Stock of one product variant at one commerce location."""

    location_name: str
    quantity: int = 0


@dataclass(frozen=True)
class NearestResult:
    identifier: str
    coordinates: Coordinates
    distance_km: float


@dataclass(frozen=True)
class FulfillmentOutcome:
    """Terminal state of a single fulfilment request."""


@dataclass(frozen=True)
class Fulfilled(FulfillmentOutcome):
    """Stock is available at the warehouse nearest to the customer."""

    warehouse: str
    quantity: int
    estimated_date: str

    @property
    def message(self) -> str:
        return (
            f"Product is available at {self.warehouse}. "
            f"Estimated dispatch by {self.estimated_date}."
        )


@dataclass(frozen=True)
class Fallback(FulfillmentOutcome):
    """The nearest warehouse has no stock but another location does."""

    warehouse: str
    quantity: int
    estimated_date: str

    @property
    def message(self) -> str:
        return (
            "Product is not available near your pincode but is available at "
            f"{self.warehouse}. Estimated dispatch by {self.estimated_date}."
        )


@dataclass(frozen=True)
class OutOfStock(FulfillmentOutcome):
    message: str = "Product is out of stock at all locations."


@dataclass(frozen=True)
class NotFound(FulfillmentOutcome):
    message: str = "Product not found"


@dataclass(frozen=True)
class InvalidInput(FulfillmentOutcome):
    message: str = "Missing pincode or productId"
    status_code: int = 400


@dataclass(frozen=True)
class UpstreamError(FulfillmentOutcome):
    message: str = "Error fetching product data"
