"""Choose the warehouse that should fulfil an order for a pincode."""

from collections.abc import Callable
from datetime import date, timedelta

from warehouse_routing.base_client import CommerceError, InventoryClient
from warehouse_routing.geocoder import NoCoordinatesFound, UpstreamUnavailable
from warehouse_routing.log import get_logger
from warehouse_routing.models import (
    Fallback,
    Fulfilled,
    FulfillmentOutcome,
    InvalidInput,
    InventoryRecord,
    NearestResult,
    NotFound,
    OutOfStock,
    UpstreamError,
    WarehouseRegistry,
)
from warehouse_routing.shopify_client import extract_inventory
from warehouse_routing.warehouse_locator import find_nearest_warehouse

# Business policy, not derived from distance or carrier data.
DELIVERY_ESTIMATE_DAYS = 5

logger = get_logger(__name__)


def estimate_dispatch_date(today: date, days: int = DELIVERY_ESTIMATE_DAYS) -> str:
    """Return ``today + days`` as e.g. "Friday, October 23"."""
    d = today + timedelta(days=days)
    return f"{d:%A}, {d:%B} {d.day}"


def select_inventory(
    records: list[InventoryRecord],
    nearest: NearestResult,
    registry: WarehouseRegistry,
) -> tuple[InventoryRecord | None, bool]:
    """Pick the record to fulfil from.

    The first in-stock record at the nearest warehouse wins; otherwise the
    first in-stock record anywhere.

    Returns:
        ``(record, is_nearest)``; record is None when nothing is in stock.
    """
    for record in records:
        if (
            registry.identifier_for(record.location_name) == nearest.identifier
            and record.quantity > 0
        ):
            return record, True

    for record in records:
        if record.quantity > 0:
            return record, False

    return None, False


class FulfillmentService:
    """Geocode, locate the nearest warehouse, and check stock for one product."""

    def __init__(
        self,
        geocoder,
        inventory_client: InventoryClient,
        registry: WarehouseRegistry,
        today: Callable[[], date] = date.today,
    ):
        self.geocoder = geocoder
        self.inventory_client = inventory_client
        self.registry = registry
        self.today = today

    def decide(self, postal_code: str | None, product_id: str | None) -> FulfillmentOutcome:
        """Decide which warehouse should ship *product_id* to *postal_code*.

        Args:
            postal_code: Customer pincode.
            product_id: Commerce product identifier.

        Returns:
            The outcome of the request; failures are returned, not raised.
        """
        postal_code = (postal_code or "").strip()
        product_id = (product_id or "").strip()
        if not postal_code or not product_id:
            return InvalidInput()

        try:
            user_coords = self.geocoder.resolve(postal_code)
        except NoCoordinatesFound as exc:
            logger.info("No coordinates for pincode {}", postal_code)
            return InvalidInput(message=str(exc), status_code=404)
        except UpstreamUnavailable as exc:
            logger.warning("Geocoding failed for pincode {}: {}", postal_code, exc)
            return UpstreamError(message="Error resolving pincode")

        try:
            product = self.inventory_client.get_product(product_id)
        except CommerceError as exc:
            logger.warning("Inventory query failed for product {}: {}", product_id, exc)
            return UpstreamError(message=str(exc))

        if not product:
            return NotFound(message="Product not found")

        records = extract_inventory(product)

        nearest = find_nearest_warehouse(user_coords, self.registry)
        if nearest is None:
            return NotFound(message="No warehouse found near the provided pincode.")
        logger.debug(
            "Nearest warehouse to {} is {} ({:.1f} km)",
            postal_code,
            nearest.identifier,
            nearest.distance_km,
        )

        record, is_nearest = select_inventory(records, nearest, self.registry)
        if record is None:
            logger.info("Product {} is out of stock at all locations", product_id)
            return OutOfStock()

        estimate = estimate_dispatch_date(self.today())
        outcome_cls = Fulfilled if is_nearest else Fallback
        outcome = outcome_cls(
            warehouse=record.location_name,
            quantity=record.quantity,
            estimated_date=estimate,
        )
        logger.info(
            "Product {} for pincode {}: {} from {}",
            product_id,
            postal_code,
            outcome_cls.__name__,
            record.location_name,
        )
        return outcome
