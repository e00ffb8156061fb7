"""Warehouses the store ships from."""

from warehouse_routing.models import Coordinates, Warehouse, WarehouseRegistry

# Keyed by warehouse pincode; names match the Shopify location names.
DEFAULT_REGISTRY = WarehouseRegistry.from_warehouses(
    [
        Warehouse("382213", "Ahmedabad Warehouse", Coordinates(23.0225, 72.5714)),
        Warehouse("110042", "Delhi Warehouse", Coordinates(28.7041, 77.1025)),
        Warehouse("562123", "Emiza Blr Warehouse", Coordinates(12.9716, 77.5946)),
        Warehouse("131028", "Kundli Warehouse", Coordinates(28.9876, 77.1136)),
    ]
)
