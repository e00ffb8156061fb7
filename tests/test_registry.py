import pytest

from warehouse_routing.models import Coordinates, Warehouse, WarehouseRegistry
from warehouse_routing.registry import DEFAULT_REGISTRY


def test_default_registry_contents():
    assert [w.identifier for w in DEFAULT_REGISTRY] == ["382213", "110042", "562123", "131028"]
    assert DEFAULT_REGISTRY.coordinates()["110042"] == Coordinates(28.7041, 77.1025)
    assert DEFAULT_REGISTRY.identifier_for("Emiza Blr Warehouse") == "562123"
    assert DEFAULT_REGISTRY.identifier_for("Unknown Location") is None


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY.location_names["Pune Warehouse"] = "411001"
    with pytest.raises(AttributeError):
        DEFAULT_REGISTRY.warehouses = ()


def test_duplicate_identifiers_rejected():
    with pytest.raises(ValueError, match="Duplicate warehouse identifiers: A"):
        WarehouseRegistry.from_warehouses(
            [
                Warehouse("A", "First", Coordinates(0, 0)),
                Warehouse("A", "Second", Coordinates(1, 1)),
            ]
        )


def test_location_names_can_differ_from_warehouse_names():
    registry = WarehouseRegistry(
        warehouses=(Warehouse("560001", "Bangalore", Coordinates(12.97, 77.59)),),
        location_names={"Emiza Blr Warehouse": "560001"},
    )
    assert registry.identifier_for("Emiza Blr Warehouse") == "560001"
    assert registry.identifier_for("Bangalore") is None
    assert len(registry) == 1
