from datetime import date

import pytest
import requests

from warehouse_routing.base_client import InventoryClient
from warehouse_routing.models import Coordinates, Warehouse, WarehouseRegistry


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self.json_error:
            raise self.json_error
        return self.payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Stands in for requests.Session, replaying queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.headers = {}
        self.calls = []

    def _next(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url, **kwargs):
        return self._next("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._next("POST", url, **kwargs)


class FakeGeocoder:
    def __init__(self, coords=None, error=None):
        self.coords = coords
        self.error = error
        self.calls = []

    def resolve(self, postal_code):
        self.calls.append(postal_code)
        if self.error:
            raise self.error
        return self.coords


class FakeInventoryClient(InventoryClient):
    def __init__(self, product=None, error=None):
        self.product = product
        self.error = error
        self.calls = []

    def get_product(self, product_id):
        self.calls.append(product_id)
        if self.error:
            raise self.error
        return self.product


def make_product(*variants):
    """Build a Shopify product payload; each variant is a list of (name, qty)."""
    def level(name, qty):
        quantities = [] if qty is None else [{"quantity": qty}]
        return {"node": {"location": {"id": f"gid://shopify/Location/{name}", "name": name},
                         "quantities": quantities}}

    return {
        "id": "gid://shopify/Product/1",
        "title": "Lamp",
        "variants": {
            "edges": [
                {"node": {"id": f"v{i}", "title": f"Variant {i}",
                          "inventoryItem": {"inventoryLevels": {"edges": [level(n, q) for n, q in levels]}}}}
                for i, levels in enumerate(variants)
            ]
        },
    }


@pytest.fixture
def two_warehouse_registry():
    return WarehouseRegistry.from_warehouses(
        [
            Warehouse("A", "Warehouse A", Coordinates(0.0, 0.0)),
            Warehouse("B", "Warehouse B", Coordinates(10.0, 10.0)),
        ]
    )


@pytest.fixture
def fixed_today():
    # A Sunday; +5 days is Friday, October 23.
    return lambda: date(2026, 10, 18)
