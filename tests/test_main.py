import json

import pytest

from conftest import FakeGeocoder, FakeInventoryClient, make_product
from warehouse_routing import main as main_module
from warehouse_routing.fulfillment import FulfillmentService
from warehouse_routing.models import Coordinates
from warehouse_routing.registry import DEFAULT_REGISTRY


@pytest.fixture
def use_product(monkeypatch, fixed_today):
    def install(product):
        monkeypatch.setattr(
            main_module,
            "_build_service",
            lambda args: FulfillmentService(
                FakeGeocoder(coords=Coordinates(12.97, 77.59)),
                FakeInventoryClient(product=product),
                DEFAULT_REGISTRY,
                today=fixed_today,
            ),
        )

    return install


def test_prints_summary(use_product, capsys):
    use_product(make_product([("Emiza Blr Warehouse", 12)]))
    main_module.main(["--pincode", "560001", "--product-id", "123"])
    out = capsys.readouterr().out
    assert "Warehouse: Emiza Blr Warehouse" in out
    assert "Quantity:  12" in out
    assert "Dispatch:  Friday, October 23" in out


def test_json_output(use_product, capsys):
    use_product(make_product([("Delhi Warehouse", 2)]))
    main_module.main(["--pincode", "560001", "--product-id", "123", "--json"])
    body = json.loads(capsys.readouterr().out)
    assert body["warehouse"] == "Delhi Warehouse"
    assert body["message"].startswith("Product is not available near your pincode")


def test_out_of_stock_exits_nonzero(use_product, capsys):
    use_product(make_product([("Delhi Warehouse", 0)]))
    with pytest.raises(SystemExit) as exc:
        main_module.main(["--pincode", "560001", "--product-id", "123"])
    assert exc.value.code == 1
    assert "OutOfStock: Product is out of stock at all locations." in capsys.readouterr().out


def test_missing_token_exits_with_error(monkeypatch, capsys):
    monkeypatch.delenv("SHOPIFY_API_KEY", raising=False)
    with pytest.raises(SystemExit) as exc:
        main_module.main(["--pincode", "560001", "--product-id", "123"])
    assert exc.value.code == 1
    assert "SHOPIFY_API_KEY" in capsys.readouterr().err
