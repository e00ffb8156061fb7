"""Shopify Admin GraphQL client for product inventory by location."""

import os

import requests
from dotenv import load_dotenv

from warehouse_routing.base_client import CommerceError, InventoryClient
from warehouse_routing.models import InventoryRecord

load_dotenv()

API_VERSION = "2023-01"
DEFAULT_STORE_URL = "ruhe-solution.myshopify.com"
DEFAULT_TIMEOUT = 10

PRODUCT_INVENTORY_QUERY = """
query getProductById($productId: ID!) {
  product(id: $productId) {
    id
    title
    variants(first: 10) {
      edges {
        node {
          id
          title
          inventoryItem {
            inventoryLevels(first: 10) {
              edges {
                node {
                  location {
                    id
                    name
                  }
                  quantities(names: "available") {
                    quantity
                  }
                }
              }
            }
          }
        }
      }
    }
  }
}
"""


def product_gid(product_id: str) -> str:
    """Expand a bare numeric product id into a Shopify global id."""
    product_id = str(product_id).strip()
    if product_id.isdigit():
        return f"gid://shopify/Product/{product_id}"
    return product_id


def _format_errors(errors) -> str:
    if isinstance(errors, list):
        return "; ".join(
            e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors
        )
    return str(errors)


def extract_inventory(product: dict) -> list[InventoryRecord]:
    """Flatten a product's variants and inventory levels into records.

    Records keep the order Shopify returned variants and locations in. A
    location stocked by several variants yields one record per variant.
    Missing "available" quantities count as zero.

    Args:
        product: The ``product`` object from the GraphQL response.

    Returns:
        One InventoryRecord per (variant, location) pair.
    """
    records: list[InventoryRecord] = []

    for variant in (product.get("variants") or {}).get("edges", []):
        inventory_item = variant["node"].get("inventoryItem") or {}
        levels = (inventory_item.get("inventoryLevels") or {}).get("edges", [])
        for level in levels:
            node = level["node"]
            quantities = node.get("quantities") or []
            quantity = (quantities[0].get("quantity") if quantities else None) or 0
            records.append(
                InventoryRecord(
                    location_name=node["location"]["name"],
                    quantity=quantity,
                )
            )

    return records


class ShopifyClient(InventoryClient):
    """Client for the Shopify Admin GraphQL API."""

    def __init__(
        self,
        store_url: str | None = None,
        access_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.store_url = (
            store_url or os.getenv("SHOPIFY_STORE_URL", DEFAULT_STORE_URL)
        ).rstrip("/")
        self.access_token = access_token or os.getenv("SHOPIFY_API_KEY", "")
        if not self.access_token:
            raise ValueError(
                "SHOPIFY_API_KEY must be set either as an argument or in a .env file."
            )
        self.timeout = timeout
        self.graphql_url = f"https://{self.store_url}/admin/api/{API_VERSION}/graphql.json"
        self.session = requests.Session()
        self.session.headers.update(
            {
                "X-Shopify-Access-Token": self.access_token,
                "Content-Type": "application/json",
            }
        )

    def _post(self, query: str, variables: dict) -> dict:
        try:
            resp = self.session.post(
                self.graphql_url,
                json={"query": query, "variables": variables},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise CommerceError(f"Error fetching product data: {exc}") from exc

        try:
            result = resp.json()
        except ValueError:
            result = {}
        if not isinstance(result, dict):
            result = {}

        if not resp.ok:
            raise CommerceError(
                _format_errors(result.get("errors") or "Error fetching product data")
            )
        if result.get("errors"):
            raise CommerceError(_format_errors(result["errors"]))
        if "data" not in result:
            raise CommerceError("Error fetching product data")
        return result["data"]

    def get_product(self, product_id: str) -> dict | None:
        """Fetch a product with the first 10 variants and their inventory levels.

        Args:
            product_id: Shopify product global id, or its numeric part.

        Returns:
            The product payload, or None if Shopify has no such product.
        """
        data = self._post(PRODUCT_INVENTORY_QUERY, {"productId": product_gid(product_id)})
        return (data or {}).get("product")
