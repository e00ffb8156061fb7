#!/usr/bin/env python3
"""CLI entry point for checking which warehouse can ship a product to a pincode."""

import argparse
import json
import sys

from warehouse_routing.fulfillment import FulfillmentService
from warehouse_routing.geocoder import NominatimGeocoder
from warehouse_routing.handler import outcome_to_response
from warehouse_routing.log import configure_logging
from warehouse_routing.models import Fallback, Fulfilled, FulfillmentOutcome
from warehouse_routing.registry import DEFAULT_REGISTRY
from warehouse_routing.shopify_client import ShopifyClient


def _print_outcome(pincode, product_id, outcome: FulfillmentOutcome):
    """Print the fulfilment decision to stdout."""
    print(f"\n{'=' * 70}")
    print("  WAREHOUSE AVAILABILITY")
    print(f"  Pincode {pincode} | Product {product_id}")
    print(f"{'=' * 70}\n")

    if isinstance(outcome, (Fulfilled, Fallback)):
        print(f"  Warehouse: {outcome.warehouse}")
        print(f"  Quantity:  {outcome.quantity}")
        print(f"  Dispatch:  {outcome.estimated_date}")
        print(f"\n  {outcome.message}")
    else:
        print(f"  {type(outcome).__name__}: {outcome.message}")
    print()


def _build_service(args) -> FulfillmentService:
    """Instantiate the decision service from CLI arguments.

    Args:
        args: Parsed argparse namespace.

    Returns:
        A FulfillmentService backed by Nominatim and Shopify.
    """
    return FulfillmentService(
        geocoder=NominatimGeocoder(country=args.country),
        inventory_client=ShopifyClient(
            store_url=args.store_url,
            access_token=args.access_token,
        ),
        registry=DEFAULT_REGISTRY,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find the warehouse that can ship a product to a pincode.",
    )
    parser.add_argument("--pincode", required=True, help="Customer pincode.")
    parser.add_argument(
        "--product-id",
        required=True,
        help="Shopify product id (numeric or gid://shopify/Product/...).",
    )
    parser.add_argument(
        "--country",
        default="India",
        help='Country the pincode is looked up in (default: "India").',
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the HTTP response body instead of a summary.",
    )
    parser.add_argument(
        "--log-level",
        help="Log level (overrides LOG_LEVEL env var).",
    )

    shopify_group = parser.add_argument_group("Shopify options")
    shopify_group.add_argument(
        "--store-url",
        help="Shopify store URL (overrides SHOPIFY_STORE_URL env var).",
    )
    shopify_group.add_argument(
        "--access-token",
        help="Admin API access token (overrides SHOPIFY_API_KEY env var).",
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        service = _build_service(args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    outcome = service.decide(args.pincode, args.product_id)

    if args.json:
        response = outcome_to_response(outcome)
        print(json.dumps(json.loads(response["body"]), indent=2))
    else:
        _print_outcome(args.pincode, args.product_id, outcome)

    if not isinstance(outcome, (Fulfilled, Fallback)):
        sys.exit(1)


if __name__ == "__main__":
    main()
