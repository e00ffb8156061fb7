"""Serverless entry points for the pincode availability check.

Both functions take a Netlify/AWS Lambda style ``event`` dict and return a
``{"statusCode", "headers", "body"}`` response. ``check_pincode`` is the
plain endpoint; ``handler`` additionally answers CORS pre-flight requests.
"""

import json
from collections.abc import Callable

from warehouse_routing.fulfillment import FulfillmentService
from warehouse_routing.geocoder import NominatimGeocoder
from warehouse_routing.log import get_logger
from warehouse_routing.models import (
    Fallback,
    Fulfilled,
    FulfillmentOutcome,
    InvalidInput,
    NotFound,
    OutOfStock,
    UpstreamError,
)
from warehouse_routing.registry import DEFAULT_REGISTRY
from warehouse_routing.shopify_client import ShopifyClient

# Out-of-stock keeps the 200 + "error" body existing storefront widgets expect.
OUT_OF_STOCK_STATUS = 200

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}

PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

logger = get_logger(__name__)


def build_service() -> FulfillmentService:
    """Build a service from environment configuration."""
    return FulfillmentService(
        geocoder=NominatimGeocoder(),
        inventory_client=ShopifyClient(),
        registry=DEFAULT_REGISTRY,
    )


def _response(status_code: int, body: dict | None, headers: dict | None = None) -> dict:
    return {
        "statusCode": status_code,
        "headers": {
            **(headers or CORS_HEADERS),
            "Content-Type": "application/json",
        },
        "body": json.dumps(body) if body is not None else "",
    }


def outcome_to_response(outcome: FulfillmentOutcome) -> dict:
    """Map a fulfilment outcome to an HTTP-shaped response."""
    if isinstance(outcome, (Fulfilled, Fallback)):
        return _response(
            200,
            {
                "warehouse": outcome.warehouse,
                "quantity": outcome.quantity,
                "estimatedDispatch": outcome.estimated_date,
                "message": outcome.message,
            },
        )
    if isinstance(outcome, OutOfStock):
        return _response(OUT_OF_STOCK_STATUS, {"error": outcome.message})
    if isinstance(outcome, InvalidInput):
        return _response(outcome.status_code, {"error": outcome.message})
    if isinstance(outcome, NotFound):
        return _response(404, {"error": outcome.message})
    if isinstance(outcome, UpstreamError):
        return _response(500, {"error": outcome.message})
    raise TypeError(f"Unknown fulfilment outcome: {outcome!r}")


def respond(
    params: dict | None,
    service_factory: Callable[[], FulfillmentService] | None = None,
) -> dict:
    """Validate query parameters, run the decision, and build the response.

    Any failure not already expressed as an outcome is logged and returned
    as a generic 500.
    """
    params = params or {}
    pincode = params.get("pincode")
    product_id = params.get("productId")

    if not pincode or not product_id:
        return outcome_to_response(InvalidInput())

    try:
        service = (service_factory or build_service)()
        return outcome_to_response(service.decide(pincode, product_id))
    except Exception:
        logger.exception("Unhandled error checking pincode {}", pincode)
        return _response(500, {"error": "Server error"})


def check_pincode(event: dict, context=None) -> dict:
    """Availability check without pre-flight handling."""
    return respond(event.get("queryStringParameters"))


def handler(event: dict, context=None) -> dict:
    """Cross-origin aware availability check."""
    if (event.get("httpMethod") or "").upper() == "OPTIONS":
        return _response(200, None, headers=PREFLIGHT_HEADERS)
    return respond(event.get("queryStringParameters"))
