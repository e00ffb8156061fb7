"""Abstract base class for commerce backends that report stock levels."""

from abc import ABC, abstractmethod


class CommerceError(Exception):
    """The commerce backend could not be queried or answered with errors."""


class InventoryClient(ABC):
    """Base class that all commerce backend clients must implement."""

    @abstractmethod
    def get_product(self, product_id: str) -> dict | None:
        """Fetch a product with its per-location inventory.

        Args:
            product_id: Product identifier as understood by the backend.

        Returns:
            The raw product payload, or None if the product does not exist.

        Raises:
            CommerceError: The request failed or the backend reported errors.
        """
