"""Product catalog port — the ProductAvailabilityGate.

Stock and product details belong to the Catalog service. Shopping asks
it whether requested quantities are in stock and looks up a product's
name and price when an item is added to a cart.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shared.deadline import Deadline


@dataclass(frozen=True)
class ProductInfo:
    product_id: str
    title: str
    price: float
    quantity_in_stock: int


@dataclass(frozen=True)
class UnavailableProduct:
    """A requested product whose stock does not cover the requested quantity."""

    product_id: str
    title: str
    quantity_in_stock: int


class CatalogueUnavailable(Exception):
    """The catalog could not be asked; availability is unknown."""


class CataloguePort(ABC):
    """Abstract interface for the product catalog."""

    @abstractmethod
    def check_availability(
        self,
        items: list[tuple[str, int]],
        deadline: Deadline | None = None,
    ) -> list[UnavailableProduct]:
        """Return the products among ``(product_id, quantity)`` pairs that are short.

        Raises CatalogueUnavailable when the catalog cannot answer.
        """
        ...

    @abstractmethod
    def get_product(self, product_id: str, deadline: Deadline | None = None) -> ProductInfo | None:
        """Return the product, or None when it does not exist."""
        ...
