"""HTTP adapter for the Catalog service."""

from shared.deadline import Deadline
from shared.http_client import ServiceClient

from shopping.catalogue.port import CataloguePort, CatalogueUnavailable, ProductInfo, UnavailableProduct


class HttpCatalogue(ServiceClient, CataloguePort):
    def check_availability(
        self,
        items: list[tuple[str, int]],
        deadline: Deadline | None = None,
    ) -> list[UnavailableProduct]:
        path = "/products/availability"
        payload = {"items": [{"product_id": str(product_id), "quantity": quantity} for product_id, quantity in items]}
        response = self._request("POST", path, deadline=deadline, json=payload)
        if response is None or response.status_code == 404:
            raise CatalogueUnavailable("Availability check failed")

        data = self._json(response, path)
        if data is None:
            raise CatalogueUnavailable("Availability check answered with an unreadable body")
        try:
            return [
                UnavailableProduct(
                    product_id=str(entry["product_id"]),
                    title=entry.get("title", ""),
                    quantity_in_stock=int(entry.get("quantity_in_stock", 0)),
                )
                for entry in data.get("insufficient", [])
            ]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise CatalogueUnavailable("Availability check answered with malformed products") from exc

    def get_product(self, product_id: str, deadline: Deadline | None = None) -> ProductInfo | None:
        path = f"/products/{product_id}"
        response = self._request("GET", path, deadline=deadline)
        if response is None:
            raise CatalogueUnavailable(f"Product lookup failed for {product_id}")
        if response.status_code == 404:
            return None

        data = self._json(response, path)
        if data is None:
            raise CatalogueUnavailable(f"Product lookup for {product_id} answered with an unreadable body")
        try:
            return ProductInfo(
                product_id=str(data["product_id"]),
                title=data["title"],
                price=float(data["price"]),
                quantity_in_stock=int(data["quantity_in_stock"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogueUnavailable(f"Product lookup for {product_id} answered with a malformed product") from exc
