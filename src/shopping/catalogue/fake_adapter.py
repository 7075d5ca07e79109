"""Fake product catalog — an in-memory stock list for tests and development."""

from shared.deadline import Deadline

from shopping.catalogue.port import CataloguePort, CatalogueUnavailable, ProductInfo, UnavailableProduct


class FakeCatalogue(CataloguePort):
    """Products live in a dict; the catalog can be made unreachable."""

    def __init__(self) -> None:
        self.products: dict[str, ProductInfo] = {}
        self.available = True
        self.calls: list[dict] = []

    def configure(self, available: bool = True) -> None:
        self.available = available

    def add_product(self, product_id: str, title: str, price: float, quantity_in_stock: int) -> ProductInfo:
        product = ProductInfo(
            product_id=str(product_id),
            title=title,
            price=price,
            quantity_in_stock=quantity_in_stock,
        )
        self.products[product.product_id] = product
        return product

    def check_availability(
        self,
        items: list[tuple[str, int]],
        deadline: Deadline | None = None,
    ) -> list[UnavailableProduct]:
        self.calls.append({"method": "check_availability", "items": list(items)})
        if not self.available:
            raise CatalogueUnavailable("Catalog unreachable")

        insufficient = []
        for product_id, quantity in items:
            product = self.products.get(str(product_id))
            if product is None:
                insufficient.append(UnavailableProduct(product_id=str(product_id), title="", quantity_in_stock=0))
            elif product.quantity_in_stock < quantity:
                insufficient.append(
                    UnavailableProduct(
                        product_id=product.product_id,
                        title=product.title,
                        quantity_in_stock=product.quantity_in_stock,
                    )
                )
        return insufficient

    def get_product(self, product_id: str, deadline: Deadline | None = None) -> ProductInfo | None:
        self.calls.append({"method": "get_product", "product_id": str(product_id)})
        if not self.available:
            raise CatalogueUnavailable("Catalog unreachable")
        return self.products.get(str(product_id))
