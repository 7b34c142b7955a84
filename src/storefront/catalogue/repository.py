"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.query import Q

from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.repository(part_of=Product)
class ProductRepository:
    def find(self, product_id) -> Product | None:
        """Return the product, or None when it is not (or no longer) in the catalogue."""
        try:
            return self.get(str(product_id))
        except ObjectNotFoundError:
            return None

    def find_many(self, product_ids) -> dict[str, Product]:
        """Resolve a set of ids into a ``{id: Product}`` map, skipping missing ones."""
        found = {}
        for product_id in {str(pid) for pid in product_ids}:
            product = self.find(product_id)
            if product is not None:
                found[product_id] = product
        return found

    def listing(self) -> list[Product]:
        """All products, newest first."""
        return self._dao.query.order_by("-created_at").limit(None).all().items

    def search(self, term: str) -> list[Product]:
        """Case-insensitive substring match over name and description, newest first."""
        needle = (term or "").strip()
        if not needle:
            return []

        matches = Q(name__icontains=needle) | (Q(description__isnull=False) & Q(description__icontains=needle))
        return self._dao.query.filter(matches).order_by("-created_at").limit(None).all().items
