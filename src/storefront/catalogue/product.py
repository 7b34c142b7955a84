"""Product aggregate: a catalogue entry customers can put in their cart."""

from datetime import UTC, datetime

from protean.fields import DateTime, Integer, String, Text

from storefront.catalogue.events import ProductAdded
from storefront.domain import storefront

DEFAULT_CATEGORY = "General"


@storefront.aggregate
class Product:
    """A sellable item. ``price_cents`` is in minor units; stock is informational and never decremented."""

    name = String(required=True, max_length=255)
    description = Text(default="")
    price_cents = Integer(required=True, min_value=0)
    image = String(max_length=1000, default="")
    category = String(max_length=100, default=DEFAULT_CATEGORY)
    stock = Integer(default=0, min_value=0)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def add(cls, name, price_cents, description=None, image=None, category=None, stock=None):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description or "",
            price_cents=price_cents,
            image=image or "",
            category=category or DEFAULT_CATEGORY,
            stock=stock or 0,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=name,
                price_cents=price_cents,
                category=product.category,
                added_at=now,
            )
        )
        return product
