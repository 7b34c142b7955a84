"""Catalogue management (admin): commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import ProductNotFound
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    description = Text()
    price_cents = Integer(required=True, min_value=0)
    image = String(max_length=1000)
    category = String(max_length=100)
    stock = Integer(min_value=0)


@storefront.command(part_of="Product")
class RemoveProduct:
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageCatalogueHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            name=command.name,
            price_cents=command.price_cents,
            description=command.description,
            image=command.image,
            category=command.category,
            stock=command.stock,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("Product added", product_id=str(product.id), price_cents=product.price_cents)
        return str(product.id)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(str(command.product_id))
        except ObjectNotFoundError:
            raise ProductNotFound() from None

        repo._dao.delete(product)
        logger.info("Product removed", product_id=str(command.product_id))
