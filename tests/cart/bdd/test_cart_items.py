"""BDD tests for cart lines."""

from pytest_bdd import parsers, scenarios, when

from storefront.errors import StorefrontError

scenarios("features/cart_items.feature")


@when(parsers.cfparse('{qty:d} of product "{product_id}" are added'))
def add_product(cart, qty, product_id):
    cart.add_item(product_id, qty)


@when(parsers.cfparse('the line "{item_id}" is removed'))
def remove_line(cart, item_id, error):
    try:
        cart.remove_item(item_id)
    except StorefrontError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the line "{item_id}" is increased'))
def increase_unknown_line(cart, item_id, error):
    try:
        cart.increase_item(item_id)
    except StorefrontError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the line for product "{product_id}" is increased'))
def increase_line(cart, product_id):
    cart.increase_item(cart.line_for(product_id).id)


@when(parsers.cfparse('the cart is checked out as order "{order_id}"'))
def check_out(cart, order_id):
    cart.check_out(order_id)
