"""Shared BDD fixtures and step definitions for the cart."""

import pytest
from pytest_bdd import given, parsers, then

from storefront.cart.cart import Cart
from storefront.cart.events import CartCheckedOut, CartItemAdded, CartItemIncreased, CartItemRemoved

# Map event name strings to classes for dynamic lookup in Then steps
_CART_EVENT_CLASSES = {
    "CartItemAdded": CartItemAdded,
    "CartItemRemoved": CartItemRemoved,
    "CartItemIncreased": CartItemIncreased,
    "CartCheckedOut": CartCheckedOut,
}


@pytest.fixture()
def error():
    """Container for a captured domain error."""
    return {"exc": None}


@given(parsers.cfparse('an empty cart for user "{user_id}"'), target_fixture="cart")
def empty_cart(user_id):
    return Cart.create(user_id=user_id)


@given(parsers.cfparse('{qty:d} of product "{product_id}" are in the cart'))
def cart_has_product(cart, qty, product_id):
    cart.add_item(product_id, qty)
    cart._events.clear()


@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_n_lines_singular(cart, count):
    assert len(cart.items) == count


@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_n_lines(cart, count):
    assert len(cart.items) == count


@then(parsers.cfparse('the line for product "{product_id}" has quantity {qty:d}'))
def line_has_quantity(cart, product_id, qty):
    assert cart.line_for(product_id).quantity == qty


@then(parsers.cfparse("a {event_name} event is raised"))
def event_raised(cart, event_name):
    event_cls = _CART_EVENT_CLASSES[event_name]
    assert any(isinstance(e, event_cls) for e in cart._events)


@then("no error was raised")
def no_error(error):
    assert error["exc"] is None


@then(parsers.cfparse('the error is "{code}"'))
def error_code(error, code):
    assert error["exc"] is not None
    assert error["exc"].code == code
