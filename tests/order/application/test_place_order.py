"""Application tests for order placement."""

from datetime import UTC, datetime, timedelta

import pytest
from protean import current_domain

from storefront.addresses.management import AddAddress
from storefront.cart.cart import Cart
from storefront.cart.items import AddToCart
from storefront.catalogue.management import AddProduct, RemoveProduct
from storefront.catalogue.product import Product
from storefront.errors import (
    AddressForbidden,
    AddressNotFound,
    ArtifactGenerationFailed,
    EmptyCart,
    ProductUnavailable,
)
from storefront.order.order import Order, OrderStatus
from storefront.order.placement import PlaceOrder, verification_key
from storefront.order.verification import set_generator
from storefront.order.verification.fake_adapter import FakeArtifactGenerator
from storefront.order.view import order_view, orders_view

USER = "user-001"
OTHER_USER = "user-002"


def _process(command):
    return current_domain.process(command, asynchronous=False)


def _add_product(name, price_cents):
    return _process(AddProduct(name=name, price_cents=price_cents))


def _add_address(user_id=USER, is_default=False):
    return _process(
        AddAddress(
            user_id=user_id,
            street="1 Main St",
            city="Springfield",
            zip_code="62701",
            country="US",
            is_default=is_default,
        )
    )


def _add_to_cart(product_id, quantity, user_id=USER):
    _process(AddToCart(user_id=user_id, product_id=product_id, quantity=quantity))


def _place(address_id, user_id=USER, **kwargs):
    return _process(PlaceOrder(user_id=user_id, address_id=address_id, **kwargs))


def _orders(user_id=USER):
    return current_domain.repository_for(Order).for_user(user_id)


def _cart(user_id=USER):
    return current_domain.repository_for(Cart).for_user(user_id)


@pytest.fixture()
def filled_cart():
    """P1 at 10.00 x2 and P2 at 5.00 x1 in USER's cart."""
    p1 = _add_product("P1", 1000)
    p2 = _add_product("P2", 500)
    _add_to_cart(p1, 2)
    _add_to_cart(p2, 1)
    return p1, p2


class TestPlaceOrder:
    def test_snapshot_total_and_cart_drained(self, filled_cart):
        address_id = _add_address()

        order_id = _place(address_id)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.total_amount_cents == 2500
        assert len(order.items) == 2
        assert order.status == OrderStatus.PENDING.value
        assert order.address_id == address_id
        assert order.user_id == USER

        cart = _cart()
        assert cart is not None
        assert cart.is_empty

    def test_unit_prices_are_copied(self, filled_cart):
        p1, p2 = filled_cart
        order = current_domain.repository_for(Order).get(_place(_add_address()))

        prices = {item.product_id: (item.quantity, item.unit_price_cents) for item in order.items}
        assert prices == {p1: (2, 1000), p2: (1, 500)}

    def test_delivery_type_recorded(self, filled_cart):
        order_id = _place(_add_address(), delivery_type="express")
        assert current_domain.repository_for(Order).get(order_id).delivery_type == "express"

    def test_price_change_does_not_touch_existing_order(self, filled_cart):
        p1, _ = filled_cart
        order_id = _place(_add_address())

        repo = current_domain.repository_for(Product)
        product = repo.get(p1)
        product.price_cents = 99900
        repo.add(product)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.total_amount_cents == 2500
        assert {item.unit_price_cents for item in order.items} == {1000, 500}
        assert order_view(order)["total_amount"] == 25.0

    def test_cart_can_be_refilled_after_placement(self, filled_cart):
        p1, _ = filled_cart
        _place(_add_address())
        _add_to_cart(p1, 1)

        assert len(_cart().items) == 1


class TestPlaceOrderFailures:
    def test_no_cart(self):
        with pytest.raises(EmptyCart):
            _place(_add_address())
        assert _orders() == []

    def test_empty_cart(self, filled_cart):
        address_id = _add_address()
        _place(address_id)

        with pytest.raises(EmptyCart):
            _place(address_id)
        assert len(_orders()) == 1

    def test_unknown_address(self, filled_cart):
        with pytest.raises(AddressNotFound):
            _place("no-such-address")
        assert len(_cart().items) == 2

    def test_someone_elses_address(self, filled_cart):
        foreign_address = _add_address(user_id=OTHER_USER)

        with pytest.raises(AddressForbidden):
            _place(foreign_address)

        assert _orders() == []
        assert len(_cart().items) == 2

    def test_product_removed_from_catalogue(self, filled_cart):
        p1, _ = filled_cart
        _process(RemoveProduct(product_id=p1))

        with pytest.raises(ProductUnavailable):
            _place(_add_address())

        assert _orders() == []
        assert len(_cart().items) == 2


class TestVerificationArtifacts:
    def test_no_artifact_when_disabled(self, filled_cart):
        order = current_domain.repository_for(Order).get(_place(_add_address()))
        assert order.verification_artifact is None

    def test_artifact_keyed_by_user_and_time(self, filled_cart):
        fake = FakeArtifactGenerator()
        set_generator(fake)

        order = current_domain.repository_for(Order).get(_place(_add_address()))

        assert len(fake.calls) == 1
        user_part, millis = fake.calls[0].split(":")
        assert user_part == USER
        assert millis.isdigit()
        assert order.verification_artifact == f"fake-artifact:{fake.calls[0]}"

    def test_failure_aborts_placement_by_default(self, filled_cart):
        fake = FakeArtifactGenerator()
        fake.configure(should_succeed=False)
        set_generator(fake)

        with pytest.raises(ArtifactGenerationFailed):
            _place(_add_address())

        assert _orders() == []
        assert len(_cart().items) == 2

    def test_failure_tolerated_when_fail_open(self, filled_cart, monkeypatch):
        from storefront.config import get_settings

        monkeypatch.setenv("ORDER_VERIFICATION_FAIL_OPEN", "1")
        get_settings.cache_clear()
        fake = FakeArtifactGenerator()
        fake.configure(should_succeed=False)
        set_generator(fake)

        order = current_domain.repository_for(Order).get(_place(_add_address()))

        assert order.verification_artifact is None
        assert _cart().is_empty


class TestOrderViews:
    def test_resolves_products_and_address(self, filled_cart):
        address_id = _add_address()
        order = current_domain.repository_for(Order).get(_place(address_id))

        view = order_view(order)
        assert view["address"]["id"] == address_id
        assert view["total_amount"] == 25.0
        assert {line["product"]["name"] for line in view["items"]} == {"P1", "P2"}

    def test_lists_only_own_orders(self, filled_cart):
        _place(_add_address())

        assert len(orders_view(USER)) == 1
        assert orders_view(OTHER_USER) == []


class TestVerificationKey:
    def test_user_and_epoch_millis(self):
        from datetime import UTC, datetime

        placed_at = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
        assert verification_key("user-001", placed_at) == "user-001:1704164645678"


class TestOrderHistory:
    def test_full_history_newest_first(self):
        repo = current_domain.repository_for(Order)
        start = datetime(2024, 1, 1, tzinfo=UTC)
        line = {"product_id": "p-1", "quantity": 1, "unit_price_cents": 100}

        # More orders than a single default query page holds
        placed = []
        for n in range(120):
            order = Order.place(USER, "addr-1", [line], placed_at=start + timedelta(minutes=n))
            repo.add(order)
            placed.append(str(order.id))

        assert [str(o.id) for o in _orders()] == placed[::-1]
