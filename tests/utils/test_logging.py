import structlog

from storefront.utils.logging import _renderer, bind_request_context, bind_user


def test_request_context_starts_fresh():
    structlog.contextvars.bind_contextvars(stale="yes")

    bind_request_context(method="GET", path="/cart")
    bind_user(42)

    assert structlog.contextvars.get_contextvars() == {"method": "GET", "path": "/cart", "user_id": "42"}
    structlog.contextvars.clear_contextvars()


def test_production_renders_json():
    assert isinstance(_renderer("production"), structlog.processors.JSONRenderer)
    assert isinstance(_renderer("development"), structlog.dev.ConsoleRenderer)
