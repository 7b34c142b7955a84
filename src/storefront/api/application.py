"""FastAPI application factory.

The factory does not initialize the domain; the uvicorn entrypoint
(``src/app.py``) and the test fixtures each do that exactly once.
"""

import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.errors import register_exception_handlers
from storefront.api.routes import (
    address_router,
    admin_router,
    auth_router,
    cart_router,
    order_router,
    product_router,
)
from storefront.domain import storefront
from storefront.utils.logging import bind_request_context


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        description="E-commerce backend: catalogue, cart, address book and order placement",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context and a fresh log context for each request."""
        bind_request_context(method=request.method, path=request.url.path)
        with storefront.domain_context():
            return await call_next(request)

    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(admin_router)
    app.include_router(cart_router)
    app.include_router(address_router)
    app.include_router(order_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app
