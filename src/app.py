"""Storefront FastAPI application.

Web server that processes commands synchronously via HTTP. Every request runs
inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 4000 --reload
"""

import os

from storefront.api.application import create_app
from storefront.domain import logger, storefront

# Initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay from domain.toml is applied.
storefront.init()

app = create_app()
logger.info("Storefront API ready", environment=os.getenv("ENVIRONMENT", "development"))
