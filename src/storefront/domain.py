"""Storefront domain: catalogue, address book, cart and order placement.

A single Protean domain hosts every aggregate so that order placement can
read the cart, the selected address and live product prices, and write the
order and the emptied cart, inside one unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
