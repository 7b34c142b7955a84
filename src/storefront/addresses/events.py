"""Domain events for the Address aggregate."""

from protean.fields import Boolean, Identifier

from storefront.domain import storefront


@storefront.event(part_of="Address")
class AddressAdded:
    __version__ = 1

    address_id = Identifier(required=True)
    user_id = Identifier(required=True)
    is_default = Boolean(default=False)


@storefront.event(part_of="Address")
class DefaultAddressCleared:
    """Another address became the default, so this one no longer is."""

    __version__ = 1

    address_id = Identifier(required=True)
    user_id = Identifier(required=True)
