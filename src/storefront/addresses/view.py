"""Read-side rendering of addresses."""

from protean.utils.globals import current_domain

from storefront.addresses.address import Address


def address_view(address: Address) -> dict:
    return {
        "id": str(address.id),
        "user_id": str(address.user_id),
        "street": address.street,
        "city": address.city,
        "zip_code": address.zip_code,
        "country": address.country,
        "is_default": bool(address.is_default),
        "created_at": address.created_at,
    }


def address_book_view(user_id) -> list[dict]:
    return [address_view(a) for a in current_domain.repository_for(Address).for_user(user_id)]
