"""Orders API permissions.

Request-level gates for the order endpoints. Whether the user is a party to a
particular order is decided by the order service, which knows the order.
"""

from user_auth_app.api.permissions import HasMarketplaceRole, IsArtisan, IsCustomer


class IsOrderCustomer(IsCustomer):
    """Only customers may place, answer or cancel orders."""

    message = "Only customers may perform this action on orders."


class IsOrderArtisan(IsArtisan):
    """Only artisans may price orders or change their status."""

    message = "Only artisans may update order status or price."


class IsOrderParticipant(HasMarketplaceRole):
    """Any user with a marketplace role may read the orders they take part in."""
