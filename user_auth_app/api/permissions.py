"""Auth API permissions.

Lightweight permissions used by registration/login endpoints and the
role gates shared by the marketplace apps.
"""

from rest_framework.permissions import AllowAny, BasePermission

from user_auth_app.actors import Role, get_actor


class AllowAnyRegistration(AllowAny):
    """Explicit alias for registration endpoints (semantics: allow any)."""
    pass


class AllowedAnyLogin(AllowAny):
    """Explicit alias for login endpoints (semantics: allow any)."""
    pass


class HasActorRole(BasePermission):
    """Allow access only to authenticated users acting in `role`."""

    role = None
    message = "You are not allowed to perform this action."

    def has_permission(self, request, view):
        actor = get_actor(request)
        return actor is not None and actor.role == self.role


class IsCustomer(HasActorRole):
    """Customer-only gate (e.g. placing and answering orders)."""

    role = Role.CUSTOMER
    message = "Only customers may perform this action."


class IsArtisan(HasActorRole):
    """Artisan-only gate (e.g. pricing orders, publishing portfolio items)."""

    role = Role.ARTISAN
    message = "Only artisans may perform this action."


class HasMarketplaceRole(BasePermission):
    """Allow any authenticated user that resolves to an Actor."""

    message = "Authenticated user has no marketplace role."

    def has_permission(self, request, view):
        return get_actor(request) is not None
