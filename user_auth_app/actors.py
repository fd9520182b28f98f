"""Acting party resolution.

Every request is attributed to exactly one `Actor`: the authenticated user's
id tagged with the marketplace role stored on their profile. The role is
resolved once per request and cached on it, so permission classes, views and
services all see the same answer.
"""

from dataclasses import dataclass

from profiles.models import Profile

Role = Profile.Type

_CACHE_ATTR = "_marketplace_actor"


@dataclass(frozen=True)
class Actor:
    """A user acting in a specific marketplace role."""

    role: str
    id: int

    @classmethod
    def customer(cls, user_id: int) -> "Actor":
        return cls(Role.CUSTOMER.value, user_id)

    @classmethod
    def artisan(cls, user_id: int) -> "Actor":
        return cls(Role.ARTISAN.value, user_id)

    @classmethod
    def admin(cls, user_id: int) -> "Actor":
        return cls(Role.ADMIN.value, user_id)

    @property
    def is_customer(self) -> bool:
        return self.role == Role.CUSTOMER

    @property
    def is_artisan(self) -> bool:
        return self.role == Role.ARTISAN

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def __str__(self) -> str:
        return f"{self.role}:{self.id}"


def actor_for(user) -> Actor | None:
    """Return the Actor for an authenticated user, or None if it has no role.

    Staff users without a profile act as admins.
    """
    if not user or not user.is_authenticated:
        return None
    profile = getattr(user, "profile", None)
    role = getattr(profile, "type", "") if profile else ""
    if role in Role.values:
        return Actor(role, user.id)
    if user.is_staff:
        return Actor.admin(user.id)
    return None


def get_actor(request) -> Actor | None:
    """Resolve the request's Actor once and cache it on the underlying request."""
    raw = getattr(request, "_request", request)
    if not hasattr(raw, _CACHE_ATTR):
        setattr(raw, _CACHE_ATTR, actor_for(request.user))
    return getattr(raw, _CACHE_ATTR)
