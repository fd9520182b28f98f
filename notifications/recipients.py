"""Addressing for notifications."""

from dataclasses import dataclass

from profiles.models import Profile


@dataclass(frozen=True)
class Recipient:
    """A user addressed in one specific role (customer, artisan or admin)."""

    role: str
    id: int

    @classmethod
    def customer(cls, user_id: int) -> "Recipient":
        return cls(Profile.Type.CUSTOMER.value, user_id)

    @classmethod
    def artisan(cls, user_id: int) -> "Recipient":
        return cls(Profile.Type.ARTISAN.value, user_id)

    @classmethod
    def admin(cls, user_id: int) -> "Recipient":
        return cls(Profile.Type.ADMIN.value, user_id)

    def __str__(self) -> str:
        return f"{self.role}:{self.id}"
