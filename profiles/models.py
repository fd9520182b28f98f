"""Profiles app models.

Defines the Profile model that extends the base user with role information
(customer/artisan/admin) and a few display fields. String fields default to
empty strings to avoid nulls in API responses.
"""

from decimal import Decimal

from django.conf import settings
from django.db import models


class Profile(models.Model):
    """
    Profile for a single user.

    The `type` field is the user's marketplace role; it is read once per
    request to decide which side of an order the user acts on.
    """

    class Type(models.TextChoices):
        CUSTOMER = "customer", "customer"
        ARTISAN = "artisan", "artisan"
        ADMIN = "admin", "admin"

    class CraftType(models.TextChoices):
        TAILORING = "tailoring", "Tailoring"
        CARPENTRY = "carpentry", "Carpentry"
        EMBROIDERY = "embroidery", "Embroidery"
        POTTERY = "pottery", "Pottery"
        BLACKSMITH = "blacksmith", "Blacksmith"
        PAINTER = "painter", "Painter"
        OTHER = "other", "Other"

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    type = models.CharField(max_length=20, choices=Type.choices)
    craft_type = models.CharField(
        max_length=20, choices=CraftType.choices, blank=True, default=""
    )
    location = models.CharField(max_length=255, blank=True, default="")
    tel = models.CharField(max_length=50, blank=True, default="")
    description = models.TextField(blank=True, default="")
    # Artisan aggregate, recomputed whenever a review is stored.
    average_rating = models.DecimalField(max_digits=3, decimal_places=2, default=Decimal("0.00"))
    review_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        """Readable representation for admin and debugging."""
        return f"Profile<{self.user_id}:{self.type}>"
