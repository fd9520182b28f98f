"""Reviews app models.

Defines the Review model. A customer can leave at most one review per
artisan. Ratings are constrained between 1 and 5 stars.
"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Review(models.Model):
    """A customer's rating of an artisan."""

    artisan = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="reviews_received",
    )
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="reviews_written",
    )

    stars = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    comment = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["artisan", "customer"],
                name="unique_review_per_artisan_and_customer",
            )
        ]
        ordering = ("-created_at", "-id")

    def __str__(self) -> str:
        return f"Review<{self.id} {self.customer_id}->{self.artisan_id} {self.stars}*>"
