"""Portfolio app models.

A PortfolioItem is a priced, titled piece of an artisan's published work that
customers can order directly.
"""

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class PortfolioItem(models.Model):
    """Represents one orderable item in an artisan's catalog."""

    artisan = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="portfolio_items",
    )
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )
    cover_image = models.CharField(max_length=500, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.title} (#{self.pk})"
