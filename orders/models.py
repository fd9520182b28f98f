"""Orders app models.

Defines the Order model. An Order is either placed from an artisan's portfolio
item (price known up front) or raised as a custom request (price negotiated
later). Display fields are snapshotted at creation so the order stays stable
even if the portfolio item is edited or removed.
"""

from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Order(models.Model):
    """Represents an order between a customer and an artisan."""

    class Kind(models.TextChoices):
        PORTFOLIO_ORDER = "portfolio_order", "portfolio_order"
        CUSTOM_REQUEST = "custom_request", "custom_request"

    class Status(models.TextChoices):
        PENDING = "pending", "pending"
        OFFER_MADE = "offer_made", "offer_made"
        ACCEPTED = "accepted", "accepted"
        COMPLETED = "completed", "completed"
        CANCELLED = "cancelled", "cancelled"

    TERMINAL_STATUSES = frozenset({Status.ACCEPTED.value, Status.COMPLETED.value, Status.CANCELLED.value})
    MAX_QUANTITY = 1000
    # Largest values the price columns can hold.
    MAX_TOTAL = Decimal("9999999999.99")
    MAX_UNIT_PRICE = Decimal("99999999.99")

    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="orders_placed",
    )
    artisan = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="orders_received",
    )
    kind = models.CharField(max_length=20, choices=Kind.choices)
    # Plain id, not a foreign key: the order must outlive the portfolio item.
    catalog_item_id = models.PositiveBigIntegerField(null=True, blank=True)

    title = models.CharField(max_length=200)
    cover_image = models.CharField(max_length=500, blank=True, default="")
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal("0.00"), validators=[MinValueValidator(0)]
    )
    total_price = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00"), validators=[MinValueValidator(0)]
    )
    note = models.TextField(blank=True, default="")
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    delivery_date = models.DateField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at", "-id")
        indexes = [
            models.Index(fields=("customer", "status"), name="order_customer_status_idx"),
            models.Index(fields=("artisan", "status"), name="order_artisan_status_idx"),
        ]

    @property
    def is_terminal(self) -> bool:
        return self.status in self.TERMINAL_STATUSES

    @property
    def is_custom_request(self) -> bool:
        return self.kind == self.Kind.CUSTOM_REQUEST

    def __str__(self) -> str:
        """Readable representation for admin and debugging."""
        return f"Order<{self.id} {self.title} {self.status}>"
