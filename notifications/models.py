"""Notifications app models.

A Notification is a one-way message to a single user. Sender and recipient
are stored together with the role each acted in, so a user who is both a
customer and an artisan over time still gets unambiguous messages.
"""

from django.conf import settings
from django.db import models

from profiles.models import Profile


class Notification(models.Model):
    """Represents a message delivered to one recipient."""

    class Type(models.TextChoices):
        BOOKING = "booking", "booking"
        STATUS_UPDATE = "status_update", "status_update"
        REVIEW = "review", "review"
        SYSTEM_ALERT = "system_alert", "system_alert"
        COMMENT = "comment", "comment"

    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications_received",
    )
    recipient_role = models.CharField(max_length=20, choices=Profile.Type.choices)
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications_sent",
    )
    sender_role = models.CharField(max_length=20, choices=Profile.Type.choices)
    message = models.TextField()
    type = models.CharField(max_length=20, choices=Type.choices)
    is_read = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at", "-id")
        indexes = [
            models.Index(fields=("recipient", "is_read"), name="notif_recipient_read_idx"),
        ]

    def __str__(self) -> str:
        return f"Notification<{self.id} {self.sender_id}->{self.recipient_id} {self.type}>"
