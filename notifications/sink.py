"""Best-effort notification delivery.

`NotificationSink.send` never raises: the caller has already committed its own
write when it notifies, and a lost notification is an accepted degradation.
Failures are logged with enough context to replay them by hand.
"""

import logging

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction

from notifications.models import Notification
from notifications.recipients import Recipient

logger = logging.getLogger(__name__)


class NotificationSink:
    """Stores in-app notifications and optionally mirrors them by email.

    Email delivery goes through Django's mail backend, whose SMTP connection is
    bounded by `EMAIL_TIMEOUT`.
    """

    def __init__(self, email_enabled: bool | None = None):
        if email_enabled is None:
            email_enabled = getattr(settings, "NOTIFICATIONS_EMAIL_ENABLED", False)
        self.email_enabled = email_enabled

    def send(
        self,
        recipient: Recipient,
        sender: Recipient,
        message: str,
        type: str,
        order_id: int | None = None,
    ) -> Notification | None:
        """Deliver `message` to `recipient`; return the stored row or None on failure."""
        log_extra = {"recipient": str(recipient), "actor": str(sender), "order_id": order_id}
        try:
            # Own savepoint so a failed insert cannot poison an enclosing transaction.
            with transaction.atomic():
                notification = Notification.objects.create(
                    recipient_id=recipient.id,
                    recipient_role=recipient.role,
                    sender_id=sender.id,
                    sender_role=sender.role,
                    message=message,
                    type=type,
                )
        except Exception:
            logger.exception("notification_store_failed", extra=log_extra)
            return None

        logger.info("notification_sent", extra=log_extra)
        if self.email_enabled:
            self._send_email(notification, log_extra)
        return notification

    def _send_email(self, notification: Notification, log_extra: dict) -> None:
        try:
            address = notification.recipient.email
            if not address:
                return
            send_mail(
                subject="Craft Market: new notification",
                message=notification.message,
                from_email=None,
                recipient_list=[address],
                fail_silently=False,
            )
        except Exception:
            logger.warning("notification_email_failed", extra=log_extra, exc_info=True)
