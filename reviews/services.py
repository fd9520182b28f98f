"""
Review submission.

Stores a customer's review of an artisan, refreshes the artisan's rating
aggregate in the same transaction and tells the artisan afterwards.
"""
from __future__ import annotations

import logging
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Avg, Count

from common.exceptions import Forbidden, InvalidInput, NotFound
from notifications.models import Notification
from notifications.recipients import Recipient
from notifications.sink import NotificationSink
from profiles.models import Profile
from reviews.models import Review
from user_auth_app.actors import Actor

logger = logging.getLogger(__name__)

User = get_user_model()

MIN_STARS = 1
MAX_STARS = 5


class ReviewService:
    def __init__(self, notifier: NotificationSink | None = None):
        self.notifier = notifier or NotificationSink()

    def create_review(self, actor: Actor, artisan_id: int, stars: int, comment: str) -> Review:
        if not actor.is_customer:
            raise Forbidden("Only customers can write reviews.")
        artisan = User.objects.filter(id=artisan_id, profile__type=Profile.Type.ARTISAN).first()
        if artisan is None:
            raise NotFound("Artisan not found.")
        if stars is None or not MIN_STARS <= stars <= MAX_STARS:
            raise InvalidInput(f"Stars must be between {MIN_STARS} and {MAX_STARS}.")
        comment = (comment or "").strip()
        if not comment:
            raise InvalidInput("A comment is required.")
        if Review.objects.filter(artisan=artisan, customer_id=actor.id).exists():
            raise InvalidInput("You have already reviewed this artisan.")

        try:
            with transaction.atomic():
                review = Review.objects.create(
                    artisan=artisan, customer_id=actor.id, stars=stars, comment=comment
                )
                self._refresh_rating(artisan.id)
        except IntegrityError:
            raise InvalidInput("You have already reviewed this artisan.")

        recipient = Recipient.artisan(artisan.id)
        logger.info("review_created", extra={"actor": str(actor), "recipient": str(recipient)})
        customer_name = User.objects.filter(id=actor.id).values_list("username", flat=True).first()
        self.notifier.send(
            recipient=recipient,
            sender=Recipient.customer(actor.id),
            message=f"You received a new {stars}-star review from {customer_name}",
            type=Notification.Type.REVIEW,
        )
        return review

    def list_reviews(self, artisan_id: int):
        """An artisan's reviews, newest first."""
        if not User.objects.filter(id=artisan_id, profile__type=Profile.Type.ARTISAN).exists():
            raise NotFound("Artisan not found.")
        return (
            Review.objects.filter(artisan_id=artisan_id)
            .select_related("customer")
            .order_by("-created_at", "-id")
        )

    def _refresh_rating(self, artisan_id: int) -> None:
        agg = Review.objects.filter(artisan_id=artisan_id).aggregate(avg=Avg("stars"), count=Count("id"))
        average = Decimal(str(agg["avg"] or 0)).quantize(Decimal("0.01"))
        Profile.objects.filter(user_id=artisan_id).update(
            average_rating=average, review_count=agg["count"]
        )
