"""Reviews API serializers.

The create serializer checks shape and bounds only; who may review whom and
the one-review-per-artisan rule are enforced by the review service.
"""

from rest_framework import serializers

from reviews.models import Review
from reviews.services import MAX_STARS, MIN_STARS


class ReviewCreateSerializer(serializers.Serializer):
    """Input serializer for creating a new review."""

    artisan_id = serializers.IntegerField(required=True)
    stars = serializers.IntegerField(min_value=MIN_STARS, max_value=MAX_STARS, required=True)
    comment = serializers.CharField(required=True)


class ReviewOutputSerializer(serializers.ModelSerializer):
    """Read serializer for returning a review."""

    customer_username = serializers.CharField(source="customer.username", read_only=True)

    class Meta:
        model = Review
        fields = [
            "id",
            "artisan",
            "customer",
            "customer_username",
            "stars",
            "comment",
            "created_at",
            "updated_at",
        ]
