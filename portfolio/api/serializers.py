"""Portfolio API serializers."""

from decimal import Decimal

from rest_framework import serializers

from ..models import PortfolioItem


class PortfolioItemSerializer(serializers.ModelSerializer):
    """Read/create serializer; the owning artisan always comes from the request."""

    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))

    class Meta:
        model = PortfolioItem
        fields = [
            "id",
            "artisan",
            "title",
            "description",
            "price",
            "cover_image",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "artisan", "created_at", "updated_at"]

    def create(self, validated_data):
        return PortfolioItem.objects.create(artisan=self.context["request"].user, **validated_data)
