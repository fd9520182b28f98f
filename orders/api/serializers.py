"""Orders API serializers.

Input serializers only check the shape of request bodies (types, bounds,
allowed values). Business rules such as "custom requests need a title" or
"price only on custom requests" live in the order service so they apply to
every caller.
"""

from decimal import Decimal

from rest_framework import serializers

from orders.models import Order
from orders.transitions import ARTISAN_STATUS_ACTIONS, CUSTOMER_RESPONSE_ACTIONS


class OrderCreateSerializer(serializers.Serializer):
    """Input serializer for placing an order or raising a custom request.

    Price fields are deliberately absent: anything the client sends for them
    is dropped here and the service prices the order itself.
    """

    artisan_id = serializers.IntegerField(required=True)
    catalog_item_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    quantity = serializers.IntegerField(
        required=False, min_value=1, max_value=Order.MAX_QUANTITY, default=1
    )
    note = serializers.CharField(required=False, allow_blank=True, default="")
    title = serializers.CharField(required=False, allow_blank=True, max_length=200, default="")
    delivery_date = serializers.DateField(required=False, allow_null=True, default=None)
    reference_image = serializers.CharField(required=False, allow_blank=True, max_length=500, default="")


class OrderOutputSerializer(serializers.ModelSerializer):
    """Read serializer for returning a complete order representation."""

    class Meta:
        model = Order
        fields = [
            "id",
            "customer",
            "artisan",
            "kind",
            "catalog_item_id",
            "title",
            "cover_image",
            "quantity",
            "unit_price",
            "total_price",
            "note",
            "status",
            "delivery_date",
            "created_at",
            "updated_at",
        ]


class OrderStatusUpdateSerializer(serializers.Serializer):
    """Artisan update body: a new status, or a price offer for a custom request."""

    status = serializers.ChoiceField(choices=sorted(ARTISAN_STATUS_ACTIONS), required=False)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0.01"), required=False
    )

    def validate(self, attrs):
        if "status" not in attrs and "price" not in attrs:
            raise serializers.ValidationError("Provide a status or a price.")
        if "status" in attrs and "price" in attrs:
            raise serializers.ValidationError("Send either a status or a price, not both.")
        return attrs


class OrderResponseSerializer(serializers.Serializer):
    """Customer answer to an offer."""

    action = serializers.ChoiceField(choices=sorted(CUSTOMER_RESPONSE_ACTIONS))
    note = serializers.CharField(required=False, allow_blank=True, default="")
