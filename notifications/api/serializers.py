"""Notifications API serializers."""

from rest_framework import serializers

from notifications.models import Notification


class NotificationOutputSerializer(serializers.ModelSerializer):
    """Read serializer for a single notification."""

    class Meta:
        model = Notification
        fields = [
            "id",
            "recipient",
            "recipient_role",
            "sender",
            "sender_role",
            "message",
            "type",
            "is_read",
            "created_at",
        ]
