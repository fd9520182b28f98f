from django.contrib import admin
from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    """
    Read-mostly view of delivered notifications.
    """
    list_display = ("id", "recipient", "recipient_role", "sender", "sender_role", "type", "is_read", "created_at")
    list_select_related = ("recipient", "sender")
    list_filter = ("type", "is_read", "recipient_role", "created_at")
    search_fields = ("message", "recipient__username", "sender__username")
    ordering = ("-created_at", "-id")
    readonly_fields = ("recipient", "recipient_role", "sender", "sender_role", "message", "type", "created_at", "updated_at")
