from django.contrib import admin
from django.utils.html import format_html
from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Order overview for moderation:
    - List: id, title, kind, status badge, customer, artisan, total, created
    - Filter: status, kind, created (date hierarchy)
    - Everything is read-only; status and prices only change through the API
    """
    list_display = (
        "id",
        "title",
        "kind",
        "status_badge",
        "customer_username",
        "artisan_username",
        "total_price",
        "created_at",
        "updated_at",
    )
    list_select_related = ("customer", "artisan")
    list_filter = ("status", "kind", "created_at")
    date_hierarchy = "created_at"
    ordering = ("-created_at", "-id")
    search_fields = ("title", "customer__username", "artisan__username")

    fields = (
        "status",
        "kind",
        "customer",
        "artisan",
        "catalog_item_id",
        "title",
        "cover_image",
        "quantity",
        "unit_price",
        "total_price",
        "note",
        "delivery_date",
        "created_at",
        "updated_at",
    )
    readonly_fields = fields

    def has_add_permission(self, request):
        return False

    def status_badge(self, obj):
        color = {
            "pending": "#f59e0b",
            "offer_made": "#0ea5e9",
            "accepted": "#6366f1",
            "completed": "#22c55e",
            "cancelled": "#ef4444",
        }.get(obj.status, "#9ca3af")
        return format_html(
            '<span style="display:inline-block;padding:2px 8px;border-radius:999px;'
            'font-size:12px;font-weight:600;color:#fff;background:{};">{}</span>',
            color,
            obj.status,
        )
    status_badge.short_description = "status"
    status_badge.admin_order_field = "status"

    def customer_username(self, obj):
        return obj.customer.username if obj.customer_id else ""
    customer_username.short_description = "customer"

    def artisan_username(self, obj):
        return obj.artisan.username if obj.artisan_id else ""
    artisan_username.short_description = "artisan"
