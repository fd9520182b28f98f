from django.contrib import admin
from .models import PortfolioItem


@admin.register(PortfolioItem)
class PortfolioItemAdmin(admin.ModelAdmin):
    """
    Portfolio items with owner, price and timestamps.
    """
    list_display = ("id", "title", "artisan_username", "price", "updated_at")
    list_select_related = ("artisan",)
    search_fields = ("title", "description", "artisan__username", "artisan__email")
    list_filter = ("updated_at",)
    date_hierarchy = "created_at"
    ordering = ("-updated_at", "-id")
    readonly_fields = ("created_at", "updated_at")

    def artisan_username(self, obj):
        return obj.artisan.username if obj.artisan_id else ""
    artisan_username.short_description = "artisan"
