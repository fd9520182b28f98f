from django.contrib import admin
from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """
    Reviews by artisan and customer. Ratings are edited only through the API
    so the artisan's aggregate stays in sync.
    """
    list_display = ("id", "artisan", "customer", "stars", "created_at")
    list_select_related = ("artisan", "customer")
    list_filter = ("stars", "created_at")
    search_fields = ("comment", "artisan__username", "customer__username")
    ordering = ("-created_at", "-id")
    readonly_fields = ("artisan", "customer", "stars", "created_at", "updated_at")

    def has_add_permission(self, request):
        return False
