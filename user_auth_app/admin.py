from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from profiles.models import Profile

User = get_user_model()

# Re-register the user model with the marketplace profile inline.
try:
    admin.site.unregister(User)
except admin.sites.NotRegistered:
    pass


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    fields = ("type", "craft_type", "location", "tel", "description")
    extra = 0


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    """
    Users with their marketplace role and craft; the profile is edited inline.
    """
    inlines = (ProfileInline,)
    list_display = ("id", "username", "email", "role", "craft", "is_staff", "date_joined")
    list_select_related = ("profile",)
    ordering = ("-date_joined", "-id")
    search_fields = ("username", "email", "profile__location")
    list_filter = ("profile__type", "profile__craft_type", "is_staff")

    @admin.display(description="role", ordering="profile__type")
    def role(self, obj):
        prof = getattr(obj, "profile", None)
        return prof.type if prof else "-"

    @admin.display(description="craft", ordering="profile__craft_type")
    def craft(self, obj):
        prof = getattr(obj, "profile", None)
        return (prof.craft_type or "-") if prof else "-"
