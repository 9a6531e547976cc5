from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin

from .models import Profile

User = get_user_model()


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    fields = ("full_name", "phone", "role")


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("full_name", "email", "phone", "role", "created_at")
    list_filter = ("role",)
    search_fields = ("full_name", "phone", "user__email")
    readonly_fields = ("created_at",)
    list_select_related = ("user",)


class HostelHubUserAdmin(UserAdmin):
    inlines = (ProfileInline,)
    list_display = ("email", "full_name", "role", "is_staff", "date_joined")
    list_filter = ("profile__role", "is_staff", "is_active")
    search_fields = ("email", "profile__full_name")
    ordering = ("-date_joined",)

    @admin.display(description="Name")
    def full_name(self, user):
        profile = getattr(user, "profile", None)
        return profile.full_name if profile else user.get_full_name()

    @admin.display(description="Role")
    def role(self, user):
        profile = getattr(user, "profile", None)
        return profile.get_role_display() if profile else ""


admin.site.unregister(User)
admin.site.register(User, HostelHubUserAdmin)
