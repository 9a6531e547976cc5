from django.contrib import admin

from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "hostel",
        "guest_name",
        "guest_email",
        "check_in",
        "check_out",
        "guests",
        "status",
        "created_at",
    )
    list_filter = ("status",)
    search_fields = ("guest_name", "guest_email", "hostel__name")
