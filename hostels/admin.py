from django.contrib import admin

from .models import Hostel


@admin.register(Hostel)
class HostelAdmin(admin.ModelAdmin):
	list_display = (
		"name",
		"location",
		"price",
		"rooms",
		"status",
		"featured",
		"created_at",
	)
	list_filter = ("status", "featured")
	search_fields = ("name", "location", "description")
