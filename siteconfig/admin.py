from django.contrib import admin

from .models import PaymentInfo, SiteSettings


@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    list_display = ("site_name", "site_tagline", "contact_email", "contact_phone")


@admin.register(PaymentInfo)
class PaymentInfoAdmin(admin.ModelAdmin):
    list_display = ("bank_name", "account_number", "momo_provider", "momo_number", "is_active")
    list_filter = ("is_active",)
