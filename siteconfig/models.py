from django.db import models


class SiteSettings(models.Model):
    site_name = models.CharField(max_length=100, default="HostelHub")
    site_tagline = models.CharField(max_length=200, default="Find Your Perfect Stay")
    contact_email = models.EmailField(blank=True, default="info@hostelhub.com")
    contact_phone = models.CharField(max_length=30, blank=True, default="+233 XX XXX XXXX")
    contact_address = models.CharField(max_length=255, blank=True, default="")
    about_text = models.TextField(
        blank=True,
        default=(
            "Welcome to HostelHub - your trusted platform for finding comfortable "
            "and affordable hostel accommodations."
        ),
    )
    footer_text = models.TextField(blank=True, default="")

    class Meta:
        verbose_name_plural = "site settings"

    def __str__(self) -> str:
        return self.site_name

    @classmethod
    def load(cls):
        settings_row = cls.objects.order_by("id").first()
        if settings_row is None:
            settings_row = cls.objects.create()
        return settings_row


class PaymentInfo(models.Model):
    bank_name = models.CharField(max_length=150, blank=True, default="Ghana Commercial Bank")
    account_number = models.CharField(max_length=50, blank=True, default="1234567890")
    account_name = models.CharField(max_length=150, blank=True, default="HostelHub Ltd")
    momo_provider = models.CharField(max_length=100, blank=True, default="MTN Mobile Money")
    momo_number = models.CharField(max_length=30, blank=True, default="0241234567")
    momo_name = models.CharField(max_length=150, blank=True, default="HostelHub")
    instructions = models.TextField(
        blank=True,
        default="Please include your booking reference in the payment description.",
    )
    is_active = models.BooleanField(default=True)

    class Meta:
        verbose_name_plural = "payment info"

    def __str__(self) -> str:
        return f"{self.bank_name} / {self.momo_provider}"

    @classmethod
    def load(cls):
        payment_info = cls.objects.order_by("id").first()
        if payment_info is None:
            payment_info = cls.objects.create()
        return payment_info

    @classmethod
    def active(cls):
        return cls.objects.filter(is_active=True).order_by("id").first()
