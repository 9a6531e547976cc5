from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SiteSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("site_name", models.CharField(default="HostelHub", max_length=100)),
                ("site_tagline", models.CharField(default="Find Your Perfect Stay", max_length=200)),
                ("contact_email", models.EmailField(blank=True, default="info@hostelhub.com", max_length=254)),
                ("contact_phone", models.CharField(blank=True, default="+233 XX XXX XXXX", max_length=30)),
                ("contact_address", models.CharField(blank=True, default="", max_length=255)),
                (
                    "about_text",
                    models.TextField(
                        blank=True,
                        default=(
                            "Welcome to HostelHub - your trusted platform for finding comfortable "
                            "and affordable hostel accommodations."
                        ),
                    ),
                ),
                ("footer_text", models.TextField(blank=True, default="")),
            ],
            options={
                "verbose_name_plural": "site settings",
            },
        ),
        migrations.CreateModel(
            name="PaymentInfo",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("bank_name", models.CharField(blank=True, default="Ghana Commercial Bank", max_length=150)),
                ("account_number", models.CharField(blank=True, default="1234567890", max_length=50)),
                ("account_name", models.CharField(blank=True, default="HostelHub Ltd", max_length=150)),
                ("momo_provider", models.CharField(blank=True, default="MTN Mobile Money", max_length=100)),
                ("momo_number", models.CharField(blank=True, default="0241234567", max_length=30)),
                ("momo_name", models.CharField(blank=True, default="HostelHub", max_length=150)),
                (
                    "instructions",
                    models.TextField(
                        blank=True,
                        default="Please include your booking reference in the payment description.",
                    ),
                ),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={
                "verbose_name_plural": "payment info",
            },
        ),
    ]
