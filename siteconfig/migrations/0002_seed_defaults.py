from django.db import migrations


def seed_defaults(apps, schema_editor):
    SiteSettings = apps.get_model("siteconfig", "SiteSettings")
    PaymentInfo = apps.get_model("siteconfig", "PaymentInfo")
    if not SiteSettings.objects.exists():
        SiteSettings.objects.create()
    if not PaymentInfo.objects.exists():
        PaymentInfo.objects.create()


class Migration(migrations.Migration):

    dependencies = [
        ("siteconfig", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_defaults, migrations.RunPython.noop),
    ]
