from django.test import TestCase
from django.urls import reverse

from .models import PaymentInfo, SiteSettings


class SeededDefaultsTests(TestCase):
    def test_defaults_exist_after_migrate(self):
        self.assertEqual(SiteSettings.objects.count(), 1)
        self.assertEqual(PaymentInfo.objects.count(), 1)
        self.assertEqual(SiteSettings.load().site_name, "HostelHub")
        self.assertTrue(PaymentInfo.load().is_active)

    def test_load_creates_missing_row(self):
        SiteSettings.objects.all().delete()

        site_settings = SiteSettings.load()

        self.assertEqual(site_settings.site_tagline, "Find Your Perfect Stay")
        self.assertEqual(SiteSettings.objects.count(), 1)


class SitePagesTests(TestCase):
    def test_settings_are_available_to_every_page(self):
        site_settings = SiteSettings.load()
        site_settings.site_name = "Hostel Finder"
        site_settings.save()

        response = self.client.get(reverse("about"))

        self.assertEqual(response.context["settings"].site_name, "Hostel Finder")
        self.assertContains(response, "Hostel Finder")

    def test_contact_page_shows_contact_email(self):
        response = self.client.get(reverse("contact"))

        self.assertContains(response, "info@hostelhub.com")

    def test_payment_info_page_shows_active_details(self):
        response = self.client.get(reverse("payment_info"))

        self.assertContains(response, "Ghana Commercial Bank")
        self.assertEqual(response.context["payment_info"], PaymentInfo.load())

    def test_inactive_payment_info_is_hidden(self):
        PaymentInfo.objects.update(is_active=False)

        response = self.client.get(reverse("payment_info"))

        self.assertIsNone(response.context["payment_info"])
        self.assertNotContains(response, "Ghana Commercial Bank")
