import datetime
from decimal import Decimal

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.messages import get_messages
from django.test import TestCase
from django.urls import reverse

from bookings.models import Reservation
from hostels.models import Hostel
from siteconfig.models import PaymentInfo, SiteSettings

from .models import Profile
from .signals import ensure_admin_account


def flashed(response):
    return [str(message) for message in get_messages(response.wsgi_request)]


class AdminBootstrapTests(TestCase):
    def test_admin_account_exists_after_migrate(self):
        admins = Profile.objects.filter(role=Profile.Role.ADMIN)

        self.assertEqual(admins.count(), 1)
        admin_user = admins.get().user
        self.assertEqual(admin_user.email, settings.ADMIN_EMAIL)
        self.assertTrue(admin_user.check_password(settings.ADMIN_PASSWORD))
        self.assertTrue(admin_user.is_staff)

    def test_bootstrap_runs_only_once(self):
        ensure_admin_account(sender=None)
        ensure_admin_account(sender=None)

        self.assertEqual(Profile.objects.filter(role=Profile.Role.ADMIN).count(), 1)

    def test_existing_user_is_promoted_when_no_admin_exists(self):
        admin_user = get_user_model().objects.get(email=settings.ADMIN_EMAIL)
        Profile.objects.filter(user=admin_user).update(role=Profile.Role.USER)
        get_user_model().objects.filter(id=admin_user.id).update(is_staff=False, is_superuser=False)

        with self.assertLogs("accounts.signals", level="INFO") as logs:
            ensure_admin_account(sender=None)

        admin_user.refresh_from_db()
        self.assertTrue(admin_user.is_staff)
        self.assertEqual(admin_user.profile.role, Profile.Role.ADMIN)
        self.assertEqual(get_user_model().objects.filter(email=settings.ADMIN_EMAIL).count(), 1)
        self.assertIn(f"Existing user {settings.ADMIN_EMAIL} promoted to admin", logs.output[0])


class RegistrationTests(TestCase):
    def setUp(self):
        self.payload = {
            "name": "Ama Owusu",
            "email": "Ama@Example.com",
            "phone": "0241234567",
            "password": "pass1234",
            "confirm_password": "pass1234",
        }

    def test_register_creates_user_with_profile(self):
        response = self.client.post(reverse("register"), self.payload)

        self.assertRedirects(response, reverse("login"), fetch_redirect_response=False)
        user = get_user_model().objects.get(email="ama@example.com")
        self.assertTrue(user.check_password("pass1234"))
        self.assertEqual(user.profile.full_name, "Ama Owusu")
        self.assertEqual(user.profile.phone, "0241234567")
        self.assertEqual(user.profile.role, Profile.Role.USER)

    def test_password_mismatch_writes_nothing(self):
        self.payload["confirm_password"] = "different"

        response = self.client.post(reverse("register"), self.payload)

        self.assertEqual(response.status_code, 200)
        self.assertIn("Passwords do not match", flashed(response))
        self.assertFalse(get_user_model().objects.filter(email="ama@example.com").exists())

    def test_duplicate_email_is_rejected(self):
        Profile.create_user_with_profile(
            email="ama@example.com",
            password="pass1234",
            full_name="Ama",
        )

        response = self.client.post(reverse("register"), self.payload)

        self.assertIn("Email already registered", flashed(response))
        self.assertEqual(get_user_model().objects.filter(email__iexact="ama@example.com").count(), 1)


class LoginTests(TestCase):
    def setUp(self):
        Profile.create_user_with_profile(
            email="kofi@example.com",
            password="pass1234",
            full_name="Kofi",
        )

    def test_login_with_email_redirects_home(self):
        response = self.client.post(
            reverse("login"),
            {"email": "KOFI@example.com", "password": "pass1234"},
        )

        self.assertRedirects(response, reverse("home"), fetch_redirect_response=False)
        self.assertIn("Welcome back, Kofi!", flashed(response))

    def test_admin_lands_on_panel(self):
        response = self.client.post(
            reverse("login"),
            {"email": settings.ADMIN_EMAIL, "password": settings.ADMIN_PASSWORD},
        )

        self.assertRedirects(response, reverse("panel_dashboard"), fetch_redirect_response=False)

    def test_wrong_password_is_rejected(self):
        response = self.client.post(
            reverse("login"),
            {"email": "kofi@example.com", "password": "nope"},
        )

        self.assertRedirects(response, reverse("login"), fetch_redirect_response=False)
        self.assertIn("Invalid email or password", flashed(response))

    def test_profile_lists_linked_and_same_email_reservations(self):
        user = get_user_model().objects.get(email="kofi@example.com")
        hostel = Hostel.objects.create(name="Sunrise Hostel", price=Decimal("150.00"))
        stay = {
            "check_in": datetime.date(2024, 6, 1),
            "check_out": datetime.date(2024, 6, 3),
        }
        linked = Reservation.objects.create(
            hostel=hostel,
            account=user.profile,
            guest_name="Kofi",
            guest_email="other@example.com",
            guest_phone="1",
            **stay,
        )
        by_email = Reservation.objects.create(
            hostel=hostel,
            guest_name="Kofi",
            guest_email="Kofi@Example.com",
            guest_phone="1",
            **stay,
        )
        Reservation.objects.create(
            hostel=hostel,
            guest_name="Someone",
            guest_email="someone@example.com",
            guest_phone="1",
            **stay,
        )
        self.client.force_login(user)

        response = self.client.get(reverse("profile"))

        self.assertEqual(
            {reservation.id for reservation in response.context["reservations"]},
            {linked.id, by_email.id},
        )

    def test_profile_requires_login(self):
        response = self.client.get(reverse("profile"))

        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse("login"), response["Location"])


class AdminPanelTests(TestCase):
    def setUp(self):
        self.admin_user = get_user_model().objects.get(email=settings.ADMIN_EMAIL)
        self.member = Profile.create_user_with_profile(
            email="esi@example.com",
            password="pass1234",
            full_name="Esi",
        )
        self.hostel = Hostel.objects.create(name="Sunrise Hostel", price=Decimal("150.00"), rooms=5)
        self.reservation = Reservation.objects.create(
            hostel=self.hostel,
            account=self.member.profile,
            guest_name="Esi",
            guest_email="esi@example.com",
            guest_phone="1",
            check_in=datetime.date(2024, 6, 1),
            check_out=datetime.date(2024, 6, 3),
        )
        self.client.force_login(self.admin_user)

    def test_non_admin_is_denied(self):
        self.client.force_login(self.member)

        response = self.client.get(reverse("panel_dashboard"))

        self.assertRedirects(response, reverse("home"), fetch_redirect_response=False)
        self.assertIn("Access denied", flashed(response))

    def test_dashboard_stats(self):
        response = self.client.get(reverse("panel_dashboard"))

        stats = response.context["stats"]
        self.assertEqual(stats["total_hostels"], 1)
        self.assertEqual(stats["pending_reservations"], 1)
        self.assertEqual(stats["total_users"], 1)
        self.assertEqual(stats["available_hostels"], 1)
        self.assertEqual(stats["booked_hostels"], 0)

    def test_toggle_status_view(self):
        response = self.client.post(
            reverse("panel_hostel_toggle_status", kwargs={"hostel_id": self.hostel.id})
        )

        self.assertRedirects(response, reverse("panel_hostels"), fetch_redirect_response=False)
        self.hostel.refresh_from_db()
        self.assertEqual(self.hostel.status, Hostel.Status.BOOKED)
        self.assertIn("Hostel marked as booked", flashed(response))

    def test_toggle_status_of_missing_hostel_reports_error(self):
        response = self.client.post(
            reverse("panel_hostel_toggle_status", kwargs={"hostel_id": 9999})
        )

        self.assertIn("Hostel not found", flashed(response))

    def test_create_hostel(self):
        response = self.client.post(
            reverse("panel_hostel_create"),
            {
                "name": "Ocean View Hostel",
                "location": "Cape Coast, Ghana",
                "price": "200.00",
                "rooms": "8",
                "status": "available",
                "featured": "on",
                "amenities_text": "WiFi, Parking",
            },
        )

        self.assertRedirects(response, reverse("panel_hostels"), fetch_redirect_response=False)
        hostel = Hostel.objects.get(name="Ocean View Hostel")
        self.assertTrue(hostel.featured)
        self.assertEqual(hostel.amenities, ["WiFi", "Parking"])

    def test_delete_hostel_cascades_to_reservations(self):
        self.client.post(reverse("panel_hostel_delete", kwargs={"hostel_id": self.hostel.id}))

        self.assertFalse(Hostel.objects.filter(id=self.hostel.id).exists())
        self.assertFalse(Reservation.objects.filter(id=self.reservation.id).exists())

    def test_reservation_list_filters(self):
        response = self.client.get(reverse("panel_reservations"), {"status": "confirmed"})
        self.assertEqual(list(response.context["reservations"]), [])

        response = self.client.get(reverse("panel_reservations"), {"search": "ESI"})
        rows = list(response.context["reservations"])
        self.assertEqual([row.id for row in rows], [self.reservation.id])
        self.assertEqual(rows[0].user_name, "Esi")

    def test_update_reservation_status(self):
        response = self.client.post(
            reverse("panel_reservation_status", kwargs={"reservation_id": self.reservation.id}),
            {"status": "confirmed"},
        )

        self.assertRedirects(response, reverse("panel_reservations"), fetch_redirect_response=False)
        self.reservation.refresh_from_db()
        self.assertEqual(self.reservation.status, Reservation.Status.CONFIRMED)

    def test_update_reservation_with_unknown_status_fails(self):
        response = self.client.post(
            reverse("panel_reservation_status", kwargs={"reservation_id": self.reservation.id}),
            {"status": "archived"},
        )

        self.assertIn("Failed to update status", flashed(response))
        self.reservation.refresh_from_db()
        self.assertEqual(self.reservation.status, Reservation.Status.PENDING)

    def test_delete_reservation(self):
        self.client.post(
            reverse("panel_reservation_delete", kwargs={"reservation_id": self.reservation.id})
        )

        self.assertFalse(Reservation.objects.filter(id=self.reservation.id).exists())

    def test_users_list_counts_reservations(self):
        response = self.client.get(reverse("panel_users"))

        profiles = response.context["profiles"]
        self.assertEqual([profile.user_id for profile in profiles], [self.member.id])
        self.assertEqual(profiles[0].reservation_count, 1)

    def test_delete_user_keeps_reservation(self):
        response = self.client.post(reverse("panel_user_delete", kwargs={"user_id": self.member.id}))

        self.assertIn("User deleted!", flashed(response))
        self.assertFalse(get_user_model().objects.filter(id=self.member.id).exists())
        self.reservation.refresh_from_db()
        self.assertIsNone(self.reservation.account_id)

    def test_admin_account_cannot_be_deleted(self):
        other_admin = Profile.create_user_with_profile(
            email="boss@example.com",
            password="pass1234",
            full_name="Boss",
            role=Profile.Role.ADMIN,
        )

        response = self.client.post(reverse("panel_user_delete", kwargs={"user_id": other_admin.id}))

        self.assertIn("Admin accounts cannot be deleted", flashed(response))
        self.assertTrue(get_user_model().objects.filter(id=other_admin.id).exists())

    def test_update_settings(self):
        response = self.client.post(
            reverse("panel_settings"),
            {
                "site-site_name": "Hostel Finder",
                "site-site_tagline": "Stay well",
                "site-contact_email": "hello@hostelfinder.com",
                "site-contact_phone": "+233 20 000 0000",
                "site-contact_address": "Accra",
                "site-about_text": "About us",
                "site-footer_text": "",
                "payment-bank_name": "Ecobank",
                "payment-account_number": "999",
                "payment-account_name": "Hostel Finder",
                "payment-momo_provider": "Vodafone Cash",
                "payment-momo_number": "0200000000",
                "payment-momo_name": "Hostel Finder",
                "payment-instructions": "Use your booking id",
                "payment-is_active": "on",
            },
        )

        self.assertRedirects(response, reverse("panel_settings"), fetch_redirect_response=False)
        self.assertEqual(SiteSettings.load().site_name, "Hostel Finder")
        self.assertEqual(PaymentInfo.load().bank_name, "Ecobank")
        self.assertEqual(SiteSettings.objects.count(), 1)
