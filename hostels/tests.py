import shutil
import tempfile
from decimal import Decimal

from django.contrib.messages import get_messages
from django.core.exceptions import ValidationError
from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.management import call_command
from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils.datastructures import MultiValueDict

from bookings.models import Reservation

from .availability import set_hostel_status, toggle_hostel_status
from .forms import HostelForm
from .models import Hostel
from .uploads import validate_media_file


class HostelStatusTests(TestCase):
    def setUp(self):
        self.hostel = Hostel.objects.create(name="Sunrise Hostel", price=Decimal("150.00"))

    def test_toggle_flips_available_and_booked(self):
        self.assertEqual(toggle_hostel_status(self.hostel.id), Hostel.Status.BOOKED)
        self.hostel.refresh_from_db()
        self.assertEqual(self.hostel.status, Hostel.Status.BOOKED)

    def test_toggle_twice_restores_original_status(self):
        for original in (Hostel.Status.AVAILABLE, Hostel.Status.BOOKED):
            set_hostel_status(self.hostel.id, original)

            toggle_hostel_status(self.hostel.id)
            toggle_hostel_status(self.hostel.id)

            self.hostel.refresh_from_db()
            self.assertEqual(self.hostel.status, original)

    def test_toggle_missing_hostel_is_a_noop(self):
        self.assertIsNone(toggle_hostel_status(self.hostel.id + 100))
        self.hostel.refresh_from_db()
        self.assertEqual(self.hostel.status, Hostel.Status.AVAILABLE)

    def test_set_status_reports_missing_hostel(self):
        self.assertTrue(set_hostel_status(self.hostel.id, Hostel.Status.BOOKED))
        self.assertFalse(set_hostel_status(self.hostel.id + 100, Hostel.Status.BOOKED))

    def test_set_status_rejects_unknown_value(self):
        with self.assertRaises(ValidationError):
            set_hostel_status(self.hostel.id, "closed")

    def test_status_change_is_visible_on_detail_page(self):
        toggle_hostel_status(self.hostel.id)

        response = self.client.get(reverse("hostel_detail", kwargs={"hostel_id": self.hostel.id}))

        self.assertContains(response, "This hostel is currently booked.")


class HostelListingTests(TestCase):
    def setUp(self):
        self.sunrise = Hostel.objects.create(
            name="Sunrise Hostel",
            description="Modern amenities in the city",
            location="Accra, Ghana",
            price=Decimal("150.00"),
            rooms=5,
            featured=True,
        )
        self.ocean = Hostel.objects.create(
            name="Ocean View Hostel",
            description="Stunning ocean views",
            location="Cape Coast, Ghana",
            price=Decimal("200.00"),
            rooms=8,
            featured=True,
        )
        self.valley = Hostel.objects.create(
            name="Green Valley Hostel",
            description="Quiet and green",
            location="Kumasi, Ghana",
            price=Decimal("120.00"),
            rooms=3,
            status=Hostel.Status.BOOKED,
        )

    def listed(self, **params):
        response = self.client.get(reverse("hostel_list"), params)
        self.assertEqual(response.status_code, 200)
        return list(response.context["hostels"])

    def test_search_matches_name_or_description(self):
        self.assertEqual(self.listed(search="ocean"), [self.ocean])
        self.assertEqual(self.listed(search="modern"), [self.sunrise])

    def test_price_range_and_location_filters(self):
        self.assertEqual(self.listed(min_price="130", max_price="180"), [self.sunrise])
        self.assertEqual(self.listed(location="kumasi"), [self.valley])

    def test_status_filter(self):
        self.assertEqual(self.listed(status="booked"), [self.valley])
        self.assertEqual(len(self.listed(status="all")), 3)

    def test_invalid_price_is_ignored(self):
        self.assertEqual(len(self.listed(min_price="cheap")), 3)

    def test_non_finite_prices_are_ignored(self):
        self.assertEqual(len(self.listed(min_price="NaN")), 3)
        self.assertEqual(len(self.listed(max_price="Infinity")), 3)
        self.assertEqual(len(self.listed(min_price="-inf", max_price="sNaN")), 3)

    def test_featured_hostels_come_first(self):
        self.assertEqual(self.listed()[-1], self.valley)

    def test_home_stats_count_available_rooms_and_confirmed_guests(self):
        Reservation.objects.create(
            hostel=self.sunrise,
            guest_name="Alice",
            guest_email="alice@example.com",
            guest_phone="1",
            check_in="2024-06-01",
            check_out="2024-06-03",
            status=Reservation.Status.CONFIRMED,
        )

        response = self.client.get(reverse("home"))

        stats = response.context["stats"]
        self.assertEqual(stats["total_hostels"], 3)
        self.assertEqual(stats["available_rooms"], 13)
        self.assertEqual(stats["happy_guests"], 1)
        self.assertEqual(len(response.context["featured_hostels"]), 2)

    def test_detail_lists_similar_hostels_in_same_city(self):
        other_accra = Hostel.objects.create(
            name="Accra Central Lodge",
            location="Accra, Ghana",
            price=Decimal("100.00"),
        )

        response = self.client.get(reverse("hostel_detail", kwargs={"hostel_id": self.sunrise.id}))

        self.assertEqual(list(response.context["similar_hostels"]), [other_accra])

    def test_missing_hostel_redirects_with_flash(self):
        response = self.client.get(reverse("hostel_detail", kwargs={"hostel_id": 9999}))

        self.assertRedirects(response, reverse("hostel_list"), fetch_redirect_response=False)
        flashed = [str(message) for message in get_messages(response.wsgi_request)]
        self.assertIn("Hostel not found", flashed)


class UploadValidationTests(TestCase):
    def setUp(self):
        self.media_root = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.media_root, ignore_errors=True)

    def test_accepts_images_and_videos(self):
        validate_media_file(SimpleUploadedFile("room.jpg", b"jpeg-bytes", content_type="image/jpeg"))
        validate_media_file(SimpleUploadedFile("tour.mov", b"mov-bytes", content_type="video/quicktime"))

    def test_rejects_other_extensions(self):
        with self.assertRaisesMessage(ValidationError, "Only images and videos are allowed!"):
            validate_media_file(SimpleUploadedFile("notes.pdf", b"pdf", content_type="application/pdf"))

    def test_rejects_mismatched_content_type(self):
        with self.assertRaises(ValidationError):
            validate_media_file(SimpleUploadedFile("room.png", b"x", content_type="text/html"))

    @override_settings(MAX_UPLOAD_SIZE=4)
    def test_rejects_files_over_size_ceiling(self):
        with self.assertRaises(ValidationError):
            validate_media_file(SimpleUploadedFile("room.png", b"12345", content_type="image/png"))

    def test_form_splits_uploads_into_images_and_videos(self):
        with self.settings(MEDIA_ROOT=self.media_root):
            form = HostelForm(
                data={
                    "name": "Sunrise Hostel",
                    "price": "150.00",
                    "rooms": "5",
                    "status": "available",
                    "amenities_text": "WiFi, Security , ,Laundry",
                },
                files=MultiValueDict(
                    {
                        "files": [
                            SimpleUploadedFile("room.png", b"png-bytes", content_type="image/png"),
                            SimpleUploadedFile("tour.mp4", b"mp4-bytes", content_type="video/mp4"),
                        ]
                    }
                ),
            )
            self.assertTrue(form.is_valid(), form.errors)
            hostel = form.save()

        self.assertEqual(hostel.amenities, ["WiFi", "Security", "Laundry"])
        self.assertEqual(len(hostel.images), 1)
        self.assertEqual(len(hostel.videos), 1)
        self.assertTrue(hostel.images[0].endswith(".png"))
        self.assertTrue(hostel.videos[0].endswith(".mp4"))

    def test_form_removes_selected_media(self):
        hostel = Hostel.objects.create(
            name="Ocean View Hostel",
            price=Decimal("200.00"),
            images=["/media/uploads/a.png", "/media/uploads/b.png"],
            videos=["/media/uploads/c.mp4"],
            amenities=["WiFi"],
        )

        form = HostelForm(
            data={
                "name": hostel.name,
                "price": "200.00",
                "rooms": "1",
                "status": "available",
                "amenities_text": "WiFi",
                "remove_images": ["/media/uploads/a.png"],
                "remove_videos": ["/media/uploads/c.mp4"],
            },
            instance=hostel,
        )
        self.assertTrue(form.is_valid(), form.errors)
        form.save()

        hostel.refresh_from_db()
        self.assertEqual(hostel.images, ["/media/uploads/b.png"])
        self.assertEqual(hostel.videos, [])

    def test_form_rejects_disallowed_upload(self):
        form = HostelForm(
            data={"name": "Sunrise Hostel", "price": "150.00"},
            files=MultiValueDict(
                {"files": [SimpleUploadedFile("virus.exe", b"MZ", content_type="application/octet-stream")]}
            ),
        )

        self.assertFalse(form.is_valid())
        self.assertIn("files", form.errors)


class SeedHostelsCommandTests(TestCase):
    def test_seeds_sample_hostels_once(self):
        call_command("seed_hostels", verbosity=0)
        call_command("seed_hostels", verbosity=0)

        self.assertEqual(Hostel.objects.count(), 3)
        self.assertEqual(Hostel.objects.filter(status=Hostel.Status.BOOKED).count(), 1)
