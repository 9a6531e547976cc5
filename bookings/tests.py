import datetime
from decimal import Decimal
from unittest import mock

from django.contrib.auth import get_user_model
from django.contrib.messages import get_messages
from django.core import mail
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.test import TestCase, override_settings
from django.urls import reverse

from accounts.models import Profile
from hostels.models import Hostel

from .exceptions import HostelNotFound, HostelUnavailable, InvalidReservationStatus
from .models import Reservation
from .services import (
	list_reservations,
	reservations_for_account,
	submit_reservation,
	update_reservation_status,
)


GUEST_INFO = {
	"name": "Alice Mensah",
	"email": "alice@example.com",
	"phone": "0241112222",
}
STAY = (datetime.date(2024, 6, 1), datetime.date(2024, 6, 3))


class ReservationWorkflowTests(TestCase):
	def setUp(self):
		self.hostel = Hostel.objects.create(
			name="Sunrise Hostel",
			location="Accra, Ghana",
			price=Decimal("150.00"),
			rooms=5,
		)
		self.booked_hostel = Hostel.objects.create(
			name="Green Valley Hostel",
			location="Kumasi, Ghana",
			price=Decimal("120.00"),
			rooms=3,
			status=Hostel.Status.BOOKED,
		)

	def test_available_hostel_creates_one_pending_reservation(self):
		reservation = submit_reservation(self.hostel.id, GUEST_INFO, STAY, party_size=2)

		self.assertEqual(Reservation.objects.count(), 1)
		reservation.refresh_from_db()
		self.assertEqual(reservation.status, Reservation.Status.PENDING)
		self.assertEqual(reservation.hostel_id, self.hostel.id)
		self.assertEqual(reservation.guests, 2)
		self.assertIsNone(reservation.account)

	def test_booked_hostel_is_rejected_without_creating_a_row(self):
		with self.assertRaises(HostelUnavailable):
			submit_reservation(self.booked_hostel.id, GUEST_INFO, STAY)

		self.assertFalse(Reservation.objects.exists())

	def test_missing_hostel_is_rejected(self):
		with self.assertRaises(HostelNotFound):
			submit_reservation(self.hostel.id + 1000, GUEST_INFO, STAY)

		self.assertFalse(Reservation.objects.exists())

	def test_check_out_must_follow_check_in(self):
		same_day = (datetime.date(2024, 6, 1), datetime.date(2024, 6, 1))
		with self.assertRaises(ValidationError):
			submit_reservation(self.hostel.id, GUEST_INFO, same_day)

		self.assertFalse(Reservation.objects.exists())

	def test_submission_does_not_change_hostel_status(self):
		submit_reservation(self.hostel.id, GUEST_INFO, STAY)
		submit_reservation(self.hostel.id, GUEST_INFO, STAY)

		self.hostel.refresh_from_db()
		self.assertEqual(self.hostel.status, Hostel.Status.AVAILABLE)
		self.assertEqual(Reservation.objects.filter(hostel=self.hostel).count(), 2)

	def test_authenticated_account_is_linked(self):
		user = Profile.create_user_with_profile(
			email="kofi@example.com",
			password="pass1234",
			full_name="Kofi",
		)

		reservation = submit_reservation(
			self.hostel.id,
			GUEST_INFO,
			STAY,
			account=user.profile,
		)

		self.assertEqual(reservation.account, user.profile)
		self.assertIn(reservation, reservations_for_account(user.profile))

	def test_notification_failure_does_not_roll_back(self):
		with mock.patch(
			"bookings.services.notify_new_reservation",
			side_effect=ConnectionRefusedError("smtp down"),
		):
			reservation = submit_reservation(self.hostel.id, GUEST_INFO, STAY)

		self.assertTrue(Reservation.objects.filter(id=reservation.id).exists())

	def test_notification_receives_reservation_snapshot(self):
		with mock.patch("bookings.services.notify_new_reservation") as notify:
			reservation = submit_reservation(self.hostel.id, GUEST_INFO, STAY)

		notify.assert_called_once()
		facts = notify.call_args.args[0]
		self.assertEqual(facts["reservation_id"], reservation.id)
		self.assertEqual(facts["hostel_name"], "Sunrise Hostel")
		self.assertEqual(facts["guest_email"], "alice@example.com")
		self.assertEqual(facts["check_in"], STAY[0])
		self.assertEqual(facts["check_out"], STAY[1])

	def test_notification_skipped_when_email_not_configured(self):
		with self.settings(EMAIL_HOST_USER="", EMAIL_HOST_PASSWORD=""):
			submit_reservation(self.hostel.id, GUEST_INFO, STAY)

		self.assertEqual(len(mail.outbox), 0)

	@override_settings(
		EMAIL_HOST_USER="bookings@hostelhub.com",
		EMAIL_HOST_PASSWORD="secret",
		RESERVATION_NOTIFY_EMAIL="owner@hostelhub.com",
	)
	def test_notification_emails_admin_and_guest(self):
		submit_reservation(self.hostel.id, GUEST_INFO, STAY)

		self.assertEqual(len(mail.outbox), 2)
		self.assertEqual(mail.outbox[0].to, ["owner@hostelhub.com"])
		self.assertIn("Sunrise Hostel", mail.outbox[0].subject)
		self.assertEqual(mail.outbox[1].to, ["alice@example.com"])

	def test_update_status_is_an_unguarded_assignment(self):
		reservation = submit_reservation(self.hostel.id, GUEST_INFO, STAY)

		self.assertTrue(update_reservation_status(reservation.id, Reservation.Status.CONFIRMED))
		self.assertTrue(update_reservation_status(reservation.id, Reservation.Status.PENDING))

		reservation.refresh_from_db()
		self.assertEqual(reservation.status, Reservation.Status.PENDING)

	def test_update_status_reports_missing_reservation(self):
		self.assertFalse(update_reservation_status(9999, Reservation.Status.CONFIRMED))

	def test_update_status_rejects_unknown_status(self):
		reservation = submit_reservation(self.hostel.id, GUEST_INFO, STAY)

		with self.assertRaises(InvalidReservationStatus):
			update_reservation_status(reservation.id, "archived")

		reservation.refresh_from_db()
		self.assertEqual(reservation.status, Reservation.Status.PENDING)

	def test_status_update_sends_no_email(self):
		reservation = submit_reservation(self.hostel.id, GUEST_INFO, STAY)

		with mock.patch("bookings.services.notify_new_reservation") as notify:
			update_reservation_status(reservation.id, Reservation.Status.CONFIRMED)

		notify.assert_not_called()


class ReservationDeletionTests(TestCase):
	def setUp(self):
		self.hostel = Hostel.objects.create(name="Ocean View Hostel", price=Decimal("200.00"))
		self.user = Profile.create_user_with_profile(
			email="ama@example.com",
			password="pass1234",
			full_name="Ama",
		)
		self.reservation = submit_reservation(
			self.hostel.id,
			GUEST_INFO,
			STAY,
			account=self.user.profile,
		)

	def test_deleting_hostel_removes_its_reservations(self):
		self.hostel.delete()

		self.assertFalse(Reservation.objects.filter(id=self.reservation.id).exists())

	def test_deleting_user_keeps_reservation_and_clears_link(self):
		self.user.delete()

		self.reservation.refresh_from_db()
		self.assertIsNone(self.reservation.account_id)
		self.assertEqual(self.reservation.guest_email, "alice@example.com")


class ListReservationsTests(TestCase):
	def setUp(self):
		self.sunrise = Hostel.objects.create(name="Sunrise Hostel", price=Decimal("150.00"))
		self.alice_place = Hostel.objects.create(name="ALICE Lodge", price=Decimal("90.00"))

		self.by_name = submit_reservation(
			self.sunrise.id,
			{"name": "Alice Mensah", "email": "mensah@example.com", "phone": "1"},
			STAY,
		)
		self.by_email = submit_reservation(
			self.sunrise.id,
			{"name": "Kwame", "email": "Alice.K@example.com", "phone": "2"},
			STAY,
		)
		self.by_hostel = submit_reservation(
			self.alice_place.id,
			{"name": "Yaw", "email": "yaw@example.com", "phone": "3"},
			STAY,
		)
		self.unrelated = submit_reservation(
			self.sunrise.id,
			{"name": "Esi", "email": "esi@example.com", "phone": "4"},
			STAY,
		)
		update_reservation_status(self.unrelated.id, Reservation.Status.CONFIRMED)

	def test_status_filter_returns_only_matching_status(self):
		pending = list(list_reservations(status="pending"))

		self.assertEqual(len(pending), 3)
		self.assertTrue(all(item.status == Reservation.Status.PENDING for item in pending))

	def test_all_or_missing_status_applies_no_filter(self):
		self.assertEqual(list_reservations(status="all").count(), 4)
		self.assertEqual(list_reservations().count(), 4)

	def test_search_matches_guest_name_email_or_hostel_name(self):
		ids = set(list_reservations(search="alice").values_list("id", flat=True))

		self.assertEqual(ids, {self.by_name.id, self.by_email.id, self.by_hostel.id})

	def test_filters_combine(self):
		results = list(list_reservations(status="confirmed", search="alice"))

		self.assertEqual(results, [])

	def test_rows_carry_hostel_and_user_columns(self):
		row = list_reservations(search="Yaw").get()

		self.assertEqual(row.hostel_name, "ALICE Lodge")
		self.assertIsNone(row.user_name)

	def test_account_filter_combines_with_other_filters(self):
		user = get_user_model().objects.create_user(
			username="kwame@example.com",
			email="kwame@example.com",
			password="pass1234",
		)
		linked = submit_reservation(
			self.alice_place.id,
			{"name": "Kwame", "email": "kwame@example.com", "phone": "5"},
			STAY,
			account=user.profile,
		)

		self.assertEqual(list(list_reservations(account=user.profile)), [linked])
		self.assertEqual(list(list_reservations(account=user.profile, status="confirmed")), [])
		self.assertEqual(list(list_reservations(account=user.profile, search="alice")), [linked])


class ReserveViewTests(TestCase):
	def setUp(self):
		self.hostel = Hostel.objects.create(
			name="Sunrise Hostel",
			location="Accra, Ghana",
			price=Decimal("150.00"),
			rooms=5,
		)
		self.payload = {
			"guest_name": "Alice Mensah",
			"guest_email": "alice@example.com",
			"guest_phone": "0241112222",
			"check_in": "2024-06-01",
			"check_out": "2024-06-03",
			"guests": 2,
			"message": "Late arrival",
		}

	def test_reservation_scenario_redirects_to_confirmation(self):
		response = self.client.post(reverse("reserve", kwargs={"hostel_id": self.hostel.id}), self.payload)

		reservation = Reservation.objects.get()
		self.assertRedirects(
			response,
			reverse("confirmation", kwargs={"reservation_id": reservation.id}),
		)
		self.assertEqual(reservation.status, Reservation.Status.PENDING)
		self.assertEqual(reservation.hostel_id, self.hostel.id)
		self.assertEqual(reservation.check_in, datetime.date(2024, 6, 1))
		self.assertEqual(reservation.guests, 2)

		confirmation = self.client.get(reverse("confirmation", kwargs={"reservation_id": reservation.id}))
		self.assertEqual(confirmation.status_code, 200)
		self.assertContains(confirmation, "Sunrise Hostel")
		self.assertContains(confirmation, "150.00")
		self.assertContains(confirmation, "Nights: 2")

	def test_booked_hostel_redirects_to_detail_with_error(self):
		self.hostel.status = Hostel.Status.BOOKED
		self.hostel.save(update_fields=["status"])

		response = self.client.post(reverse("reserve", kwargs={"hostel_id": self.hostel.id}), self.payload)

		self.assertRedirects(
			response,
			reverse("hostel_detail", kwargs={"hostel_id": self.hostel.id}),
			fetch_redirect_response=False,
		)
		self.assertFalse(Reservation.objects.exists())
		flashed = [str(message) for message in get_messages(response.wsgi_request)]
		self.assertIn("This hostel is not available", flashed)

	def test_booked_hostel_reserve_page_redirects_to_detail(self):
		self.hostel.status = Hostel.Status.BOOKED
		self.hostel.save(update_fields=["status"])

		response = self.client.get(reverse("reserve", kwargs={"hostel_id": self.hostel.id}))

		self.assertRedirects(
			response,
			reverse("hostel_detail", kwargs={"hostel_id": self.hostel.id}),
			fetch_redirect_response=False,
		)

	def test_missing_hostel_redirects_to_listing(self):
		response = self.client.post(reverse("reserve", kwargs={"hostel_id": 9999}), self.payload)

		self.assertRedirects(response, reverse("hostel_list"), fetch_redirect_response=False)

	def test_invalid_dates_rerender_form(self):
		self.payload["check_out"] = "2024-05-30"

		response = self.client.post(reverse("reserve", kwargs={"hostel_id": self.hostel.id}), self.payload)

		self.assertEqual(response.status_code, 200)
		self.assertContains(response, "Check-out date must be after check-in date.")
		self.assertFalse(Reservation.objects.exists())

	def test_logged_in_user_reservation_is_linked(self):
		user = Profile.create_user_with_profile(
			email="kofi@example.com",
			password="pass1234",
			full_name="Kofi",
		)
		self.client.force_login(user)

		self.client.post(reverse("reserve", kwargs={"hostel_id": self.hostel.id}), self.payload)

		reservation = Reservation.objects.get()
		self.assertEqual(reservation.account, user.profile)
		self.assertEqual(reservation.guest_email, "alice@example.com")

	def test_missing_confirmation_redirects_home(self):
		response = self.client.get(reverse("confirmation", kwargs={"reservation_id": 4242}))

		self.assertRedirects(response, reverse("home"), fetch_redirect_response=False)

	def test_reserve_form_is_prefilled_for_logged_in_user(self):
		user = get_user_model().objects.create_user(
			username="esi@example.com",
			email="esi@example.com",
			password="pass1234",
			first_name="Esi",
		)
		self.client.force_login(user)

		response = self.client.get(reverse("reserve", kwargs={"hostel_id": self.hostel.id}))

		self.assertEqual(response.status_code, 200)
		self.assertContains(response, 'value="esi@example.com"')

	def test_store_failure_flashes_generic_error(self):
		with mock.patch.object(Reservation.objects, "create", side_effect=DatabaseError("disk full")):
			response = self.client.post(
				reverse("reserve", kwargs={"hostel_id": self.hostel.id}),
				self.payload,
			)

		self.assertRedirects(
			response,
			reverse("reserve", kwargs={"hostel_id": self.hostel.id}),
			fetch_redirect_response=False,
		)
		flashed = [str(message) for message in get_messages(response.wsgi_request)]
		self.assertIn("Failed to submit reservation. Please try again.", flashed)
		self.assertFalse(Reservation.objects.exists())
