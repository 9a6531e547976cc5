import logging

from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import redirect, render

from accounts.models import get_profile
from hostels.models import Hostel
from siteconfig.models import PaymentInfo

from .exceptions import HostelNotFound, HostelUnavailable
from .forms import ReservationForm
from .models import Reservation
from .services import get_confirmation, submit_reservation

logger = logging.getLogger(__name__)


def reserve_view(request, hostel_id: int):
	hostel = Hostel.objects.filter(id=hostel_id).first()
	if hostel is None:
		messages.error(request, "Hostel not found")
		return redirect("hostel_list")

	if request.method != "POST" and not hostel.is_available:
		messages.error(request, "This hostel is currently not available")
		return redirect("hostel_detail", hostel_id=hostel.id)

	profile = get_profile(request.user)
	form = ReservationForm(request.POST or None, profile=profile)

	if request.method == "POST":
		if not hostel.is_available:
			messages.error(request, "This hostel is not available")
			return redirect("hostel_detail", hostel_id=hostel.id)

		if form.is_valid():
			try:
				reservation = submit_reservation(
					hostel.id,
					{
						"name": form.cleaned_data["guest_name"],
						"email": form.cleaned_data["guest_email"],
						"phone": form.cleaned_data["guest_phone"],
					},
					(form.cleaned_data["check_in"], form.cleaned_data["check_out"]),
					party_size=form.cleaned_data["guests"],
					message=form.cleaned_data["message"],
					account=profile,
				)
			except HostelNotFound:
				messages.error(request, "Hostel not found")
				return redirect("hostel_list")
			except HostelUnavailable:
				messages.error(request, "This hostel is not available")
				return redirect("hostel_detail", hostel_id=hostel.id)
			except DatabaseError:
				logger.exception("Reservation error for hostel %s", hostel.id)
				messages.error(request, "Failed to submit reservation. Please try again.")
				return redirect("reserve", hostel_id=hostel.id)

			messages.success(request, "Reservation submitted successfully! Please proceed to payment.")
			return redirect("confirmation", reservation_id=reservation.id)

	return render(
		request,
		"bookings/reserve.html",
		{
			"title": f"Reserve {hostel.name}",
			"hostel": hostel,
			"form": form,
		},
	)


def confirmation_view(request, reservation_id: int):
	try:
		reservation = get_confirmation(reservation_id)
	except Reservation.DoesNotExist:
		messages.error(request, "Reservation not found")
		return redirect("home")

	return render(
		request,
		"bookings/confirmation.html",
		{
			"title": "Booking Confirmation",
			"reservation": reservation,
			"payment_info": PaymentInfo.active(),
		},
	)
