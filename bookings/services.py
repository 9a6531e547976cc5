"""Reservation workflow: booking requests, status updates and listings."""
import logging

from django.core.exceptions import ValidationError
from django.db.models import F, Q

from hostels.models import Hostel

from .exceptions import HostelNotFound, HostelUnavailable, InvalidReservationStatus
from .models import Reservation
from .notifications import notify_new_reservation

logger = logging.getLogger(__name__)


def validate_stay(check_in, check_out, guests):
    if check_in >= check_out:
        raise ValidationError("Check-out date must be after check-in date.")
    if guests < 1:
        raise ValidationError("At least one guest is required.")


def submit_reservation(hostel_id, guest_info, date_range, party_size=1, message="", account=None):
    """Record a pending reservation for an available hostel.

    ``guest_info`` holds ``name``, ``email`` and ``phone``; ``date_range`` is
    a ``(check_in, check_out)`` pair. The hostel's status is left untouched.
    Returns the new reservation.
    """
    hostel = Hostel.objects.filter(id=hostel_id).first()
    if hostel is None:
        raise HostelNotFound(hostel_id)
    if hostel.status != Hostel.Status.AVAILABLE:
        raise HostelUnavailable(hostel)

    check_in, check_out = date_range
    validate_stay(check_in, check_out, party_size)

    reservation = Reservation.objects.create(
        hostel=hostel,
        account=account,
        guest_name=guest_info["name"],
        guest_email=guest_info["email"],
        guest_phone=guest_info["phone"],
        check_in=check_in,
        check_out=check_out,
        guests=party_size,
        message=message or "",
    )
    logger.info("Reservation %s created for hostel %s", reservation.id, hostel.id)

    try:
        notify_new_reservation(reservation.notification_facts())
    except Exception:
        logger.exception("Email notification failed for reservation %s", reservation.id)

    return reservation


def update_reservation_status(reservation_id, new_status) -> bool:
    """Assign a new status. Any known status may follow any other."""
    if new_status not in Reservation.Status.values:
        raise InvalidReservationStatus(new_status)
    updated = Reservation.objects.filter(id=reservation_id).update(status=new_status)
    if updated:
        logger.info("Reservation %s status set to %s", reservation_id, new_status)
    return bool(updated)


def annotated_reservations():
    return Reservation.objects.select_related("hostel", "account").annotate(
        hostel_name=F("hostel__name"),
        hostel_location=F("hostel__location"),
        hostel_price=F("hostel__price"),
        user_name=F("account__full_name"),
    )


def list_reservations(status=None, search=None, account=None):
    query = annotated_reservations()
    if account is not None:
        query = query.filter(account=account)
    if status and status != "all":
        query = query.filter(status=status)
    if search:
        query = query.filter(
            Q(guest_name__icontains=search)
            | Q(guest_email__icontains=search)
            | Q(hostel__name__icontains=search)
        )
    return query.order_by("-created_at", "-id")


def reservations_for_account(profile):
    """Reservations linked to the account or made with its email address."""
    return (
        annotated_reservations()
        .filter(Q(account=profile) | Q(guest_email__iexact=profile.user.email))
        .order_by("-created_at", "-id")
    )


def get_confirmation(reservation_id):
    return annotated_reservations().get(id=reservation_id)
