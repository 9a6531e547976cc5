"""Operator-controlled availability of hostels.

A hostel's status is a coarse flag set by an administrator. Nothing in the
reservation flow changes it, and it is not derived from room counts or
reservation dates.
"""
import logging

from django.core.exceptions import ValidationError

from .models import Hostel

logger = logging.getLogger(__name__)


def set_hostel_status(hostel_id, status) -> bool:
    """Write ``status`` to the hostel. Returns False when it does not exist."""
    if status not in Hostel.Status.values:
        raise ValidationError(f"Unknown hostel status: {status!r}")
    updated = Hostel.objects.filter(id=hostel_id).update(status=status)
    if updated:
        logger.info("Hostel %s marked as %s", hostel_id, status)
    return bool(updated)


def toggle_hostel_status(hostel_id):
    """Flip available/booked and return the new status, or None if missing."""
    current_status = Hostel.objects.filter(id=hostel_id).values_list("status", flat=True).first()
    if current_status is None:
        return None

    if current_status == Hostel.Status.AVAILABLE:
        new_status = Hostel.Status.BOOKED
    else:
        new_status = Hostel.Status.AVAILABLE
    set_hostel_status(hostel_id, new_status)
    return new_status
