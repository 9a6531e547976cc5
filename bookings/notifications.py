import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)


def email_configured() -> bool:
    return bool(settings.EMAIL_HOST_USER and settings.EMAIL_HOST_PASSWORD)


def send_templated_email(subject, template_prefix, context, recipient):
    text_body = render_to_string(f"{template_prefix}.txt", context)
    html_body = render_to_string(f"{template_prefix}.html", context)
    message = EmailMultiAlternatives(
        subject,
        text_body,
        settings.DEFAULT_FROM_EMAIL,
        [recipient],
    )
    message.attach_alternative(html_body, "text/html")
    message.send(fail_silently=False)


def notify_new_reservation(facts) -> bool:
    """Email the administrator and the guest about a new reservation.

    ``facts`` is the snapshot built by ``Reservation.notification_facts``.
    Returns False when email is not configured. Transport errors propagate;
    the reservation workflow decides what to do with them.
    """
    if not email_configured():
        logger.info("Email not configured, skipping notification for reservation %s", facts["reservation_id"])
        return False

    context = dict(facts, site_url=settings.SITE_URL)
    admin_email = settings.RESERVATION_NOTIFY_EMAIL or settings.EMAIL_HOST_USER

    send_templated_email(
        f"New Reservation: {facts['hostel_name']}",
        "bookings/email/admin_new_reservation",
        context,
        admin_email,
    )
    send_templated_email(
        f"Reservation Received - {facts['hostel_name']}",
        "bookings/email/guest_new_reservation",
        context,
        facts["guest_email"],
    )

    logger.info("Email notifications sent for reservation %s", facts["reservation_id"])
    return True
