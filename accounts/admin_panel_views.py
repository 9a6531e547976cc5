import logging
from functools import wraps

from django.contrib import messages
from django.contrib.auth import get_user_model
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError, transaction
from django.db.models import Q
from django.shortcuts import get_object_or_404, redirect, render

from bookings.exceptions import InvalidReservationStatus
from bookings.forms import ReservationStatusForm
from bookings.models import Reservation
from bookings.services import annotated_reservations, list_reservations, update_reservation_status
from hostels.availability import toggle_hostel_status
from hostels.forms import HostelForm
from hostels.models import Hostel
from siteconfig.models import PaymentInfo, SiteSettings

from .admin_panel_forms import PaymentInfoForm, SiteSettingsForm
from .models import Profile, get_profile

logger = logging.getLogger(__name__)


def is_admin_user(user) -> bool:
    if user.is_staff or user.is_superuser:
        return True
    profile = get_profile(user)
    return profile is not None and profile.is_admin


def admin_required(view_func):
    @wraps(view_func)
    @login_required
    def _wrapped(request, *args, **kwargs):
        if not is_admin_user(request.user):
            messages.error(request, "Access denied")
            return redirect("home")
        return view_func(request, *args, **kwargs)

    return _wrapped


@admin_required
def panel_dashboard_view(request):
    stats = {
        "total_hostels": Hostel.objects.count(),
        "total_reservations": Reservation.objects.count(),
        "pending_reservations": Reservation.objects.filter(status=Reservation.Status.PENDING).count(),
        "total_users": Profile.objects.filter(role=Profile.Role.USER).count(),
        "available_hostels": Hostel.objects.filter(status=Hostel.Status.AVAILABLE).count(),
        "booked_hostels": Hostel.objects.filter(status=Hostel.Status.BOOKED).count(),
    }
    recent_reservations = annotated_reservations().order_by("-created_at", "-id")[:5]
    return render(
        request,
        "accounts/admin_panel/dashboard.html",
        {
            "title": "Admin Dashboard",
            "stats": stats,
            "recent_reservations": recent_reservations,
        },
    )


@admin_required
def panel_hostels_view(request):
    hostels = Hostel.objects.order_by("-created_at")
    return render(
        request,
        "accounts/admin_panel/hostels_list.html",
        {"title": "Manage Hostels", "hostels": hostels},
    )


@admin_required
def panel_hostel_create_view(request):
    form = HostelForm(request.POST or None, request.FILES or None)
    if request.method == "POST":
        if form.is_valid():
            try:
                hostel = form.save()
            except DatabaseError:
                logger.exception("Add hostel error")
                messages.error(request, "Failed to add hostel")
                return redirect("panel_hostel_create")
            logger.info("Hostel %s created", hostel.id)
            messages.success(request, "Hostel added successfully!")
            return redirect("panel_hostels")
        messages.error(request, "Please correct the errors below.")
    return render(
        request,
        "accounts/admin_panel/hostel_form.html",
        {"title": "Add New Hostel", "form": form, "mode": "create"},
    )


@admin_required
def panel_hostel_edit_view(request, hostel_id: int):
    hostel = Hostel.objects.filter(id=hostel_id).first()
    if hostel is None:
        messages.error(request, "Hostel not found")
        return redirect("panel_hostels")

    form = HostelForm(request.POST or None, request.FILES or None, instance=hostel)
    if request.method == "POST":
        if form.is_valid():
            try:
                form.save()
            except DatabaseError:
                logger.exception("Update hostel error for %s", hostel_id)
                messages.error(request, "Failed to update hostel")
                return redirect("panel_hostel_edit", hostel_id=hostel_id)
            messages.success(request, "Hostel updated successfully!")
            return redirect("panel_hostels")
        messages.error(request, "Please correct the errors below.")
    return render(
        request,
        "accounts/admin_panel/hostel_form.html",
        {"title": "Edit Hostel", "form": form, "mode": "edit", "hostel": hostel},
    )


@admin_required
def panel_hostel_delete_view(request, hostel_id: int):
    if request.method != "POST":
        return redirect("panel_hostels")
    try:
        deleted, _ = Hostel.objects.filter(id=hostel_id).delete()
    except DatabaseError:
        logger.exception("Delete hostel error for %s", hostel_id)
        messages.error(request, "Failed to delete hostel")
        return redirect("panel_hostels")

    if deleted:
        logger.info("Hostel %s deleted with its reservations", hostel_id)
        messages.success(request, "Hostel deleted successfully!")
    else:
        messages.error(request, "Hostel not found")
    return redirect("panel_hostels")


@admin_required
def panel_hostel_toggle_status_view(request, hostel_id: int):
    if request.method != "POST":
        return redirect("panel_hostels")
    new_status = toggle_hostel_status(hostel_id)
    if new_status is None:
        messages.error(request, "Hostel not found")
    else:
        messages.success(request, f"Hostel marked as {new_status}")
    return redirect("panel_hostels")


@admin_required
def panel_reservations_view(request):
    status_filter = (request.GET.get("status") or "all").strip().lower()
    search = (request.GET.get("search") or "").strip()
    reservations = list_reservations(status=status_filter, search=search)
    return render(
        request,
        "accounts/admin_panel/reservations_list.html",
        {
            "title": "Manage Reservations",
            "reservations": reservations,
            "filters": {"status": status_filter, "search": search},
            "status_options": [("all", "All")] + list(Reservation.Status.choices),
        },
    )


@admin_required
def panel_reservation_status_view(request, reservation_id: int):
    if request.method != "POST":
        return redirect("panel_reservations")

    form = ReservationStatusForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Failed to update status")
        return redirect("panel_reservations")

    try:
        updated = update_reservation_status(reservation_id, form.cleaned_data["status"])
    except (InvalidReservationStatus, DatabaseError):
        logger.exception("Status update failed for reservation %s", reservation_id)
        messages.error(request, "Failed to update status")
        return redirect("panel_reservations")

    if updated:
        messages.success(request, "Reservation status updated!")
    else:
        messages.error(request, "Reservation not found")
    return redirect("panel_reservations")


@admin_required
def panel_reservation_delete_view(request, reservation_id: int):
    if request.method != "POST":
        return redirect("panel_reservations")
    try:
        deleted, _ = Reservation.objects.filter(id=reservation_id).delete()
    except DatabaseError:
        logger.exception("Delete reservation error for %s", reservation_id)
        messages.error(request, "Failed to delete reservation")
        return redirect("panel_reservations")

    if deleted:
        messages.success(request, "Reservation deleted!")
    else:
        messages.error(request, "Reservation not found")
    return redirect("panel_reservations")


@admin_required
def panel_users_view(request):
    profiles = list(
        Profile.objects.select_related("user")
        .filter(role=Profile.Role.USER)
        .order_by("-created_at")
    )
    for profile in profiles:
        profile.reservation_count = Reservation.objects.filter(
            Q(account=profile) | Q(guest_email__iexact=profile.user.email)
        ).count()
    return render(
        request,
        "accounts/admin_panel/users_list.html",
        {"title": "Manage Users", "profiles": profiles},
    )


@admin_required
def panel_user_delete_view(request, user_id: int):
    if request.method != "POST":
        return redirect("panel_users")

    user_model = get_user_model()
    target_user = get_object_or_404(user_model.objects.select_related("profile"), id=user_id)
    if target_user.id == request.user.id or is_admin_user(target_user):
        messages.error(request, "Admin accounts cannot be deleted")
        return redirect("panel_users")

    try:
        target_user.delete()
    except DatabaseError:
        logger.exception("Delete user error for %s", user_id)
        messages.error(request, "Failed to delete user")
        return redirect("panel_users")

    logger.info("User %s deleted", user_id)
    messages.success(request, "User deleted!")
    return redirect("panel_users")


@admin_required
def panel_settings_view(request):
    site_settings = SiteSettings.load()
    payment_info = PaymentInfo.load()
    settings_form = SiteSettingsForm(request.POST or None, instance=site_settings, prefix="site")
    payment_form = PaymentInfoForm(request.POST or None, instance=payment_info, prefix="payment")

    if request.method == "POST":
        if settings_form.is_valid() and payment_form.is_valid():
            try:
                with transaction.atomic():
                    settings_form.save()
                    payment_form.save()
            except DatabaseError:
                logger.exception("Settings error")
                messages.error(request, "Failed to update settings")
                return redirect("panel_settings")
            messages.success(request, "Settings updated successfully!")
            return redirect("panel_settings")
        messages.error(request, "Failed to update settings")

    return render(
        request,
        "accounts/admin_panel/settings.html",
        {
            "title": "Settings",
            "settings_form": settings_form,
            "payment_form": payment_form,
        },
    )
