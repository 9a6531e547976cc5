from decimal import Decimal, InvalidOperation

from django.contrib import messages
from django.db.models import Q, Sum
from django.shortcuts import redirect, render

from bookings.models import Reservation

from .models import Hostel


def parse_price(value):
    if not value:
        return None
    try:
        price = Decimal(value)
    except InvalidOperation:
        return None
    return price if price.is_finite() else None


def search_hostels(filters):
    query = Hostel.objects.all()
    if filters["search"]:
        query = query.filter(
            Q(name__icontains=filters["search"]) | Q(description__icontains=filters["search"])
        )
    if filters["location"]:
        query = query.filter(location__icontains=filters["location"])
    min_price = parse_price(filters["min_price"])
    if min_price is not None:
        query = query.filter(price__gte=min_price)
    max_price = parse_price(filters["max_price"])
    if max_price is not None:
        query = query.filter(price__lte=max_price)
    if filters["status"] and filters["status"] != "all":
        query = query.filter(status=filters["status"])
    return query.order_by("-featured", "-created_at")


def home_view(request):
    featured_hostels = Hostel.objects.filter(featured=True).order_by("-created_at")[:6]
    stats = {
        "total_hostels": Hostel.objects.count(),
        "available_rooms": Hostel.objects.filter(status=Hostel.Status.AVAILABLE).aggregate(
            total=Sum("rooms")
        )["total"]
        or 0,
        "happy_guests": Reservation.objects.filter(status=Reservation.Status.CONFIRMED).count(),
    }
    return render(
        request,
        "hostels/home.html",
        {
            "title": "Home",
            "featured_hostels": featured_hostels,
            "stats": stats,
        },
    )


def hostel_list_view(request):
    filters = {
        "search": request.GET.get("search", "").strip(),
        "location": request.GET.get("location", "").strip(),
        "min_price": request.GET.get("min_price", "").strip(),
        "max_price": request.GET.get("max_price", "").strip(),
        "status": request.GET.get("status", "").strip().lower(),
    }
    locations = (
        Hostel.objects.exclude(location="")
        .order_by("location")
        .values_list("location", flat=True)
        .distinct()
    )
    return render(
        request,
        "hostels/hostel_list.html",
        {
            "title": "All Hostels",
            "hostels": search_hostels(filters),
            "locations": locations,
            "filters": filters,
        },
    )


def hostel_detail_view(request, hostel_id: int):
    hostel = Hostel.objects.filter(id=hostel_id).first()
    if hostel is None:
        messages.error(request, "Hostel not found")
        return redirect("hostel_list")

    similar_hostels = (
        Hostel.objects.exclude(id=hostel.id)
        .filter(location__icontains=hostel.city)
        .order_by("?")[:3]
    )
    return render(
        request,
        "hostels/hostel_detail.html",
        {
            "title": hostel.name,
            "hostel": hostel,
            "similar_hostels": similar_hostels,
        },
    )
