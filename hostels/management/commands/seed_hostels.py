from decimal import Decimal

from django.core.management.base import BaseCommand

from hostels.models import Hostel

SAMPLE_HOSTELS = [
    {
        "name": "Sunrise Hostel",
        "description": (
            "A beautiful hostel located in the heart of the city. Features modern amenities, "
            "comfortable beds, and a friendly atmosphere. Perfect for students and young "
            "professionals looking for affordable accommodation."
        ),
        "location": "Accra, Ghana",
        "address": "123 Independence Avenue, Accra",
        "price": Decimal("150"),
        "amenities": ["WiFi", "Air Conditioning", "Security", "Laundry", "Kitchen", "Study Room"],
        "status": Hostel.Status.AVAILABLE,
        "featured": True,
        "rooms": 5,
    },
    {
        "name": "Ocean View Hostel",
        "description": (
            "Experience stunning ocean views from this coastal hostel. Recently renovated rooms "
            "with modern facilities. Walking distance to the beach and local attractions."
        ),
        "location": "Cape Coast, Ghana",
        "address": "45 Beach Road, Cape Coast",
        "price": Decimal("200"),
        "amenities": ["WiFi", "Ocean View", "Restaurant", "Security", "Parking"],
        "status": Hostel.Status.AVAILABLE,
        "featured": True,
        "rooms": 8,
    },
    {
        "name": "Green Valley Hostel",
        "description": (
            "Peaceful hostel surrounded by nature. Ideal for those seeking a quiet environment "
            "for studying or relaxation. Eco-friendly facilities and organic meals available."
        ),
        "location": "Kumasi, Ghana",
        "address": "78 Garden Street, Kumasi",
        "price": Decimal("120"),
        "amenities": ["WiFi", "Garden", "Organic Meals", "Study Area", "Bicycle Rental"],
        "status": Hostel.Status.BOOKED,
        "featured": False,
        "rooms": 3,
    },
]


class Command(BaseCommand):
    help = "Create the sample hostels when the catalogue is empty."

    def handle(self, *args, **kwargs):
        if Hostel.objects.exists():
            self.stdout.write("Hostels already exist, nothing to seed.")
            return

        for data in SAMPLE_HOSTELS:
            Hostel.objects.create(**data)
        self.stdout.write(self.style.SUCCESS(f"Created {len(SAMPLE_HOSTELS)} sample hostels."))
