from django.db import models

from accounts.models import Profile
from hostels.models import Hostel


class Reservation(models.Model):
	class Status(models.TextChoices):
		PENDING = "pending", "Pending"
		CONFIRMED = "confirmed", "Confirmed"
		CANCELLED = "cancelled", "Cancelled"
		COMPLETED = "completed", "Completed"

	hostel = models.ForeignKey(Hostel, on_delete=models.CASCADE, related_name="reservations")
	account = models.ForeignKey(
		Profile,
		on_delete=models.SET_NULL,
		null=True,
		blank=True,
		related_name="reservations",
	)
	guest_name = models.CharField(max_length=150)
	guest_email = models.EmailField()
	guest_phone = models.CharField(max_length=30)
	check_in = models.DateField()
	check_out = models.DateField()
	guests = models.PositiveIntegerField(default=1)
	message = models.TextField(blank=True, default="")
	status = models.CharField(
		max_length=20,
		choices=Status.choices,
		default=Status.PENDING,
	)
	created_at = models.DateTimeField(auto_now_add=True)

	class Meta:
		ordering = ("-created_at",)

	@property
	def nights(self) -> int:
		return max((self.check_out - self.check_in).days, 0)

	def notification_facts(self) -> dict:
		return {
			"reservation_id": self.pk,
			"hostel_name": self.hostel.name,
			"guest_name": self.guest_name,
			"guest_email": self.guest_email,
			"guest_phone": self.guest_phone,
			"check_in": self.check_in,
			"check_out": self.check_out,
		}

	def __str__(self) -> str:
		return f"Reservation #{self.id} - {self.guest_name}"
