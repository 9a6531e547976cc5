from django.db import models


class Hostel(models.Model):
	class Status(models.TextChoices):
		AVAILABLE = "available", "Available"
		BOOKED = "booked", "Booked"

	name = models.CharField(max_length=200)
	description = models.TextField(blank=True, default="")
	location = models.CharField(max_length=200, blank=True, default="")
	address = models.CharField(max_length=255, blank=True, default="")
	price = models.DecimalField(max_digits=10, decimal_places=2)
	rooms = models.PositiveIntegerField(default=1)
	status = models.CharField(
		max_length=20,
		choices=Status.choices,
		default=Status.AVAILABLE,
	)
	featured = models.BooleanField(default=False)
	amenities = models.JSONField(default=list, blank=True)
	images = models.JSONField(default=list, blank=True)
	videos = models.JSONField(default=list, blank=True)
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:
		ordering = ("-featured", "-created_at")

	def __str__(self) -> str:
		return self.name

	@property
	def is_available(self) -> bool:
		return self.status == self.Status.AVAILABLE

	@property
	def cover_image(self) -> str:
		return self.images[0] if self.images else ""

	@property
	def city(self) -> str:
		return (self.location or "").split(",")[0].strip()
