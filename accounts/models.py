from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import models


class Profile(models.Model):
    class Role(models.TextChoices):
        USER = "user", "User"
        ADMIN = "admin", "Admin"

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="profile"
    )
    full_name = models.CharField(max_length=150)
    phone = models.CharField(max_length=30, blank=True, default="")
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.USER)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-created_at",)

    def __str__(self) -> str:
        return f"{self.full_name} ({self.role})"

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def is_admin(self) -> bool:
        return self.role == self.Role.ADMIN

    @classmethod
    def create_user_with_profile(
        cls,
        *,
        email: str,
        password: str,
        full_name: str,
        phone: str = "",
        role: str = Role.USER,
    ):
        email = email.strip().lower()
        is_admin = role == cls.Role.ADMIN
        user_model = get_user_model()
        user = user_model.objects.create_user(
            username=email,
            email=email,
            password=password,
            first_name=full_name,
            is_staff=is_admin,
            is_superuser=is_admin,
        )
        cls.objects.update_or_create(
            user=user,
            defaults={
                "full_name": full_name,
                "phone": phone,
                "role": role,
            },
        )
        return user


def get_profile(user):
    if not user or not user.is_authenticated:
        return None
    profile, _ = Profile.objects.get_or_create(
        user=user,
        defaults={
            "full_name": user.get_full_name() or user.username,
            "role": Profile.Role.ADMIN if user.is_superuser else Profile.Role.USER,
        },
    )
    return profile
