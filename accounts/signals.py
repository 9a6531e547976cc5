import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db.models.signals import post_migrate, post_save

from .models import Profile

logger = logging.getLogger(__name__)


def ensure_profile_exists(sender, instance, created, **kwargs):
    if created:
        Profile.objects.get_or_create(
            user=instance,
            defaults={
                "full_name": instance.get_full_name() or instance.username,
                "role": Profile.Role.ADMIN if instance.is_superuser else Profile.Role.USER,
            },
        )


def ensure_admin_account(sender, **kwargs):
    """Create the bootstrap administrator the first time the schema exists."""
    if Profile.objects.filter(role=Profile.Role.ADMIN).exists():
        return

    email = settings.ADMIN_EMAIL.strip().lower()
    user_model = get_user_model()
    user = user_model.objects.filter(username__iexact=email).first()
    if user is None:
        Profile.create_user_with_profile(
            email=email,
            password=settings.ADMIN_PASSWORD,
            full_name="Administrator",
            role=Profile.Role.ADMIN,
        )
        logger.info("Admin user created: %s", email)
    else:
        user.is_staff = True
        user.is_superuser = True
        user.save(update_fields=["is_staff", "is_superuser"])
        Profile.objects.update_or_create(
            user=user,
            defaults={"role": Profile.Role.ADMIN},
        )
        logger.info("Existing user %s promoted to admin", email)


def connect_signals(app_config):
    user_model = get_user_model()
    post_save.connect(ensure_profile_exists, sender=user_model)
    post_migrate.connect(ensure_admin_account, sender=app_config)
