import logging
import os
import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.utils import timezone

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {"jpeg", "jpg", "png", "gif", "webp", "mp4", "webm", "mov"}
ALLOWED_CONTENT_TYPES = {
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
    "video/mp4",
    "video/webm",
    "video/quicktime",
    "video/mov",
}
UPLOAD_DIR = "uploads"


def validate_media_file(uploaded_file):
    max_size = getattr(settings, "MAX_UPLOAD_SIZE", 50 * 1024 * 1024)
    if uploaded_file.size > max_size:
        raise ValidationError(
            f"{uploaded_file.name} is larger than {max_size // (1024 * 1024)} MB."
        )

    extension = os.path.splitext(uploaded_file.name)[1].lower().lstrip(".")
    content_type = (getattr(uploaded_file, "content_type", "") or "").lower()
    if extension not in ALLOWED_EXTENSIONS or content_type not in ALLOWED_CONTENT_TYPES:
        raise ValidationError("Only images and videos are allowed!")


def is_video(uploaded_file) -> bool:
    return (getattr(uploaded_file, "content_type", "") or "").startswith("video/")


def store_media_file(uploaded_file) -> str:
    extension = os.path.splitext(uploaded_file.name)[1].lower()
    unique_name = f"{int(timezone.now().timestamp() * 1000)}-{uuid.uuid4().hex[:9]}{extension}"
    saved_name = default_storage.save(f"{UPLOAD_DIR}/{unique_name}", uploaded_file)
    return default_storage.url(saved_name)


def store_media_files(files):
    """Save uploaded files and split their URLs into (images, videos)."""
    images = []
    videos = []
    for uploaded_file in files:
        url = store_media_file(uploaded_file)
        if is_video(uploaded_file):
            videos.append(url)
        else:
            images.append(url)
    if images or videos:
        logger.info("Stored %d image(s) and %d video(s)", len(images), len(videos))
    return images, videos
