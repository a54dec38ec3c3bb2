# uninits/services/uploads.py
import time
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from uninits.core.config import CONFIG
from uninits.core.errors import ValidationError
from uninits.core.logger import get_logger
from uninits.models.constants import DEFAULT_PROFILE_IMAGE, IMAGE_EXTENSIONS

log = get_logger("uploads")


def ensure_dir(path: str) -> str:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return str(p)


def build_image_filename(scholar_id: str, ext: str, now_ms: int | None = None) -> str:
    """``<scholarId>-<epoch ms><ext>``."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{scholar_id}-{now_ms}{ext}"


def detect_image_extension(content_type: str | None, data: bytes, max_bytes: int) -> str:
    """
    Check an upload is a picture Pillow can read and return the extension for
    its actual format. The client's filename is never trusted.
    """
    if not content_type or not content_type.startswith("image/"):
        raise ValidationError("Not an image!")
    if not data:
        raise ValidationError("Uploaded file is empty")
    if len(data) > max_bytes:
        raise ValidationError(f"Image exceeds {max_bytes // (1024 * 1024)} MB limit")
    try:
        with Image.open(BytesIO(data)) as img:
            fmt = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise ValidationError("Uploaded file is not a readable image") from None

    ext = IMAGE_EXTENSIONS.get(fmt or "")
    if ext is None:
        raise ValidationError(f"Unsupported image format: {fmt}")
    return ext


def store_profile_image(
    upload_dir: str,
    scholar_id: str,
    content_type: str | None,
    data: bytes,
    max_bytes: int | None = None,
) -> str:
    """Validate and write an uploaded picture; returns the stored filename."""
    if max_bytes is None:
        max_bytes = CONFIG.MAX_UPLOAD_BYTES
    ext = detect_image_extension(content_type, data, max_bytes)

    filename = build_image_filename(scholar_id, ext)
    path = Path(ensure_dir(upload_dir)) / filename
    path.write_bytes(data)
    log.info("Stored profile image %s (%d bytes)", filename, len(data))
    return filename


def delete_profile_image(upload_dir: str, filename: str | None) -> bool:
    """Remove a stored picture. The shared default image is never deleted."""
    if not filename or filename == DEFAULT_PROFILE_IMAGE:
        return False
    path = Path(upload_dir) / Path(filename).name
    if not path.is_file():
        return False
    path.unlink()
    log.info("Deleted profile image %s", path.name)
    return True
