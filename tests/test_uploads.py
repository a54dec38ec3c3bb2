from io import BytesIO

import pytest
from PIL import Image

from uninits.core.errors import ValidationError
from uninits.services.uploads import (
    build_image_filename,
    delete_profile_image,
    detect_image_extension,
    store_profile_image,
)

LIMIT = 5 * 1024 * 1024


def _image_bytes(fmt):
    buf = BytesIO()
    Image.new("RGB", (4, 4)).save(buf, format=fmt)
    return buf.getvalue()


def test_build_image_filename():
    assert build_image_filename("2414062", ".jpg", now_ms=1700000000000) == "2414062-1700000000000.jpg"


def test_store_profile_image_writes_file(tmp_path, png_bytes):
    name = store_profile_image(str(tmp_path), "2414062", "image/png", png_bytes)

    assert name.startswith("2414062-")
    assert name.endswith(".png")
    assert (tmp_path / name).read_bytes() == png_bytes


@pytest.mark.parametrize("fmt, ext", [("PNG", ".png"), ("JPEG", ".jpg"), ("GIF", ".gif")])
def test_extension_follows_detected_format(fmt, ext):
    assert detect_image_extension("image/png", _image_bytes(fmt), LIMIT) == ext


def test_stored_name_ignores_client_extension(tmp_path, png_bytes):
    # whatever the client called it, a PNG is stored as .png
    name = store_profile_image(str(tmp_path), "2414062", "image/png", png_bytes)
    assert not name.endswith(".html")
    assert [p.suffix for p in tmp_path.iterdir()] == [".png"]


def test_unsupported_format_is_rejected(tmp_path):
    with pytest.raises(ValidationError):
        store_profile_image(str(tmp_path), "2414062", "image/tiff", _image_bytes("TIFF"))
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize(
    "content_type, data",
    [
        ("text/plain", b"hello"),
        (None, b"hello"),
        ("image/png", b""),
        ("image/png", b"definitely not a png"),
    ],
)
def test_store_profile_image_rejects_non_images(tmp_path, content_type, data):
    with pytest.raises(ValidationError):
        store_profile_image(str(tmp_path), "2414062", content_type, data)
    assert list(tmp_path.iterdir()) == []


def test_store_profile_image_size_limit(tmp_path, png_bytes):
    with pytest.raises(ValidationError):
        store_profile_image(
            str(tmp_path), "2414062", "image/png", png_bytes, max_bytes=len(png_bytes) - 1
        )


def test_delete_profile_image(tmp_path):
    (tmp_path / "old.png").write_bytes(b"x")
    (tmp_path / "default.png").write_bytes(b"x")

    assert delete_profile_image(str(tmp_path), "old.png") is True
    assert not (tmp_path / "old.png").exists()
    assert delete_profile_image(str(tmp_path), "old.png") is False
    assert delete_profile_image(str(tmp_path), "default.png") is False
    assert (tmp_path / "default.png").exists()
    assert delete_profile_image(str(tmp_path), None) is False


def test_delete_profile_image_ignores_directory_parts(tmp_path):
    outside = tmp_path / "keep.png"
    outside.write_bytes(b"x")
    inner = tmp_path / "images"
    inner.mkdir()

    assert delete_profile_image(str(inner), "../keep.png") is False
    assert outside.exists()
