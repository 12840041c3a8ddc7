import io
from PIL import Image, UnidentifiedImageError

from .image_set import PendingImage

def is_image_upload(content_type: str | None, data: bytes) -> bool:
    """True when the declared MIME type is image/* and Pillow can identify the bytes."""
    if not content_type or not content_type.startswith("image/"):
        return False
    if not data:
        return False
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError):
        return False
    return True

def filter_images(uploads: list[tuple[str, str | None, bytes]]) -> tuple[list[PendingImage], list[str]]:
    """
    Split raw (filename, content_type, data) uploads into accepted PendingImages
    and the names of rejected files, preserving the order they were given in.
    """
    accepted: list[PendingImage] = []
    rejected: list[str] = []
    for filename, content_type, data in uploads:
        if is_image_upload(content_type, data):
            accepted.append(PendingImage.from_upload(filename or "image", content_type, data))
        else:
            rejected.append(filename or "")
    return accepted, rejected
