import io
from PIL import Image
from aguli_admin.services.image_set import PendingImage

def make_png(color=(255, 0, 0)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), color).save(buf, format="PNG")
    return buf.getvalue()

def make_image(name: str) -> PendingImage:
    return PendingImage.from_upload(f"{name}.png", "image/png", name.encode())
