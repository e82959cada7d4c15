import io

import pytest
from PIL import Image

SAMPLE_ANALYSIS = "\n".join([
    "Plant Name: Boston Fern",
    "Scientific Name: Nephrolepis exaltata",
    "",
    "A lush, arching fern with feathery fronds.",
    "Best Growing Conditions:",
    "Light: Bright, indirect light. Avoid midday sun: it scorches fronds.",
    "   ",
    "Keep the soil evenly moist.",
])


def make_image_bytes(
    fmt: str,
    mode: str = "RGB",
    size: tuple[int, int] = (40, 20),
    color: object = (34, 139, 34),
) -> bytes:
    """Generate a small solid-colour image in the given format."""
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    return make_image_bytes("PNG")


@pytest.fixture()
def jpeg_bytes() -> bytes:
    return make_image_bytes("JPEG")


@pytest.fixture()
def cmyk_jpeg_bytes() -> bytes:
    return make_image_bytes("JPEG", mode="CMYK", color=(0, 50, 100, 0))


@pytest.fixture()
def sample_analysis() -> str:
    return SAMPLE_ANALYSIS


@pytest.fixture()
def gif_bytes() -> bytes:
    return make_image_bytes("GIF", mode="P", color=3)
