import base64
import binascii
import io

import httpx
from PIL import Image

from app.report.exceptions import ImageAcquisitionError

_PNG_SAFE_MODES = frozenset({"1", "L", "LA", "P", "RGB", "RGBA"})


def decode_data_uri(reference: str) -> bytes:
    """Decode a base64 data URI into raw bytes.

    Raises:
        ImageAcquisitionError: if the URI is not base64 or the payload is corrupt.
    """
    header, sep, payload = reference.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ImageAcquisitionError("Image data URI must be base64 encoded")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ImageAcquisitionError(f"Invalid base64 image payload: {exc}") from exc


def to_png(image_bytes: bytes) -> bytes:
    """Re-encode any Pillow-readable raster as PNG.

    Raises:
        ImageAcquisitionError: if Pillow cannot read or convert the image.
    """
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            if img.mode not in _PNG_SAFE_MODES:
                img = img.convert("RGB")
            buf = io.BytesIO()
            img.save(buf, format="PNG")
    except Exception as exc:
        raise ImageAcquisitionError(f"Image conversion failed: {exc}") from exc
    return buf.getvalue()


class ImageLoader:
    """Resolves a report image reference into PNG bytes."""

    def __init__(
        self,
        *,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def load_png(self, reference: str) -> bytes:
        """Decode or fetch the referenced image and convert it to PNG.

        Raises:
            ImageAcquisitionError: on any acquisition or conversion failure.
        """
        return to_png(self._acquire(reference))

    def _acquire(self, reference: str) -> bytes:
        if reference.startswith("data:"):
            return decode_data_uri(reference)
        if reference.startswith(("http://", "https://")):
            return self._fetch(reference)
        raise ImageAcquisitionError("Image reference must be a data URI or an http(s) URL")

    def _fetch(self, url: str) -> bytes:
        try:
            with httpx.Client(
                timeout=self._timeout_seconds,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ImageAcquisitionError(f"Image fetch failed: {exc}") from exc
        return response.content
