"""Raster images decoded with Pillow and re-encoded as PNG for the kitty protocol."""
from __future__ import annotations
import io, logging, os
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from ..errors import ImageDecodeError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RasterImage:
    path: str
    width: int           # pixels
    height: int          # pixels
    png: bytes = b""

    @property
    def aspect(self) -> float:
        return self.width / self.height

def load_image(path: str) -> RasterImage:
    """Decode `path` fully; raise ImageDecodeError on anything unreadable."""
    p = os.path.abspath(os.path.expanduser(path))
    if not os.path.isfile(p):
        raise ImageDecodeError(f"image file not found: {p}")
    try:
        with Image.open(p) as im:
            im.load()
            w, h = im.size
            if im.mode not in ("RGB", "RGBA"):
                im = im.convert("RGBA")
            buf = io.BytesIO()
            im.save(buf, format="PNG")
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageDecodeError(f"cannot decode image {p}: {e}") from e
    if not w or not h:
        raise ImageDecodeError(f"image {p} has no pixels")
    logger.debug("decoded %s (%dx%d, %d bytes png)", p, w, h, buf.tell())
    return RasterImage(path=p, width=w, height=h, png=buf.getvalue())
