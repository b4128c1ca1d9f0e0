# slowfetch/app/flow.py
from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Union

from ..art.glyph import GlyphArt, default_art, load_custom_art, os_art
from ..art.image import RasterImage, load_image
from ..config import Settings
from ..context.system import InfoLine
from ..errors import ArtLookupError
from ..ui.kitty import supports_graphics
from ..ui.layout import CompositionPlan, LayoutOptions, TerminalSize, plan_layout

logger = logging.getLogger(__name__)

ArtChoice = Union[List[GlyphArt], RasterImage]

# ───── art selection ─────
def _glyph_or_default(loader, *args) -> List[GlyphArt]:
    try:
        return loader(*args)
    except ArtLookupError as e:
        logger.warning("%s; using default art", e)
        return default_art()

def _image_or_default(path: str, env=None) -> ArtChoice:
    """Decode first (decode errors are fatal), then check the terminal can show it."""
    image = load_image(path)
    if not supports_graphics(env):
        logger.warning("terminal does not support the kitty graphics protocol; using default art")
        return default_art()
    return image

def select_art(settings: Settings,
               os_override: Optional[str] = None,
               detected_os: str = "",
               image_path: Optional[str] = None,
               env=None) -> ArtChoice:
    """Resolve which art to show.

    Priority: -i PATH, --os [NAME], config image, config custom_art,
    config os_art, default logo. `os_override` is None when --os was not
    given and "" when given without a name.
    """
    if image_path:
        return _image_or_default(image_path, env)
    if os_override is not None:
        return _glyph_or_default(os_art, os_override or detected_os)
    if settings.image and settings.image_path:
        return _image_or_default(settings.image_path, env)
    if settings.custom_art:
        return _glyph_or_default(load_custom_art, settings.custom_art)
    if settings.os_art is True:
        return _glyph_or_default(os_art, detected_os)
    if isinstance(settings.os_art, str):
        return _glyph_or_default(os_art, settings.os_art)
    return default_art()

# ───── frame ─────
def build_plan(term: TerminalSize, art: ArtChoice, info: Sequence[InfoLine],
               settings: Settings) -> CompositionPlan:
    options = LayoutOptions.from_overrides(settings.layout)
    return plan_layout(term, art, info, options)
