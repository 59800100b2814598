"""Font loading and text width estimation."""

import logging
from typing import Optional

from PIL import ImageFont

from .config.constants import FONT_CANDIDATES
from .errors import ResourceUnavailable

logger = logging.getLogger(__name__)


def load_font(font_size: int, font_path: Optional[str] = None) -> ImageFont.FreeTypeFont:
    """Load a scalable sans-serif font at ``font_size`` pixels.

    An explicit ``font_path`` must load; otherwise the known system faces are
    tried, then the font bundled with Pillow.

    Raises:
        ResourceUnavailable: If no font can be loaded.
    """
    if font_path:
        try:
            return ImageFont.truetype(font_path, font_size)
        except OSError as e:
            raise ResourceUnavailable(f"Cannot load font {font_path!r}: {e}") from e

    for candidate in FONT_CANDIDATES:
        try:
            font = ImageFont.truetype(candidate, font_size)
        except OSError:
            continue
        logger.debug("Using font %s at %dpx", candidate, font_size)
        return font

    try:
        font = ImageFont.load_default(size=font_size)
    except (OSError, ImportError) as e:
        raise ResourceUnavailable(f"No scalable font available: {e}") from e
    if not isinstance(font, ImageFont.FreeTypeFont):
        # Bitmap fallback cannot be sized, Pillow was built without FreeType
        raise ResourceUnavailable("No scalable font available, Pillow lacks FreeType support")
    logger.debug("Using Pillow default font at %dpx", font_size)
    return font


def measure_width(text: str, font_size: int, font_path: Optional[str] = None) -> int:
    """Approximate the width in pixels of ``text`` drawn at ``font_size``."""
    font = load_font(font_size, font_path)
    return int(font.getlength(text))
