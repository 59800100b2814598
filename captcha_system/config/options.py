"""Captcha generation options.

Defaults can be overridden from the environment so the service embedding the
generator does not need code changes to tune answer length or font.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from .constants import (DEFAULT_ALPHABET, DEFAULT_FONT_SIZE,
                        DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH)


class CaptchaOptions(BaseModel):
    """Parameters for one captcha challenge.

    Width or height of 0 sizes the canvas from the answer. The length bounds
    may be given in either order.
    """

    alphabet: str = Field(DEFAULT_ALPHABET, min_length=1,
                          description="Characters to draw answers from, repeat one to weight it")
    min_length: int = Field(DEFAULT_MIN_LENGTH, description="Minimum answer length")
    max_length: int = Field(DEFAULT_MAX_LENGTH, description="Maximum answer length")
    width: int = Field(0, ge=0, description="Canvas width in pixels, 0 = auto")
    height: int = Field(0, ge=0, description="Canvas height in pixels, 0 = auto")
    font_size: int = Field(DEFAULT_FONT_SIZE, gt=0, description="Font size in pixels")
    font_path: Optional[str] = Field(default=None, description="TrueType font to render with")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CaptchaOptions":
        """Build options from ``CAPTCHA_*`` environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            alphabet=env.get("CAPTCHA_ALPHABET", DEFAULT_ALPHABET),
            min_length=int(env.get("CAPTCHA_MIN_LENGTH", DEFAULT_MIN_LENGTH)),
            max_length=int(env.get("CAPTCHA_MAX_LENGTH", DEFAULT_MAX_LENGTH)),
            width=int(env.get("CAPTCHA_WIDTH", 0)),
            height=int(env.get("CAPTCHA_HEIGHT", 0)),
            font_size=int(env.get("CAPTCHA_FONT_SIZE", DEFAULT_FONT_SIZE)),
            font_path=env.get("CAPTCHA_FONT_PATH") or None,
        )
