"""Noisy text CAPTCHA generation."""

from .answer import generate_answer
from .config import CaptchaOptions, DEFAULT_ALPHABET, PALETTE
from .errors import CaptchaError, InvalidArgument, ResourceUnavailable
from .generate import create_captcha, encode_png, render_captcha, to_data_url
from .metrics import load_font, measure_width

__all__ = [
    "CaptchaError",
    "CaptchaOptions",
    "DEFAULT_ALPHABET",
    "InvalidArgument",
    "PALETTE",
    "ResourceUnavailable",
    "create_captcha",
    "encode_png",
    "generate_answer",
    "load_font",
    "measure_width",
    "render_captcha",
    "to_data_url",
]
