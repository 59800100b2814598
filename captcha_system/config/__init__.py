from .constants import DECOY_COLORS, DEFAULT_ALPHABET, PALETTE
from .options import CaptchaOptions

__all__ = ["CaptchaOptions", "DECOY_COLORS", "DEFAULT_ALPHABET", "PALETTE"]
