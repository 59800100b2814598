#!/usr/bin/env python3
"""Noisy text CAPTCHA renderer.

The answer is drawn with a hatched two-tone fill on top of three decoy
strings of the same length and a grid of randomly colored lines, so simple
thresholding or OCR picks up several candidate strings instead of one.
"""

import argparse
import base64
import logging
import os
import random
import sys
from io import BytesIO
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw, ImageFont
from pydantic import ValidationError
from tqdm import tqdm

from .answer import generate_answer
from .config.constants import (BACKGROUND_COLOR, CANVAS_SCALE, DECOY_COLORS,
                               DEFAULT_ALPHABET, DEFAULT_FONT_SIZE,
                               HATCH_BACKGROUND, HATCH_FOREGROUND, PALETTE)
from .config.options import CaptchaOptions
from .errors import CaptchaError, InvalidArgument
from .log import configure_logging, get_trace_logger
from .metrics import load_font

logger = logging.getLogger(__name__)


def _below(rng: random.Random, limit: int) -> int:
    """Random integer in ``[0, limit)``, or 0 when the range is empty."""
    return rng.randrange(limit) if limit > 0 else 0


def _jitter(rng: random.Random, limit: int) -> int:
    """Random integer in ``[-limit, limit]``."""
    return rng.randint(-limit, limit) if limit > 0 else 0


def create_hatch_texture(width: int, height: int) -> Image.Image:
    """Create a shingle-like two-tone texture covering ``width`` x ``height``.

    Diagonal bands of the foreground tone every four pixels, broken by a
    horizontal course every eight rows.
    """
    yy, xx = np.mgrid[0:height, 0:width]
    pattern = ((xx + yy) % 4 < 2) | (yy % 8 == 0)
    texture = np.empty((height, width, 3), dtype=np.uint8)
    texture[:] = ImageColor.getrgb(HATCH_BACKGROUND)
    texture[pattern] = ImageColor.getrgb(HATCH_FOREGROUND)
    return Image.fromarray(texture)


def _draw_decoys(draw: ImageDraw.ImageDraw, font: ImageFont.FreeTypeFont, length: int,
                 stray_x: int, stray_y: int, rng: random.Random) -> List[str]:
    decoys = []
    if length == 0:
        return decoys
    for color in DECOY_COLORS:
        decoy = generate_answer(DEFAULT_ALPHABET, min_length=length, max_length=length, rng=rng)
        draw.text((_jitter(rng, stray_x), _jitter(rng, stray_y)), decoy, font=font, fill=color)
        decoys.append(decoy)
    return decoys


def _draw_noise_lines(draw: ImageDraw.ImageDraw, width: int, height: int, font_size: int,
                      stray_x: int, stray_y: int, rng: random.Random) -> int:
    count = 0

    # Vertical lines
    spacing = max(1, width // font_size + _below(rng, stray_x))
    x = _below(rng, stray_x)
    while x < width:
        draw.line(
            [(x + _jitter(rng, stray_x), _below(rng, stray_y)),
             (x + _jitter(rng, stray_x), height - _below(rng, stray_y))],
            fill=rng.choice(PALETTE),
        )
        x += spacing
        count += 1

    # Horizontal lines
    spacing = max(1, height // font_size + _below(rng, stray_y))
    y = _below(rng, stray_y)
    while y < height:
        draw.line(
            [(_below(rng, stray_x), y + _jitter(rng, stray_y)),
             (width - _below(rng, stray_x), y + _jitter(rng, stray_y))],
            fill=rng.choice(PALETTE),
        )
        y += spacing
        count += 1

    return count


def _draw_answer(canvas: Image.Image, answer: str, font: ImageFont.FreeTypeFont,
                 position: Tuple[int, int]) -> None:
    """Paint ``answer`` at ``position`` through the hatch texture."""
    with Image.new("L", canvas.size, 0) as mask, \
            create_hatch_texture(canvas.width, canvas.height) as texture:
        ImageDraw.Draw(mask).text(position, answer, font=font, fill=255)
        canvas.paste(texture, (0, 0), mask)


def render_captcha(
    answer: str,
    width: int = 0,
    height: int = 0,
    font_size: int = DEFAULT_FONT_SIZE,
    rng: Optional[random.Random] = None,
    font_path: Optional[str] = None,
) -> Image.Image:
    """Render a captcha image for ``answer``.

    Args:
        answer: The captcha solution string. It is drawn as is.
        width: Image width in pixels. 0 sizes the image from the answer.
        height: Image height in pixels. 0 sizes the image from the font size.
        font_size: Font size in pixels.
        rng: Randomness source for decoys, noise and jitter. Defaults to a
            fresh ``random.SystemRandom``; pass a seeded ``random.Random`` for
            reproducible images.
        font_path: TrueType font to use instead of the generic sans-serif.

    Returns:
        An RGB PIL Image. Encoding it is left to the caller.

    Raises:
        InvalidArgument: On negative dimensions or a non-positive font size.
        ResourceUnavailable: If no font can be loaded.
    """
    if width < 0 or height < 0:
        raise InvalidArgument(f"Invalid canvas size {width}x{height}")
    if font_size <= 0:
        raise InvalidArgument(f"Font size must be positive, got {font_size}")

    rng = rng or random.SystemRandom()
    font = load_font(font_size, font_path)
    text_width = int(font.getlength(answer))
    if width == 0 or height == 0:
        width = max(1, int(text_width * CANVAS_SCALE))
        height = int(font_size * CANVAS_SCALE)

    stray_x = font_size // 2
    stray_y = height // 4
    answer_stray_x = font_size // 3
    answer_stray_y = height // 6

    canvas = Image.new("RGB", (width, height), BACKGROUND_COLOR)
    try:
        draw = ImageDraw.Draw(canvas)
        # FreeType glyphs are anti-aliased unless the draw context is in "1" mode
        draw.fontmode = "L"

        _draw_decoys(draw, font, len(answer), stray_x, stray_y, rng)
        lines = _draw_noise_lines(draw, width, height, font_size, stray_x, stray_y, rng)

        position = (
            (width - text_width) // 2 + _jitter(rng, answer_stray_x),
            (height - font_size) // 2 + _jitter(rng, answer_stray_y),
        )
        if answer:
            _draw_answer(canvas, answer, font, position)
    except BaseException:
        canvas.close()
        raise

    logger.debug("Rendered %dx%d captcha, %d characters, %d noise lines",
                 width, height, len(answer), lines)
    return canvas


def create_captcha(options: Optional[CaptchaOptions] = None,
                   rng: Optional[random.Random] = None) -> Tuple[Image.Image, str]:
    """Generate a random answer and render it.

    Returns:
        Tuple of (image, answer). The caller stores the answer for checking.
    """
    options = options or CaptchaOptions()
    rng = rng or random.SystemRandom()
    answer = generate_answer(options.alphabet, options.min_length, options.max_length, rng=rng)
    image = render_captcha(answer, options.width, options.height, options.font_size,
                           rng=rng, font_path=options.font_path)
    return image, answer


def encode_png(image: Image.Image) -> bytes:
    """Encode ``image`` as PNG bytes."""
    buffered = BytesIO()
    image.save(buffered, format="PNG")
    return buffered.getvalue()


def to_data_url(image: Image.Image) -> str:
    """Encode ``image`` as a ``data:image/png;base64`` URL for embedding in a page."""
    return "data:image/png;base64," + base64.b64encode(encode_png(image)).decode("utf-8")


def generate_captchas(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for batch CAPTCHA generation."""
    parser = argparse.ArgumentParser(
        description="Noisy text CAPTCHA generator – decoys + line noise + hatched answer",
        epilog="Options left unset fall back to the CAPTCHA_* environment variables.",
    )
    parser.add_argument("--count", type=int, default=10)
    parser.add_argument("--output-dir", type=str, default="captcha_output")
    parser.add_argument("--width", type=int, default=None,
                        help="Image width in pixels (0 = fit the answer)")
    parser.add_argument("--height", type=int, default=None,
                        help="Image height in pixels (0 = fit the font)")
    parser.add_argument("--font-size", type=int, default=None,
                        help="Font size in pixels")
    parser.add_argument("--font-path", type=str, default=None,
                        help="TrueType font file (.ttf/.otf)")
    parser.add_argument("--symbols", type=str, default=None)
    parser.add_argument("--min-length", type=int, default=None)
    parser.add_argument("--max-length", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible output (default: OS entropy)")
    parser.add_argument("--log-level", type=str.upper, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-dir", type=str, default=None,
                        help="Also write a rotating log file to this directory")

    args = parser.parse_args(argv)
    overrides = {
        "alphabet": args.symbols,
        "min_length": args.min_length,
        "max_length": args.max_length,
        "width": args.width,
        "height": args.height,
        "font_size": args.font_size,
        "font_path": args.font_path,
    }
    try:
        defaults = CaptchaOptions.from_env()
        options = CaptchaOptions(**{
            **defaults.model_dump(),
            **{key: value for key, value in overrides.items() if value is not None},
        })
    except ValidationError as e:
        parser.error(f"invalid captcha options: {e}")
    except ValueError as e:
        parser.error(f"invalid CAPTCHA_* environment variable: {e}")

    configure_logging(args.log_level, args.log_dir)
    rng = random.Random(args.seed) if args.seed is not None else random.SystemRandom()
    os.makedirs(args.output_dir, exist_ok=True)

    failed = 0
    for i in tqdm(range(args.count), desc="CAPTCHA"):
        trace_logger = get_trace_logger(f"captcha_{i+1}")
        out_file = os.path.join(args.output_dir, f"captcha_{i+1}.png")
        try:
            img, text = create_captcha(options, rng=rng)
        except CaptchaError as e:
            trace_logger.error("Failed to generate CAPTCHA: %s", e)
            failed += 1
            continue
        with img:
            img.save(out_file)
        trace_logger.debug("Saved %s", out_file)
        print(f"Generated {text} → {out_file}")

    print(f"\nDone → {args.output_dir} ({args.count - failed} files)")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(generate_captchas())
