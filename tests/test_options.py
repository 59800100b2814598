import pytest
from pydantic import ValidationError

from captcha_system import DEFAULT_ALPHABET, CaptchaOptions


def test_defaults():
    options = CaptchaOptions()
    assert options.alphabet == DEFAULT_ALPHABET
    assert (options.min_length, options.max_length) == (10, 12)
    assert (options.width, options.height, options.font_size) == (0, 0, 40)
    assert options.font_path is None


def test_from_env_overrides():
    options = CaptchaOptions.from_env({
        "CAPTCHA_ALPHABET": "XYZ",
        "CAPTCHA_MIN_LENGTH": "4",
        "CAPTCHA_MAX_LENGTH": "6",
        "CAPTCHA_WIDTH": "200",
        "CAPTCHA_HEIGHT": "60",
        "CAPTCHA_FONT_SIZE": "30",
        "CAPTCHA_FONT_PATH": "",
    })
    assert options.alphabet == "XYZ"
    assert (options.min_length, options.max_length) == (4, 6)
    assert (options.width, options.height, options.font_size) == (200, 60, 30)
    assert options.font_path is None


def test_from_env_empty_mapping_gives_defaults():
    assert CaptchaOptions.from_env({}) == CaptchaOptions()


@pytest.mark.parametrize("field,value", [("alphabet", ""), ("width", -1), ("height", -5), ("font_size", 0)])
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        CaptchaOptions(**{field: value})
