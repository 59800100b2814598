"""Random answer strings for captcha challenges."""

import random
from typing import Optional

from .config.constants import (DEFAULT_ALPHABET, DEFAULT_MAX_LENGTH,
                               DEFAULT_MIN_LENGTH)
from .errors import InvalidArgument


def generate_answer(
    alphabet: Optional[str] = DEFAULT_ALPHABET,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
    rng: Optional[random.Random] = None,
) -> str:
    """Create a random answer.

    Args:
        alphabet: Allowed characters, supply a character several times to
            raise its frequency. ``None`` selects the default alphabet.
        min_length: Minimum answer length.
        max_length: Maximum answer length, inclusive. The bounds are swapped
            when given in the wrong order.
        rng: Randomness source. Defaults to a fresh ``random.SystemRandom``.

    Returns:
        The answer string.

    Raises:
        InvalidArgument: If the alphabet is empty or the resolved length is
            not positive.
    """
    if alphabet is None:
        alphabet = DEFAULT_ALPHABET
    if not alphabet:
        raise InvalidArgument("The alphabet must contain at least one character")

    rng = rng or random.SystemRandom()
    length = rng.randint(min(min_length, max_length), max(min_length, max_length))
    if length <= 0:
        raise InvalidArgument(
            f"The values {min_length} and {max_length} gave a final length of {length} "
            "and it must be greater than 0"
        )

    return "".join(rng.choice(alphabet) for _ in range(length))
