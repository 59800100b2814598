import random

import pytest

from captcha_system import DEFAULT_ALPHABET, InvalidArgument, generate_answer


@pytest.mark.parametrize("min_length,max_length", [(1, 1), (3, 5), (5, 3), (10, 12), (1, 50), (50, 50)])
def test_length_within_bounds(min_length, max_length):
    low, high = min(min_length, max_length), max(min_length, max_length)
    for _ in range(50):
        assert low <= len(generate_answer(min_length=min_length, max_length=max_length)) <= high


def test_default_alphabet_only():
    for _ in range(100):
        answer = generate_answer()
        assert 10 <= len(answer) <= 12
        assert set(answer) <= set(DEFAULT_ALPHABET)


def test_default_alphabet_excludes_ambiguous_glyphs():
    assert not set("0O1I2Z5S8B") & set(DEFAULT_ALPHABET)


def test_none_alphabet_uses_default():
    assert set(generate_answer(None)) <= set(DEFAULT_ALPHABET)


def test_reversed_bounds_are_normalized():
    lengths = {len(generate_answer(min_length=5, max_length=3)) for _ in range(200)}
    assert lengths <= {3, 4, 5}
    assert len(lengths) > 1


def test_custom_alphabet_with_repeats():
    rng = random.Random(3)
    answer = generate_answer("AAAB", 200, 200, rng=rng)
    assert set(answer) <= {"A", "B"}
    assert answer.count("A") > answer.count("B")


def test_single_character_alphabet_repeats():
    assert generate_answer("X", 4, 4) == "XXXX"


@pytest.mark.parametrize("min_length,max_length", [(0, 0), (-3, -1), (0, -2)])
def test_non_positive_length_raises(min_length, max_length):
    with pytest.raises(InvalidArgument):
        generate_answer(min_length=min_length, max_length=max_length)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        generate_answer(min_length=0, max_length=0)


def test_empty_alphabet_raises():
    with pytest.raises(InvalidArgument):
        generate_answer("", 4, 6)


def test_seeded_rng_is_reproducible():
    assert generate_answer(rng=random.Random(42)) == generate_answer(rng=random.Random(42))
