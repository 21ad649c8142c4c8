"""
Tests for generator state and suffix arithmetic
"""

import random

import pytest

from betterguid.kernel.alphabet import ASCENDING, BASE, SUFFIX_LENGTH
from betterguid.kernel.state import GeneratorState, random_digits
from tests.helpers import int_to_suffix, suffix_to_int


def test_seeded_state_starts_at_timestamp_zero(rng: random.Random) -> None:
    state = GeneratorState.seeded(rng)
    assert state.last_timestamp_ms == 0
    assert len(state.last_random_digits) == SUFFIX_LENGTH
    assert all(0 <= digit < BASE for digit in state.last_random_digits)


def test_same_seed_gives_same_suffix() -> None:
    first = GeneratorState.seeded(random.Random(7))
    second = GeneratorState.seeded(random.Random(7))
    assert first == second


def test_different_seeds_give_different_suffixes() -> None:
    first = GeneratorState.seeded(random.Random(7))
    second = GeneratorState.seeded(random.Random(8))
    assert first.last_random_digits != second.last_random_digits


def test_rejects_wrong_digit_count() -> None:
    with pytest.raises(ValueError):
        GeneratorState(0, [0] * 11)


def test_rejects_out_of_range_digit() -> None:
    with pytest.raises(ValueError):
        GeneratorState(0, [BASE] + [0] * 11)


def test_increment_without_carry() -> None:
    state = GeneratorState(0, [5] + [0] * 11)
    wrapped = state.increment_suffix()
    assert not wrapped
    assert state.last_random_digits == [6] + [0] * 11


def test_increment_carries_into_next_digit() -> None:
    state = GeneratorState(0, [BASE - 1, BASE - 1, 4] + [0] * 9)
    wrapped = state.increment_suffix()
    assert not wrapped
    assert state.last_random_digits == [0, 0, 5] + [0] * 9


def test_increment_matches_integer_arithmetic(rng: random.Random) -> None:
    """The digit loop is a base-63 add-one, checked against int arithmetic"""
    state = GeneratorState.seeded(rng)
    for _ in range(200):
        before = suffix_to_int(ASCENDING.encode_suffix(state.last_random_digits))
        state.increment_suffix()
        after = ASCENDING.encode_suffix(state.last_random_digits)
        assert after == int_to_suffix(before + 1)


def test_increment_overflow_wraps_to_zero() -> None:
    state = GeneratorState(0, [BASE - 1] * SUFFIX_LENGTH)
    wrapped = state.increment_suffix()
    assert wrapped
    assert state.last_random_digits == [0] * SUFFIX_LENGTH


def test_copy_is_independent() -> None:
    state = GeneratorState(10, [1] * SUFFIX_LENGTH)
    snapshot = state.copy()
    state.increment_suffix()
    state.last_timestamp_ms = 11
    assert snapshot.last_timestamp_ms == 10
    assert snapshot.last_random_digits == [1] * SUFFIX_LENGTH


def test_reseed_replaces_suffix() -> None:
    state = GeneratorState(10, [0] * SUFFIX_LENGTH)
    state.reseed(random.Random(99))
    assert state.last_random_digits == random_digits(random.Random(99))
    assert state.last_timestamp_ms == 10
