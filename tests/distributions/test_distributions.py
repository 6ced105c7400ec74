import numpy as np
import pytest
from graphsynth import (
    PROPERTY_SCALE_DIVISOR,
    Distribution,
    IncorrectParametersException,
    edge_count,
    property_length,
    raw_byte_count,
    sample_fraction,
)

SAMPLES = 2000


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("none", Distribution.NONE),
        ("Uniform", Distribution.UNIFORM),
        ("NORMAL", Distribution.NORMAL),
        ("exponential", Distribution.EXPONENTIAL),
        ("exp", Distribution.EXPONENTIAL),
        (Distribution.NORMAL, Distribution.NORMAL),
    ],
)
def test_parse(value, expected):
    assert Distribution.parse(value) is expected


@pytest.mark.parametrize("value", ["gamma", "", None, 3])
def test_parse_unknown(value):
    with pytest.raises(IncorrectParametersException):
        Distribution.parse(value)


def test_none_is_always_zero(rng):
    for _ in range(100):
        assert sample_fraction(Distribution.NONE, rng) == 0.0
        assert edge_count(Distribution.NONE, rng) == 0
        assert property_length(Distribution.NONE, rng, 0, 100) == 0


def test_none_uses_min_size(rng):
    assert property_length(Distribution.NONE, rng, 7, 100) == 7


def test_none_consumes_no_randomness():
    first = np.random.default_rng(1)
    second = np.random.default_rng(1)
    sample_fraction(Distribution.NONE, first)
    assert first.uniform() == second.uniform()


def test_uniform_ranges(rng):
    for _ in range(SAMPLES):
        assert 0 <= edge_count(Distribution.UNIFORM, rng) < 10000
        assert 10 <= property_length(Distribution.UNIFORM, rng, 10, 50) < 50


def test_normal_is_clamped(rng):
    fractions = [sample_fraction(Distribution.NORMAL, rng) for _ in range(SAMPLES)]
    assert min(fractions) == 0.0
    assert max(fractions) == 1.0
    assert all(0.0 <= fraction <= 1.0 for fraction in fractions)
    assert all(0 <= edge_count(Distribution.NORMAL, rng) <= 10000 for _ in range(SAMPLES))


def test_exponential_edge_count_is_squared():
    fraction = sample_fraction(Distribution.EXPONENTIAL, np.random.default_rng(5))
    assert edge_count(Distribution.EXPONENTIAL, np.random.default_rng(5)) == int(fraction * fraction * 10000)


def test_exponential_is_not_clamped(rng):
    fractions = [sample_fraction(Distribution.EXPONENTIAL, rng) for _ in range(SAMPLES)]
    assert min(fractions) >= 0.0
    assert max(fractions) > 1.0


def test_equal_sizes_give_fixed_length(rng):
    for distribution in Distribution:
        assert property_length(distribution, rng, 12, 12) == 12


def test_raw_byte_count():
    assert PROPERTY_SCALE_DIVISOR == 3
    assert raw_byte_count(0) == 0
    assert raw_byte_count(2) == 0
    assert raw_byte_count(3) == 1
    assert raw_byte_count(100) == 33
