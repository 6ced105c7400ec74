import math
from enum import Enum

import numpy as np

from graphsynth.exceptions import IncorrectParametersException

NORMAL_MEAN = 0.5
NORMAL_STDDEV = 0.5
EXPONENTIAL_RATE = 0.5

MAX_EDGES_SCALE = 10000

# Sampled property lengths are divided by this before raw bytes are drawn.
# The value is carried over as observed; it is not derived from the expansion
# factor of the text encoding.
PROPERTY_SCALE_DIVISOR = 3


class Distribution(Enum):
    NONE = "none"
    UNIFORM = "uniform"
    NORMAL = "normal"
    EXPONENTIAL = "exponential"

    @classmethod
    def parse(cls, value) -> "Distribution":
        """Returns the distribution named by `value`.

        Accepts a member, its value or its name in any case. `exp` is an
        alias of `exponential`."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            if name == "exp":
                return cls.EXPONENTIAL
            for distribution in cls:
                if distribution.value == name:
                    return distribution
        raise IncorrectParametersException(
            "Unknown distribution {!r}, expected one of: {}.".format(value, ", ".join(d.value for d in cls))
        )


def sample_fraction(distribution: Distribution, rng: np.random.Generator) -> float:
    """Draws the fraction used to scale a property length or an edge count.

    `none` always yields 0 without consuming randomness. `normal` is clamped to
    [0, 1]; `exponential` is left unclamped so its tail can exceed 1."""
    if distribution is Distribution.NONE:
        return 0.0
    if distribution is Distribution.UNIFORM:
        return rng.uniform(0.0, 1.0)
    if distribution is Distribution.NORMAL:
        return min(max(rng.normal(NORMAL_MEAN, NORMAL_STDDEV), 0.0), 1.0)
    if distribution is Distribution.EXPONENTIAL:
        return rng.exponential(1.0 / EXPONENTIAL_RATE)
    raise IncorrectParametersException("Unsupported distribution {!r}.".format(distribution))


def property_length(distribution: Distribution, rng: np.random.Generator, min_size: int, max_size: int) -> int:
    fraction = sample_fraction(distribution, rng)
    return min_size + math.floor(fraction * (max_size - min_size))


def edge_count(distribution: Distribution, rng: np.random.Generator) -> int:
    fraction = sample_fraction(distribution, rng)
    if distribution is Distribution.EXPONENTIAL:
        # squaring fattens the tail: a few nodes get a very high degree
        fraction = fraction * fraction
    return math.floor(fraction * MAX_EDGES_SCALE)


def raw_byte_count(length: int) -> int:
    """Number of random bytes drawn for a property of the sampled `length`."""
    return length // PROPERTY_SCALE_DIVISOR
