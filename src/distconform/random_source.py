"""
Random source creation and validation for distribution sampling.

A random source is a ``numpy.random.Generator``: an explicit, swappable handle to
a stream of uniform randomness. Distributions hold a reference to one and draw
from it on every sample; the harness binds a single seeded source to every
distribution so that a whole run is reproducible from one seed.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

import numpy as np

from distconform.errors import InvalidArgumentError

__all__ = [
    "BitGeneratorType",
    "RandomSource",
    "create_random_source",
    "validate_random_source",
]

RandomSource = np.random.Generator

BitGeneratorType = Annotated[
    Literal["mt19937", "pcg64"],
    "Bit generator algorithms available for seeded random sources",
]

_BIT_GENERATORS: dict[str, type[np.random.BitGenerator]] = {
    "mt19937": np.random.MT19937,
    "pcg64": np.random.PCG64,
}


def create_random_source(
    seed: int | None = None, bit_generator: BitGeneratorType = "mt19937"
) -> RandomSource:
    """
    Create a new random source.

    :param seed: Seed for a deterministic stream, None to seed from OS entropy
    :param bit_generator: Name of the bit generator algorithm to back the source
    :return: A new numpy Generator
    :raises InvalidArgumentError: If the bit generator name is not recognized
    """
    if bit_generator not in _BIT_GENERATORS:
        raise InvalidArgumentError(
            f"Unknown bit generator '{bit_generator}', "
            f"expected one of {sorted(_BIT_GENERATORS)}"
        )

    return np.random.Generator(_BIT_GENERATORS[bit_generator](seed))


def validate_random_source(source: Any) -> RandomSource:
    """
    Ensure a value can be bound as a random source.

    :param source: The candidate random source
    :return: The same source, unchanged
    :raises InvalidArgumentError: If the source is None or not a numpy Generator
    """
    if source is None:
        raise InvalidArgumentError("random_source must not be None")

    if not isinstance(source, np.random.Generator):
        raise InvalidArgumentError(
            "random_source must be a numpy.random.Generator, "
            f"got {type(source).__name__}"
        )

    return source
