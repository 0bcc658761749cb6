"""
Uniform sampling primitives used for every generated field.

The sampler owns its random source instead of reaching for a process-wide one.
By default it draws from `secrets.SystemRandom` (national-ID-like values should
not be predictable, even in test data); passing a seed switches to a seeded
`random.Random` so runs and tests are reproducible.

A Sampler is not thread-safe; give each worker its own instance.
"""

from __future__ import annotations

import random
import secrets
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class Sampler:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else secrets.SystemRandom()

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "Sampler":
        """Seeded sampler, or a cryptographically secure one when seed is None."""
        return cls(random.Random(seed) if seed is not None else None)

    @property
    def is_secure(self) -> bool:
        return isinstance(self._rng, secrets.SystemRandom)

    def sample_index(self, pool_size: int) -> int:
        """Integer in [0, pool_size)."""
        if pool_size <= 0:
            raise ValueError(f"pool_size must be positive, got {pool_size}")
        return self._rng.randrange(pool_size)

    def choice(self, pool: Sequence[T]) -> T:
        return pool[self.sample_index(len(pool))]

    def sample_range(self, minimum: int, maximum_inclusive: int) -> int:
        """Integer in [minimum, maximum_inclusive]."""
        if maximum_inclusive < minimum:
            raise ValueError(f"empty range [{minimum}, {maximum_inclusive}]")
        return self._rng.randint(minimum, maximum_inclusive)

    def sample_digits(self, n: int, prefix: str = "") -> str:
        """
        String of length n: `prefix` followed by uniformly random decimal digits.

        sample_digits(9, prefix="S") gives a license number such as "S04718236".
        """
        if n < len(prefix):
            raise ValueError(f"prefix '{prefix}' is longer than {n} characters")
        return prefix + "".join(str(self._rng.randrange(10)) for _ in range(n - len(prefix)))

    def sample_unit(self) -> float:
        """Float in [0, 1)."""
        return self._rng.random()

    def coin(self) -> bool:
        return self._rng.randrange(2) == 1


__all__ = ["Sampler"]
