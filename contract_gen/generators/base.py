"""Base generator class for sample wizard input."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Iterator

from faker import Faker


class BaseGenerator(ABC):
    """Base class for raw step-input generators.

    Generators produce the dictionaries an operator would submit for one
    wizard step, unmasked where a person would type digits only, so the
    output goes through the same schemas as real input.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``pt_BR``).
    """

    def __init__(self, seed: int | None = None, locale: str = "pt_BR") -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)

    @abstractmethod
    def generate(self) -> dict[str, Any]:
        """Generate one raw input mapping."""

    def generate_batch(self, count: int) -> Iterator[dict[str, Any]]:
        """Generate ``count`` raw input mappings.

        Yields
        ------
        dict[str, Any]
            Generated input.
        """
        for _ in range(count):
            yield self.generate()
