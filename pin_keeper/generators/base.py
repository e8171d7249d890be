"""Base generator class for pin-keeper generators."""

from __future__ import annotations

import random
import secrets
from abc import ABC
from collections.abc import Callable

from faker import Faker

DigitSource = Callable[[], int]


class BaseGenerator(ABC):
    """Base class for all generators.

    Provides common initialization: a Faker instance and a random digit
    source. Without a seed the digit source draws from the operating
    system CSPRNG; with a seed both Faker and the digit source are
    reproducible, which is what tests and demo data want.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    digit_source : DigitSource | None
        Callable returning one digit in ``0..9`` per call. Overrides the
        seed-derived source; tests pass a scripted sequence here.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        digit_source: DigitSource | None = None,
    ) -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            self.rng: random.Random = random.Random(seed)
        else:
            self.rng = secrets.SystemRandom()
        self.digit_source: DigitSource = digit_source or (lambda: self.rng.randrange(10))
