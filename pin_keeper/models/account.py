"""Account model."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class Account:
    """Durable unit of identity and credential state.

    ``pin`` is held in cleartext only in memory; the record codec obfuscates
    the whole line before it reaches disk.
    """

    username: str
    pin: str = field(repr=False)
    balance: Decimal = Decimal("0.00")
    wrong_attempts: int = 0
    locked: bool = False

    @property
    def pin_length(self) -> int:
        """Length fixed at creation; PIN changes must preserve it."""
        return len(self.pin)
