"""Account generator: builds fresh Account records with generated PINs."""

from decimal import Decimal
from typing import Iterator

from pin_keeper.generators.base import BaseGenerator, DigitSource
from pin_keeper.generators.pin import PinGenerator
from pin_keeper.models import Account


class AccountGenerator(BaseGenerator):
    """Generate new, unlocked accounts.

    Usernames come from the caller, or from Faker when generating demo
    data. Every account gets a PIN from ``pin_generator``, the opening
    balance, zero wrong attempts and ``locked=False``.
    """

    def __init__(
        self,
        pin_generator: PinGenerator | None = None,
        default_balance: Decimal = Decimal("1000.00"),
        seed: int | None = None,
        digit_source: DigitSource | None = None,
    ) -> None:
        super().__init__(seed, digit_source=digit_source)
        self.pin_generator = pin_generator or PinGenerator(seed=seed, digit_source=digit_source)
        self.default_balance = default_balance

    def generate(self, username: str | None = None, pin_length: int | None = None) -> Account:
        """Generate a single account.

        Parameters
        ----------
        username : str | None
            Account username; a Faker user name when omitted.
        pin_length : int | None
            PIN length, defaults to the PIN generator's default.

        Returns
        -------
        Account
            New account, not yet stored.
        """
        return Account(
            username=username or self.fake.user_name(),
            pin=self.pin_generator.generate(pin_length),
            balance=self.default_balance.quantize(Decimal("0.01")),
        )

    def generate_batch(self, count: int, pin_length: int | None = None) -> Iterator[Account]:
        """Generate ``count`` demo accounts with distinct usernames."""
        seen: set[str] = set()
        while len(seen) < count:
            username = self.fake.user_name()
            if username in seen:
                continue
            seen.add(username)
            yield self.generate(username, pin_length)
