"""PIN strength policy shared by generation and manual PIN changes."""

from collections.abc import Iterable

from pin_keeper.config import DEFAULT_BANNED_PINS
from pin_keeper.exceptions import PinLengthError, ValidationError, WeakPinError
from pin_keeper.policy.patterns import has_too_many_repeats, is_digit_string, is_sequential


class PinPolicy:
    """Decide whether a PIN is acceptable.

    Parameters
    ----------
    allowed_lengths : Iterable[int]
        PIN lengths an account may be created with.
    banned_pins : Iterable[str] | None
        Well-known weak PINs. Only consulted for generated PINs.
    """

    def __init__(
        self,
        allowed_lengths: Iterable[int] = (4, 6),
        banned_pins: Iterable[str] | None = None,
    ) -> None:
        self.allowed_lengths = tuple(allowed_lengths)
        self.banned_pins = frozenset(DEFAULT_BANNED_PINS if banned_pins is None else banned_pins)

    def check_length(self, length: int) -> None:
        """Raise ``PinLengthError`` for lengths outside ``allowed_lengths``."""
        if length not in self.allowed_lengths:
            raise PinLengthError(
                f"PIN length must be one of {self.allowed_lengths}, got {length}"
            )

    def is_weak(self, pin: str) -> bool:
        """Pattern checks only (sequential or repeat-heavy)."""
        return is_sequential(pin) or has_too_many_repeats(pin)

    def is_acceptable_generated(self, pin: str) -> bool:
        """Pattern checks plus the banned set."""
        return not self.is_weak(pin) and pin not in self.banned_pins

    def check_new_pin(self, pin: str, expected_length: int) -> None:
        """Validate a user-chosen replacement PIN.

        Raises
        ------
        PinLengthError
            If the PIN is not ``expected_length`` characters long.
        ValidationError
            If the PIN contains anything other than ASCII digits.
        WeakPinError
            If the PIN is sequential or repeat-heavy.
        """
        if len(pin) != expected_length:
            raise PinLengthError(f"New PIN must be exactly {expected_length} digits")
        if not is_digit_string(pin):
            raise ValidationError("PIN must contain only the digits 0-9")
        if self.is_weak(pin):
            raise WeakPinError("New PIN is too easy to guess")
