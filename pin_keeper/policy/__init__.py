"""PIN strength rules."""

from pin_keeper.policy.patterns import has_too_many_repeats, is_digit_string, is_sequential
from pin_keeper.policy.pin_policy import PinPolicy

__all__ = ["PinPolicy", "has_too_many_repeats", "is_digit_string", "is_sequential"]
