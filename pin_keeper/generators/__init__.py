"""PIN and account generators."""

from pin_keeper.generators.account import AccountGenerator
from pin_keeper.generators.base import BaseGenerator, DigitSource
from pin_keeper.generators.pin import PinGenerator

__all__ = ["AccountGenerator", "BaseGenerator", "DigitSource", "PinGenerator"]
