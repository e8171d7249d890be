"""PIN generator that rejects weak candidates."""


from pin_keeper.exceptions import PinGenerationError
from pin_keeper.generators.base import BaseGenerator, DigitSource
from pin_keeper.logging import get_logger
from pin_keeper.policy import PinPolicy

logger = get_logger(__name__)


class PinGenerator(BaseGenerator):
    """Generate random numeric PINs that pass the strength policy.

    Candidates are drawn digit by digit and rejected while they are
    sequential, repeat-heavy or banned. The loop is bounded by
    ``max_attempts`` so that a banned set covering the whole space
    fails loudly instead of spinning forever.
    """

    def __init__(
        self,
        policy: PinPolicy | None = None,
        default_length: int = 4,
        max_attempts: int = 10_000,
        seed: int | None = None,
        digit_source: DigitSource | None = None,
    ) -> None:
        super().__init__(seed, digit_source=digit_source)
        self.policy = policy or PinPolicy()
        self.policy.check_length(default_length)
        self.default_length = default_length
        self.max_attempts = max_attempts

    def generate(self, length: int | None = None) -> str:
        """Generate one acceptable PIN.

        Parameters
        ----------
        length : int | None
            Number of digits; defaults to ``default_length``.

        Returns
        -------
        str
            PIN of exactly ``length`` digits.

        Raises
        ------
        PinLengthError
            If ``length`` is not allowed by the policy.
        PinGenerationError
            If no acceptable PIN is found within ``max_attempts`` draws.
        """
        length = self.default_length if length is None else length
        self.policy.check_length(length)

        for attempt in range(1, self.max_attempts + 1):
            pin = self._draw(length)
            if self.policy.is_acceptable_generated(pin):
                if attempt > 1:
                    logger.debug("Accepted PIN after %d draws", attempt)
                return pin

        raise PinGenerationError(
            f"No acceptable {length}-digit PIN after {self.max_attempts} attempts; "
            "check the banned PIN list"
        )

    def _draw(self, length: int) -> str:
        digits = []
        for _ in range(length):
            digit = self.digit_source()
            if not 0 <= digit <= 9:
                raise PinGenerationError(f"Digit source returned {digit!r}, expected 0-9")
            digits.append(str(digit))
        return "".join(digits)
