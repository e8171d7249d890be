"""Account record serialization.

Plaintext layout, one account per line::

    username|pin|balance|wrong_attempts|locked

``balance`` has exactly two decimals and ``locked`` is ``1`` or ``0``.
The whole plaintext line is passed through the obfuscation codec and the
resulting bytes are base64 encoded, so the obfuscated output can never
contain a newline and break line framing.
"""

import base64
import binascii
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pin_keeper.codec.obfuscation import ObfuscationCodec
from pin_keeper.exceptions import MalformedRecordError
from pin_keeper.models import Account
from pin_keeper.policy.patterns import is_digit_string

FIELD_DELIMITER = "|"
FIELD_COUNT = 5


@dataclass
class DecodeResult:
    """Outcome of decoding one persisted line: an account or an error."""

    account: Account | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.account is not None


class RecordCodec:
    """Map ``Account`` objects to and from persisted lines."""

    def __init__(self, obfuscator: ObfuscationCodec) -> None:
        self.obfuscator = obfuscator

    # --- Plaintext layer ---

    @staticmethod
    def to_plaintext(account: Account) -> str:
        """Render the ``|``-delimited plaintext line for an account."""
        return FIELD_DELIMITER.join(
            [
                account.username,
                account.pin,
                f"{account.balance:.2f}",
                str(account.wrong_attempts),
                "1" if account.locked else "0",
            ]
        )

    @staticmethod
    def from_plaintext(line: str) -> Account:
        """Parse a plaintext line.

        Raises
        ------
        MalformedRecordError
            If fields are missing, the PIN is not a digit string, or
            balance/attempts do not parse or are negative.
        """
        fields = line.split(FIELD_DELIMITER)
        if len(fields) < FIELD_COUNT:
            raise MalformedRecordError(
                f"Expected {FIELD_COUNT} fields, found {len(fields)}"
            )
        username, pin, balance_raw, attempts_raw, locked_raw = fields[:FIELD_COUNT]
        if not username:
            raise MalformedRecordError("Empty username")
        if not is_digit_string(pin):
            raise MalformedRecordError("PIN must be a non-empty digit string")

        try:
            balance = Decimal(balance_raw)
        except InvalidOperation as exc:
            raise MalformedRecordError(f"Invalid balance {balance_raw!r}") from exc
        if not balance.is_finite() or balance < 0:
            raise MalformedRecordError(f"Invalid balance {balance_raw!r}")

        try:
            wrong_attempts = int(attempts_raw)
        except ValueError as exc:
            raise MalformedRecordError(f"Invalid attempt count {attempts_raw!r}") from exc
        if wrong_attempts < 0:
            raise MalformedRecordError(f"Negative attempt count {wrong_attempts}")

        return Account(
            username=username,
            pin=pin,
            balance=balance,
            wrong_attempts=wrong_attempts,
            locked=locked_raw == "1",
        )

    # --- Persisted layer ---

    def serialize(self, account: Account) -> str:
        """Encode an account into one persisted line (no trailing newline)."""
        raw = self.obfuscator.encode(self.to_plaintext(account).encode("utf-8"))
        return base64.b64encode(raw).decode("ascii")

    def deserialize(self, line: str) -> Account:
        """Decode one persisted line.

        Raises
        ------
        MalformedRecordError
            If the line is not valid base64, not valid UTF-8 after
            de-obfuscation, or does not parse as a record.
        """
        try:
            raw = base64.b64decode(line.strip(), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise MalformedRecordError("Line is not valid base64") from exc
        try:
            plaintext = self.obfuscator.decode(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedRecordError("Decoded record is not valid UTF-8") from exc
        return self.from_plaintext(plaintext)

    def decode(self, line: str) -> DecodeResult:
        """Like ``deserialize`` but returns a ``DecodeResult`` instead of raising."""
        try:
            return DecodeResult(account=self.deserialize(line))
        except MalformedRecordError as exc:
            return DecodeResult(error=str(exc))
