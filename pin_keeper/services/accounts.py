"""Account lifecycle and balance operations."""

from dataclasses import replace
from decimal import Decimal, InvalidOperation

from pin_keeper.codec.record import FIELD_DELIMITER
from pin_keeper.exceptions import PinLengthError
from pin_keeper.generators import AccountGenerator
from pin_keeper.logging import get_logger
from pin_keeper.models import (
    AccountSummary,
    BalanceResult,
    BalanceStatus,
    CreateAccountResult,
    CreateStatus,
)
from pin_keeper.store import AccountStore

logger = get_logger(__name__)

CENTS = Decimal("0.01")


def is_valid_username(username: str) -> bool:
    """Non-empty UTF-8 encodable text with no whitespace and no record delimiter."""
    if not username or FIELD_DELIMITER in username:
        return False
    if any(ch.isspace() for ch in username):
        return False
    try:
        username.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class AccountService:
    """Create accounts and move money in and out of them.

    Balance operations do not authenticate on their own; callers run
    ``AuthService.authenticate`` first, as the command line does.
    """

    def __init__(self, store: AccountStore, generator: AccountGenerator | None = None) -> None:
        self.store = store
        self.generator = generator or AccountGenerator()

    def create_account(self, username: str, pin_length: int | None = None) -> CreateAccountResult:
        """Create an account with a freshly generated PIN.

        Parameters
        ----------
        username : str
            Unique username.
        pin_length : int | None
            4 or 6; the configured default when omitted.

        Returns
        -------
        CreateAccountResult
            CREATED with the new account (including its PIN), or
            ALREADY_EXISTS / INVALID_USERNAME / INVALID_PIN_LENGTH.
        """
        if not is_valid_username(username):
            return CreateAccountResult(CreateStatus.INVALID_USERNAME)
        if self.store.exists(username):
            return CreateAccountResult(CreateStatus.ALREADY_EXISTS)

        try:
            account = self.generator.generate(username, pin_length)
        except PinLengthError as exc:
            logger.info("Rejected account %r: %s", username, exc)
            return CreateAccountResult(CreateStatus.INVALID_PIN_LENGTH)

        if not self.store.add(account):
            return CreateAccountResult(CreateStatus.ALREADY_EXISTS)

        logger.info("Created account %r with a %d-digit PIN", username, account.pin_length)
        return CreateAccountResult(CreateStatus.CREATED, account)

    def balance(self, username: str) -> BalanceResult:
        account = self.store.get(username)
        if account is None:
            return BalanceResult(BalanceStatus.NOT_FOUND)
        return BalanceResult(BalanceStatus.OK, account.balance)

    def withdraw(self, username: str, amount: Decimal | str) -> BalanceResult:
        """Debit ``amount``; rejects non-positive amounts and overdrafts."""
        value = _parse_amount(amount)
        if value is None:
            return BalanceResult(BalanceStatus.INVALID_AMOUNT)

        account = self.store.get(username)
        if account is None:
            return BalanceResult(BalanceStatus.NOT_FOUND)
        if value > account.balance:
            return BalanceResult(BalanceStatus.INSUFFICIENT_FUNDS, account.balance)

        account = replace(account, balance=(account.balance - value).quantize(CENTS))
        self.store.update(account)
        return BalanceResult(BalanceStatus.OK, account.balance)

    def deposit(self, username: str, amount: Decimal | str) -> BalanceResult:
        """Credit ``amount``; rejects non-positive amounts."""
        value = _parse_amount(amount)
        if value is None:
            return BalanceResult(BalanceStatus.INVALID_AMOUNT)

        account = self.store.get(username)
        if account is None:
            return BalanceResult(BalanceStatus.NOT_FOUND)

        account = replace(account, balance=(account.balance + value).quantize(CENTS))
        self.store.update(account)
        return BalanceResult(BalanceStatus.OK, account.balance)

    def list_accounts(self) -> list[AccountSummary]:
        """Username, balance and lock flag for every account, sorted by username."""
        return [
            AccountSummary(a.username, a.balance, a.locked)
            for a in sorted(self.store.all(), key=lambda a: a.username)
        ]


def _parse_amount(amount: Decimal | str) -> Decimal | None:
    try:
        value = Decimal(amount)
        if not value.is_finite():
            return None
        value = value.quantize(CENTS)
    except (InvalidOperation, TypeError, ValueError):
        return None
    return value if value > 0 else None
