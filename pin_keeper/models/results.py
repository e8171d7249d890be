"""Typed results returned by the account services."""

from dataclasses import dataclass
from decimal import Decimal

from pin_keeper.models.account import Account
from pin_keeper.models.enums import AuthStatus, BalanceStatus, CreateStatus, PinChangeStatus


@dataclass
class AuthResult:
    """Outcome of one authentication attempt."""

    status: AuthStatus
    attempts_remaining: int = 0
    account: Account | None = None

    @property
    def ok(self) -> bool:
        return self.status == AuthStatus.AUTHENTICATED


@dataclass
class PinChangeResult:
    """Outcome of a PIN change, with the authentication step that gated it."""

    status: PinChangeStatus
    auth: AuthResult | None = None

    @property
    def ok(self) -> bool:
        return self.status == PinChangeStatus.CHANGED


@dataclass
class CreateAccountResult:
    status: CreateStatus
    account: Account | None = None

    @property
    def ok(self) -> bool:
        return self.status == CreateStatus.CREATED


@dataclass
class BalanceResult:
    status: BalanceStatus
    balance: Decimal | None = None

    @property
    def ok(self) -> bool:
        return self.status == BalanceStatus.OK


@dataclass(frozen=True)
class AccountSummary:
    """Read-only view for administrative listings (no PIN)."""

    username: str
    balance: Decimal
    locked: bool
