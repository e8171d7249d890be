"""Domain models for pin-keeper."""

from pin_keeper.models.account import Account
from pin_keeper.models.enums import AuthStatus, BalanceStatus, CreateStatus, PinChangeStatus
from pin_keeper.models.results import (
    AccountSummary,
    AuthResult,
    BalanceResult,
    CreateAccountResult,
    PinChangeResult,
)

__all__ = [
    "Account",
    "AccountSummary",
    "AuthResult",
    "AuthStatus",
    "BalanceResult",
    "BalanceStatus",
    "CreateAccountResult",
    "CreateStatus",
    "PinChangeResult",
    "PinChangeStatus",
]
