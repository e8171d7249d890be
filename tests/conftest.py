"""Pytest configuration and fixtures."""

import logging
from collections.abc import Callable, Iterable
from decimal import Decimal
from pathlib import Path

import pytest

from pin_keeper.codec import RecordCodec, XorObfuscationCodec
from pin_keeper.config import DEFAULT_OBFUSCATION_KEY
from pin_keeper.generators import AccountGenerator, PinGenerator
from pin_keeper.models import Account
from pin_keeper.services import AccountService, AuthService
from pin_keeper.store import AccountStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Account file path inside a per-test temp directory."""
    return tmp_path / "atm_users.db"


@pytest.fixture
def codec() -> RecordCodec:
    """Record codec using the default key."""
    return RecordCodec(XorObfuscationCodec(DEFAULT_OBFUSCATION_KEY))


@pytest.fixture
def store(db_path: Path, codec: RecordCodec) -> AccountStore:
    """Empty store backed by a temp file."""
    return AccountStore(db_path, codec)


@pytest.fixture
def sample_account() -> Account:
    """Unlocked account with a known PIN."""
    return Account(username="alice", pin="4829", balance=Decimal("1000.00"))


@pytest.fixture
def auth_service(store: AccountStore) -> AuthService:
    return AuthService(store)


@pytest.fixture
def account_service(store: AccountStore, seed: int) -> AccountService:
    return AccountService(store, AccountGenerator(seed=seed))


def scripted_digits(digits: Iterable[int]) -> Callable[[], int]:
    """Digit source replaying ``digits`` in order."""
    it = iter(digits)
    return lambda: next(it)


@pytest.fixture
def make_pin_generator() -> Callable[..., PinGenerator]:
    """Factory for PIN generators fed by a scripted digit string."""

    def _make(digits: str, **kwargs) -> PinGenerator:
        return PinGenerator(digit_source=scripted_digits(int(d) for d in digits), **kwargs)

    return _make


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler and level changes made by setup_logging()."""
    root = logging.getLogger()
    before = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
