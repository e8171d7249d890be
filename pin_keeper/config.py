"""Configuration management for pin-keeper."""

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from pin_keeper.exceptions import ConfigurationError

DEFAULT_OBFUSCATION_KEY = b"pin_keeper_key_v1"

# Well-known weak PINs rejected by the generator
DEFAULT_BANNED_PINS: frozenset[str] = frozenset(
    {"1234", "0000", "1111", "1212", "7777", "1004", "2000", "4321", "2580"}
)


@dataclass
class StoreConfig:
    """Account file configuration."""

    db_path: Path = field(default_factory=lambda: Path("atm_users.db"))
    obfuscation_key: bytes = DEFAULT_OBFUSCATION_KEY


@dataclass
class PinPolicyConfig:
    """PIN generation and lockout policy."""

    default_length: int = 4
    allowed_lengths: tuple[int, ...] = (4, 6)
    max_wrong_attempts: int = 3
    banned_pins: frozenset[str] = DEFAULT_BANNED_PINS
    max_generation_attempts: int = 10_000


@dataclass
class AccountConfig:
    """Defaults applied to newly created accounts."""

    default_balance: Decimal = Decimal("1000.00")


@dataclass
class PinKeeperConfig:
    """Main configuration for pin-keeper."""

    store: StoreConfig = field(default_factory=StoreConfig)
    policy: PinPolicyConfig = field(default_factory=PinPolicyConfig)
    accounts: AccountConfig = field(default_factory=AccountConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def validate(self) -> None:
        """Check cross-field constraints.

        Raises
        ------
        ConfigurationError
            If any setting is out of range.
        """
        if not self.store.obfuscation_key:
            raise ConfigurationError("Obfuscation key must not be empty")
        if self.policy.max_wrong_attempts < 1:
            raise ConfigurationError(
                f"max_wrong_attempts must be >= 1, got {self.policy.max_wrong_attempts}"
            )
        if self.policy.default_length not in self.policy.allowed_lengths:
            raise ConfigurationError(
                f"Default PIN length {self.policy.default_length} "
                f"not in allowed lengths {self.policy.allowed_lengths}"
            )
        if self.policy.max_generation_attempts < 1:
            raise ConfigurationError("max_generation_attempts must be >= 1")
        bad = sorted(p for p in self.policy.banned_pins if not p.isdigit())
        if bad:
            raise ConfigurationError(f"Banned PINs must be digit strings: {bad}")
        if self.accounts.default_balance < 0:
            raise ConfigurationError("Default balance must not be negative")

    @classmethod
    def from_env(cls) -> "PinKeeperConfig":
        """Create config from environment variables."""
        import os
        from decimal import InvalidOperation

        store = StoreConfig(
            db_path=Path(os.getenv("PIN_KEEPER_DB_PATH", "atm_users.db")),
            obfuscation_key=os.getenv(
                "PIN_KEEPER_OBFUSCATION_KEY", DEFAULT_OBFUSCATION_KEY.decode()
            ).encode("utf-8"),
        )

        extra_banned = os.getenv("PIN_KEEPER_BANNED_PINS", "")
        banned = DEFAULT_BANNED_PINS | {p.strip() for p in extra_banned.split(",") if p.strip()}

        try:
            policy = PinPolicyConfig(
                default_length=int(os.getenv("PIN_KEEPER_PIN_LENGTH", "4")),
                max_wrong_attempts=int(os.getenv("PIN_KEEPER_MAX_ATTEMPTS", "3")),
                banned_pins=frozenset(banned),
            )
            accounts = AccountConfig(
                default_balance=Decimal(os.getenv("PIN_KEEPER_DEFAULT_BALANCE", "1000.00")),
            )
            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except (ValueError, InvalidOperation) as exc:
            raise ConfigurationError(f"Invalid environment setting: {exc}") from exc

        config = cls(
            store=store,
            policy=policy,
            accounts=accounts,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
        config.validate()
        return config
