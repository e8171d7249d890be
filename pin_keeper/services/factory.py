"""Build the store and services from a ``PinKeeperConfig``."""

from dataclasses import dataclass

from pin_keeper.codec import RecordCodec, XorObfuscationCodec
from pin_keeper.config import PinKeeperConfig
from pin_keeper.generators import AccountGenerator, PinGenerator
from pin_keeper.policy import PinPolicy
from pin_keeper.services.accounts import AccountService
from pin_keeper.services.auth import AuthService
from pin_keeper.store import AccountStore


@dataclass
class Services:
    """Everything a front end needs, sharing one store."""

    store: AccountStore
    auth: AuthService
    accounts: AccountService


def build_services(config: PinKeeperConfig | None = None) -> Services:
    """Wire codec, store, generators and services from configuration.

    Parameters
    ----------
    config : PinKeeperConfig | None
        Settings; defaults to ``PinKeeperConfig()``.

    Returns
    -------
    Services
        Services bound to a store loaded from ``config.store.db_path``.
    """
    config = config or PinKeeperConfig()
    config.validate()

    codec = RecordCodec(XorObfuscationCodec(config.store.obfuscation_key))
    store = AccountStore(config.store.db_path, codec)

    policy = PinPolicy(config.policy.allowed_lengths, config.policy.banned_pins)
    pin_generator = PinGenerator(
        policy=policy,
        default_length=config.policy.default_length,
        max_attempts=config.policy.max_generation_attempts,
        seed=config.seed,
    )
    account_generator = AccountGenerator(
        pin_generator=pin_generator,
        default_balance=config.accounts.default_balance,
        seed=config.seed,
    )

    return Services(
        store=store,
        auth=AuthService(store, policy, config.policy.max_wrong_attempts),
        accounts=AccountService(store, account_generator),
    )
