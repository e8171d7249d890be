#!/usr/bin/env python3
"""Create demo accounts with Faker usernames and generated PINs.

Prints each username and PIN once, the way a receipt would, then stores
the accounts in the obfuscated account file.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pin_keeper.codec import RecordCodec, XorObfuscationCodec
from pin_keeper.config import PinKeeperConfig
from pin_keeper.generators import AccountGenerator, PinGenerator
from pin_keeper.logging import get_logger, setup_logging
from pin_keeper.policy import PinPolicy
from pin_keeper.store import AccountStore

logger = get_logger(__name__)


def seed_accounts(
    store: AccountStore,
    generator: AccountGenerator,
    count: int,
    pin_length: int | None = None,
) -> list[tuple[str, str]]:
    """Add ``count`` new accounts, skipping usernames already in the store.

    Returns
    -------
    list[tuple[str, str]]
        ``(username, pin)`` for every account added.
    """
    created = []
    for account in generator.generate_batch(count, pin_length):
        if store.add(account):
            created.append((account.username, account.pin))
        else:
            logger.info("Skipping existing username %r", account.username)
    logger.info("Seeded %d accounts into %s", len(created), store.path)
    return created


def build_account_generator(config: PinKeeperConfig, seed: int | None = None) -> AccountGenerator:
    """Account generator honouring the configured PIN policy and balance."""
    policy = PinPolicy(config.policy.allowed_lengths, config.policy.banned_pins)
    return AccountGenerator(
        pin_generator=PinGenerator(
            policy=policy,
            default_length=config.policy.default_length,
            max_attempts=config.policy.max_generation_attempts,
            seed=seed,
        ),
        default_balance=config.accounts.default_balance,
        seed=seed,
    )


def main() -> None:
    """Main entry point."""
    config = PinKeeperConfig.from_env()

    parser = argparse.ArgumentParser(description="Seed demo ATM accounts")
    parser.add_argument("--count", type=int, default=10, help="Number of accounts (default: 10)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility (default: 42)")
    parser.add_argument("--db", type=Path, default=config.store.db_path, help="Account file")
    parser.add_argument("--length", type=int, choices=[4, 6], default=None, help="PIN length (default: 4)")
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)

    generator = build_account_generator(config, args.seed)
    store = AccountStore(args.db, RecordCodec(XorObfuscationCodec(config.store.obfuscation_key)))

    for username, pin in seed_accounts(store, generator, args.count, args.length):
        print(f"{username}\t{pin}")


if __name__ == "__main__":
    main()
