"""Command line front end for pin-keeper.

Each balance command authenticates first, as an ATM session would::

    pin-keeper create alice --length 6
    pin-keeper balance alice --pin 482913
    pin-keeper withdraw alice 50 --pin 482913
    pin-keeper change-pin alice --pin 482913 --new-pin 740395
    pin-keeper list
"""

import argparse
import getpass
import sys
from dataclasses import replace
from pathlib import Path

from pin_keeper.config import PinKeeperConfig
from pin_keeper.exceptions import PinKeeperError
from pin_keeper.logging import get_logger, setup_logging
from pin_keeper.models import AuthResult, AuthStatus, BalanceStatus, CreateStatus, PinChangeStatus
from pin_keeper.services import Services, build_services

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pin-keeper",
        description="Issue and manage ATM PINs in an obfuscated account file",
    )
    parser.add_argument("--db", type=Path, default=None, help="Account file (default: PIN_KEEPER_DB_PATH or atm_users.db)")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument("--log-format", type=str, choices=["standard", "json"], default=None, help="Log format")
    parser.add_argument("--seed", type=int, default=None, help="Seed PIN generation (demo/testing only)")

    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Create an account and print its generated PIN")
    create.add_argument("username")
    create.add_argument("--length", type=int, choices=[4, 6], default=None, help="PIN length (default: 4)")

    auth = sub.add_parser("auth", help="Check a PIN")
    auth.add_argument("username")
    auth.add_argument("--pin", default=None, help="PIN (prompted when omitted)")

    balance = sub.add_parser("balance", help="Show balance")
    balance.add_argument("username")
    balance.add_argument("--pin", default=None)

    for name, help_text in (("withdraw", "Withdraw cash"), ("deposit", "Deposit cash")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("username")
        cmd.add_argument("amount")
        cmd.add_argument("--pin", default=None)

    change = sub.add_parser("change-pin", help="Change PIN (same length, not sequential or repeated)")
    change.add_argument("username")
    change.add_argument("--pin", default=None, help="Current PIN")
    change.add_argument("--new-pin", default=None, help="New PIN")

    sub.add_parser("list", help="Admin: list usernames, balances and lock state")

    return parser


def _read_pin(value: str | None, prompt: str) -> str:
    return value if value is not None else getpass.getpass(prompt)


def _report_auth_failure(result: AuthResult) -> int:
    if result.status == AuthStatus.NOT_FOUND:
        print("No such user.")
    elif result.status == AuthStatus.LOCKED:
        print("Account is locked due to too many wrong attempts. Contact admin.")
    elif result.account is not None and result.account.locked:
        print("Wrong PIN. Account locked due to too many wrong attempts.")
    else:
        print(f"Wrong PIN. Attempts remaining: {result.attempts_remaining}")
    return 1


def _run(args: argparse.Namespace, services: Services) -> int:
    if args.command == "create":
        result = services.accounts.create_account(args.username, args.length)
        if result.status == CreateStatus.ALREADY_EXISTS:
            print("User already exists.")
            return 1
        if not result.ok:
            print(f"Cannot create account: {result.status.value}")
            return 1
        print(f"Generated PIN for user '{args.username}': {result.account.pin}")
        print("(Store it securely; it will not be shown again.)")
        return 0

    if args.command == "list":
        accounts = services.accounts.list_accounts()
        if not accounts:
            print("(no accounts)")
            return 0
        print("Username\tBalance\tLocked")
        for summary in accounts:
            print(f"{summary.username}\t{summary.balance:.2f}\t{'Yes' if summary.locked else 'No'}")
        return 0

    current_pin = _read_pin(args.pin, "PIN: ")
    if args.command == "change-pin":
        new_pin = _read_pin(args.new_pin, "New PIN: ")
        change = services.auth.change_pin(args.username, current_pin, new_pin)
        if change.status == PinChangeStatus.NOT_AUTHENTICATED:
            return _report_auth_failure(change.auth)
        messages = {
            PinChangeStatus.CHANGED: "PIN changed successfully.",
            PinChangeStatus.WRONG_LENGTH: f"New PIN must be {len(current_pin)} digits.",
            PinChangeStatus.WEAK_PIN: "New PIN is weak; choose a less trivial PIN.",
        }
        print(messages[change.status])
        return 0 if change.ok else 1

    auth = services.auth.authenticate(args.username, current_pin)
    if not auth.ok:
        return _report_auth_failure(auth)

    if args.command == "auth":
        print("Authentication successful.")
        return 0

    if args.command == "balance":
        result = services.accounts.balance(args.username)
    elif args.command == "withdraw":
        result = services.accounts.withdraw(args.username, args.amount)
    else:
        result = services.accounts.deposit(args.username, args.amount)

    if result.status == BalanceStatus.INVALID_AMOUNT:
        print("Invalid amount.")
        return 1
    if result.status == BalanceStatus.INSUFFICIENT_FUNDS:
        print("Insufficient funds.")
        return 1
    if not result.ok:
        print("No such user.")
        return 1
    print(f"Balance: {result.balance:.2f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = _build_parser().parse_args(argv)

    try:
        config = PinKeeperConfig.from_env()
        if args.db is not None:
            config.store = replace(config.store, db_path=args.db)
        if args.seed is not None:
            config.seed = args.seed
        setup_logging(args.log_level or config.log_level, args.log_format or config.log_format)
        return _run(args, build_services(config))
    except PinKeeperError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
