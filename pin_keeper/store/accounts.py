"""File-backed account store.

The whole store lives in memory. The account file is read once when the
store is built and rewritten in full after every mutation. There is no
locking: one process owns the file at a time.
"""

import os
import tempfile
from dataclasses import dataclass, field, replace
from pathlib import Path

from pin_keeper.codec import RecordCodec
from pin_keeper.exceptions import PersistenceError
from pin_keeper.logging import get_logger
from pin_keeper.models import Account

logger = get_logger(__name__)


@dataclass
class AccountStore:
    """In-memory mapping of username to ``Account`` with full-file persistence.

    Parameters
    ----------
    path : Path
        Account file. A missing file means an empty store.
    codec : RecordCodec
        Encodes and decodes one account per line.
    """

    path: Path
    codec: RecordCodec
    accounts: dict[str, Account] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.load()

    def load(self) -> None:
        """(Re)read every record from disk, skipping malformed lines."""
        self.accounts.clear()
        try:
            with open(self.path, "r", encoding="ascii", errors="replace") as f:
                for lineno, line in enumerate(f, start=1):
                    if not line.strip():
                        continue
                    result = self.codec.decode(line)
                    if not result.ok:
                        logger.warning(
                            "Skipping malformed record at %s:%d (%s)",
                            self.path, lineno, result.error,
                        )
                        continue
                    account = result.account
                    if account.username in self.accounts:
                        logger.warning(
                            "Duplicate record for %r at %s:%d, keeping the later one",
                            account.username, self.path, lineno,
                        )
                    self.accounts[account.username] = account
        except FileNotFoundError:
            logger.info("Account file %s not found, starting empty", self.path)
            return
        except OSError as exc:
            raise PersistenceError(f"Cannot read account file {self.path}: {exc}") from exc

        logger.info("Loaded %d accounts from %s", len(self.accounts), self.path)

    def exists(self, username: str) -> bool:
        """Membership test."""
        return username in self.accounts

    def get(self, username: str) -> Account | None:
        """Return a copy of the stored account, or None if unknown."""
        account = self.accounts.get(username)
        return replace(account) if account is not None else None

    def add(self, account: Account) -> bool:
        """Insert a new account and persist.

        Returns
        -------
        bool
            False (and no change) if the username is already taken.

        Raises
        ------
        PersistenceError
            If the file cannot be written. The insert is rolled back.
        """
        if self.exists(account.username):
            return False
        self.accounts[account.username] = replace(account)
        try:
            self.persist()
        except PersistenceError:
            del self.accounts[account.username]
            raise
        return True

    def update(self, account: Account) -> bool:
        """Replace an existing account and persist.

        Returns
        -------
        bool
            False (and no change) if the username is unknown.

        Raises
        ------
        PersistenceError
            If the file cannot be written. The previous record is restored.
        """
        previous = self.accounts.get(account.username)
        if previous is None:
            return False
        self.accounts[account.username] = replace(account)
        try:
            self.persist()
        except PersistenceError:
            self.accounts[account.username] = previous
            raise
        return True

    def persist(self) -> None:
        """Rewrite the account file from scratch.

        Records are written to a temporary file next to the target, which
        then replaces it, so a crash mid-write leaves the old file intact.
        """
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write account file {self.path}: {exc}") from exc

        try:
            with os.fdopen(fd, "w", encoding="ascii", newline="\n") as f:
                for account in self.accounts.values():
                    f.write(self.codec.serialize(account) + "\n")
            os.replace(tmp_name, self.path)
        except (OSError, UnicodeError) as exc:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.debug("Temporary file %s already gone", tmp_name)
            raise PersistenceError(f"Cannot write account file {self.path}: {exc}") from exc

        logger.debug("Persisted %d accounts to %s", len(self.accounts), self.path)

    def all(self) -> list[Account]:
        """Copies of every stored account."""
        return [replace(a) for a in self.accounts.values()]

    def summary(self) -> dict[str, int]:
        """Return summary counts."""
        return {
            "accounts": len(self.accounts),
            "locked": sum(1 for a in self.accounts.values() if a.locked),
        }

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, username: object) -> bool:
        return username in self.accounts
