"""Authentication and lockout.

Per-account states::

    Unlocked/NoFailures --wrong--> Unlocked/Failing(1) --wrong--> ... --> Locked
            ^                               |
            +------------- correct ---------+

``Locked`` is terminal here: attempts are rejected before the PIN is
compared and nothing is written. Every other attempt is persisted, so a
lockout survives restarts.
"""

import hmac
from dataclasses import replace

from pin_keeper.exceptions import PinLengthError, ValidationError
from pin_keeper.logging import get_logger
from pin_keeper.models import AuthResult, AuthStatus, PinChangeResult, PinChangeStatus
from pin_keeper.policy import PinPolicy
from pin_keeper.store import AccountStore

logger = get_logger(__name__)


class AuthService:
    """Enforce the bounded-attempts policy and PIN change rules."""

    def __init__(
        self,
        store: AccountStore,
        policy: PinPolicy | None = None,
        max_wrong_attempts: int = 3,
    ) -> None:
        self.store = store
        self.policy = policy or PinPolicy()
        self.max_wrong_attempts = max_wrong_attempts

    def authenticate(self, username: str, candidate_pin: str) -> AuthResult:
        """Check a PIN and advance the lockout state machine.

        Parameters
        ----------
        username : str
            Account to authenticate.
        candidate_pin : str
            PIN as entered.

        Returns
        -------
        AuthResult
            AUTHENTICATED, WRONG_PIN (with attempts remaining), LOCKED or
            NOT_FOUND. The attempt that exhausts the allowance returns
            WRONG_PIN with zero attempts remaining and a locked account.
        """
        account = self.store.get(username)
        if account is None:
            return AuthResult(AuthStatus.NOT_FOUND)

        if account.locked:
            logger.info("Rejected attempt on locked account %r", username)
            return AuthResult(AuthStatus.LOCKED, 0, account)

        if _pins_match(account.pin, candidate_pin):
            account = replace(account, wrong_attempts=0)
            self.store.update(account)
            return AuthResult(AuthStatus.AUTHENTICATED, self.max_wrong_attempts, account)

        attempts = account.wrong_attempts + 1
        locked = attempts >= self.max_wrong_attempts
        account = replace(account, wrong_attempts=attempts, locked=locked)
        self.store.update(account)

        if locked:
            logger.warning("Account %r locked after %d wrong PIN attempts", username, attempts)
        else:
            logger.info("Wrong PIN for %r (%d/%d)", username, attempts, self.max_wrong_attempts)

        return AuthResult(
            AuthStatus.WRONG_PIN,
            max(0, self.max_wrong_attempts - attempts),
            account,
        )

    def change_pin(self, username: str, current_pin: str, new_pin: str) -> PinChangeResult:
        """Replace a PIN after authenticating with the current one.

        The new PIN must keep the account's length and must be neither
        sequential nor repeat-heavy. The banned list is not applied here.
        A failed authentication counts toward lockout as usual.
        """
        auth = self.authenticate(username, current_pin)
        if not auth.ok:
            return PinChangeResult(PinChangeStatus.NOT_AUTHENTICATED, auth)

        account = auth.account
        try:
            self.policy.check_new_pin(new_pin, account.pin_length)
        except PinLengthError:
            return PinChangeResult(PinChangeStatus.WRONG_LENGTH, auth)
        except ValidationError as exc:
            logger.info("Rejected new PIN for %r: %s", username, exc)
            return PinChangeResult(PinChangeStatus.WEAK_PIN, auth)

        self.store.update(replace(account, pin=new_pin, wrong_attempts=0))
        logger.info("PIN changed for %r", username)
        return PinChangeResult(PinChangeStatus.CHANGED, auth)


def _pins_match(stored: str, candidate: str) -> bool:
    return hmac.compare_digest(stored.encode("utf-8"), candidate.encode("utf-8"))
