"""Custom exception hierarchy for pin-keeper."""


class PinKeeperError(Exception):
    """Base exception for all pin-keeper errors."""


class ValidationError(PinKeeperError):
    """Raised when user-supplied input fails validation."""


class WeakPinError(ValidationError):
    """Raised when a PIN is sequential, repeat-heavy or banned."""


class PinLengthError(ValidationError):
    """Raised when a PIN length is not supported or does not match."""


class MalformedRecordError(PinKeeperError):
    """Raised when a persisted record line cannot be decoded."""


class PersistenceError(PinKeeperError):
    """Raised when the account file cannot be read or written."""


class PinGenerationError(PinKeeperError):
    """Raised when no acceptable PIN is found within the retry ceiling."""


class ConfigurationError(PinKeeperError):
    """Raised when configuration is invalid or missing."""
