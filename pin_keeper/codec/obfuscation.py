"""Reversible obfuscation applied to persisted record lines.

NOT cryptographic: anyone holding the key (or a few known plaintexts)
can reverse it. It only keeps PINs from showing up in plain text when the
account file is opened in an editor.
"""

from abc import ABC, abstractmethod

from pin_keeper.exceptions import ConfigurationError


class ObfuscationCodec(ABC):
    """Byte transform applied to a whole serialized record."""

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        """Transform plaintext bytes for storage."""

    @abstractmethod
    def decode(self, data: bytes) -> bytes:
        """Invert ``encode``."""


class XorObfuscationCodec(ObfuscationCodec):
    """XOR every byte with a fixed key repeated over the input.

    ``out[i] = data[i] ^ key[i % len(key)]``. The transform is its own
    inverse, so ``decode`` is ``encode``.

    Parameters
    ----------
    key : bytes
        Non-empty key, normally ``StoreConfig.obfuscation_key``.
    """

    def __init__(self, key: bytes) -> None:
        if not key:
            raise ConfigurationError("Obfuscation key must not be empty")
        self.key = bytes(key)

    def encode(self, data: bytes) -> bytes:
        key = self.key
        size = len(key)
        return bytes(b ^ key[i % size] for i, b in enumerate(data))

    def decode(self, data: bytes) -> bytes:
        return self.encode(data)
