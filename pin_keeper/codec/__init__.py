"""Obfuscation and record codecs for the account file."""

from pin_keeper.codec.obfuscation import ObfuscationCodec, XorObfuscationCodec
from pin_keeper.codec.record import DecodeResult, RecordCodec

__all__ = ["DecodeResult", "ObfuscationCodec", "RecordCodec", "XorObfuscationCodec"]
