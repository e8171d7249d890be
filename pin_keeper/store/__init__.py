"""Persistent account storage."""

from pin_keeper.store.accounts import AccountStore

__all__ = ["AccountStore"]
