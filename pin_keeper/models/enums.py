"""Enumeration types for operation outcomes."""

from enum import Enum


class AuthStatus(str, Enum):
    AUTHENTICATED = "AUTHENTICATED"
    WRONG_PIN = "WRONG_PIN"
    LOCKED = "LOCKED"
    NOT_FOUND = "NOT_FOUND"


class PinChangeStatus(str, Enum):
    CHANGED = "CHANGED"
    WEAK_PIN = "WEAK_PIN"
    WRONG_LENGTH = "WRONG_LENGTH"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"


class CreateStatus(str, Enum):
    CREATED = "CREATED"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INVALID_USERNAME = "INVALID_USERNAME"
    INVALID_PIN_LENGTH = "INVALID_PIN_LENGTH"


class BalanceStatus(str, Enum):
    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
