"""Operations exposed to front ends."""

from pin_keeper.services.accounts import AccountService, is_valid_username
from pin_keeper.services.auth import AuthService
from pin_keeper.services.factory import Services, build_services

__all__ = ["AccountService", "AuthService", "Services", "build_services", "is_valid_username"]
