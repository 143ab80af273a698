"""Application services: Login and Logout use cases."""

from __future__ import annotations

from quickbite.domain.model.account import User
from quickbite.domain.repository.account_repository import AccountRepository


class LoginHandler:

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def handle(self, name: str, email: str, phone: str = "") -> User:
        user = User.create(name=name, email=email, phone=phone)
        self._account_repo.set_user(user)
        return user


class LogoutHandler:

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def handle(self) -> bool:
        """Log out; returns False if nobody was logged in."""
        was_logged_in = self._account_repo.get_user() is not None
        self._account_repo.set_user(None)
        return was_logged_in
