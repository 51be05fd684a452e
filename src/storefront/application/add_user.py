"""Application service: Add User use case."""

from __future__ import annotations

from storefront.application.identifiers import next_id
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository


class AddUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, name: str, email: str) -> User:
        user = User.create(
            id=next_id(u.id for u in self._user_repo.list_all()),
            name=name,
            email=email,
        )
        if self._user_repo.get_by_email(user.email) is not None:
            raise ValidationError(f"Email '{user.email}' is already registered")
        self._user_repo.save(user)
        return user
