"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._file.read():
            if raw["id"] == user_id:
                return User(**raw)
        return None

    def get_by_email(self, email: str) -> User | None:
        for raw in self._file.read():
            if raw["email"].lower() == email.lower():
                return User(**raw)
        return None

    def list_all(self) -> list[User]:
        return [User(**raw) for raw in self._file.read()]

    def save(self, user: User) -> None:
        record = {"id": user.id, "name": user.name, "email": user.email}
        with self._file.transaction() as records:
            for i, raw in enumerate(records):
                if raw["id"] == user.id:
                    records[i] = record
                    break
            else:
                records.append(record)
