"""Customer profile, as far as order notifications need it."""

from __future__ import annotations

import re
from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class User:
    id: str
    name: str
    email: str

    @staticmethod
    def create(id: str, name: str, email: str) -> User:
        if not name or not name.strip():
            raise ValidationError("User name is required")
        email = (email or "").strip().lower()
        if not _EMAIL_RE.match(email):
            raise ValidationError(f"Invalid email address: {email!r}")
        return User(id=id, name=name.strip(), email=email)
