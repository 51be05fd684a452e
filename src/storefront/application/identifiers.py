"""Sequential string identifiers for catalog entities and users."""

from __future__ import annotations

from collections.abc import Iterable


def next_id(existing: Iterable[str]) -> str:
    """Return one more than the highest numeric ID in *existing* ("1" if none)."""
    numeric = [int(value) for value in existing if value.isdigit()]
    return str(max(numeric) + 1) if numeric else "1"
