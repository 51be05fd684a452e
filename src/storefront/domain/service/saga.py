"""Saga: an ordered stack of compensating actions.

Each forward step that succeeds records how to undo itself.  When a later
step fails, ``compensate()`` unwinds the recorded actions in reverse
order, so the most recent change is undone first.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import structlog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Compensation:
    description: str
    action: Callable[[], None]


class Saga:

    def __init__(self, name: str) -> None:
        self.name = name
        self._compensations: list[Compensation] = []

    @property
    def pending(self) -> list[Compensation]:
        """Compensations recorded and not yet run, oldest first."""
        return list(self._compensations)

    def record(self, description: str, action: Callable[[], None]) -> None:
        """Push the undo action for a forward step that just succeeded."""
        self._compensations.append(Compensation(description, action))

    def compensate(self) -> None:
        """Run every recorded compensation, newest first.

        A failing compensation is logged and the unwind continues with the
        next one; the caller is already propagating the original error.
        The stack is empty afterwards, so a second call is a no-op.
        """
        log = logger.bind(saga=self.name)
        while self._compensations:
            step = self._compensations.pop()
            try:
                step.action()
            except Exception:
                log.exception("compensation_failed", step=step.description)
            else:
                log.info("compensation_applied", step=step.description)
