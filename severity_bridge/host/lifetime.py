"""
Lifetime — a scope whose termination runs registered cleanup actions.

Usage:
    lifetime = Lifetime()
    catalog.add(lifetime, records)
    # ... later ...
    lifetime.terminate()   # records are retracted

    with Lifetime.using() as temporary:
        ...                # terminated on exit
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

logger = logging.getLogger("severity_bridge.host.lifetime")


class Lifetime:
    """Cleanup scope. Actions run once, in reverse order of registration."""

    def __init__(self, name: str = "lifetime") -> None:
        self.name = name
        self._actions: list[Callable[[], None]] = []
        self._terminated = False

    @property
    def is_terminated(self) -> bool:
        return self._terminated

    def add_action(self, action: Callable[[], None]) -> None:
        """Register an action to run when this lifetime terminates."""
        if self._terminated:
            raise ValueError(f"Lifetime '{self.name}' is already terminated")
        self._actions.append(action)

    def terminate(self) -> None:
        """
        Run all cleanup actions. Calling it again is a no-op.

        Every action runs even if an earlier one raises; the first error is
        re-raised once all actions have run.
        """
        if self._terminated:
            return
        self._terminated = True

        actions, self._actions = self._actions, []
        first_error: Exception | None = None
        for action in reversed(actions):
            try:
                action()
            except Exception as e:
                logger.error(f"Cleanup action failed in lifetime '{self.name}': {e}")
                if first_error is None:
                    first_error = e

        logger.debug(f"Lifetime '{self.name}' terminated ({len(actions)} actions)")
        if first_error is not None:
            raise first_error

    @classmethod
    def define(cls, parent: Lifetime | None = None, name: str = "lifetime") -> Lifetime:
        """Create a lifetime, nested in parent if given."""
        lifetime = cls(name)
        if parent is not None:
            parent.add_action(lifetime.terminate)
        return lifetime

    @classmethod
    @contextmanager
    def using(cls, name: str = "temporary") -> Iterator[Lifetime]:
        """Temporary lifetime, terminated when the block exits."""
        lifetime = cls(name)
        try:
            yield lifetime
        finally:
            lifetime.terminate()
