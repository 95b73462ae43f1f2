"""Bootstrap gate: no normal operation until a superuser exists."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from shopfront.domain.shared import SetupRequiredError

if TYPE_CHECKING:
    from shopfront.domain.user import SuperUserRepository

logger = logging.getLogger(__name__)


class BootstrapState(str, Enum):
    UNINITIALIZED = "uninitialized"
    AWAITING_SETUP = "awaiting_setup"
    READY = "ready"


class BootstrapGate:
    """
    First-run state machine.

    A gate starts ``UNINITIALIZED`` and resolves to ``AWAITING_SETUP`` or
    ``READY`` from a storage existence check. A fresh gate is built per
    request, so the state is re-derived every time and never cached.
    """

    def __init__(self, superuser_repository: SuperUserRepository):
        self._superuser_repo = superuser_repository
        self._state = BootstrapState.UNINITIALIZED

    @property
    def state(self) -> BootstrapState:
        return self._state

    async def evaluate(self) -> BootstrapState:
        active = await self._superuser_repo.count_active()
        self._state = (
            BootstrapState.READY if active > 0 else BootstrapState.AWAITING_SETUP
        )
        return self._state

    def mark_ready(self) -> None:
        """Record a successful superuser creation."""
        self._state = BootstrapState.READY

    async def ensure_ready(self) -> None:
        """
        Raise unless the system has an active superuser.

        Raises
        ------
        SetupRequiredError
            While awaiting superuser creation
        """
        if self._state is not BootstrapState.READY:
            await self.evaluate()
        if self._state is BootstrapState.AWAITING_SETUP:
            logger.info("Request blocked: superuser setup required")
            raise SetupRequiredError
