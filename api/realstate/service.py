"""
Real state business logic.

The one rule enforced here: an update must target an existing row. Errors
raised by the repository propagate unchanged.
"""

from __future__ import annotations

import logging

from .ports import RealStateRepository
from .schemas import RealState, RealStatePayload

logger = logging.getLogger(__name__)


class RealStateService:
    def __init__(self, repository: RealStateRepository) -> None:
        self._repository = repository

    async def create(self, payload: RealStatePayload) -> RealState:
        real_state_id = await self._repository.create(payload)
        logger.info("realstate_created id=%s", real_state_id)
        return RealState.from_payload(payload, real_state_id=real_state_id)

    async def get(self, real_state_id: int) -> RealState:
        return await self._repository.get(real_state_id)

    async def update(self, payload: RealStatePayload, real_state_id: int) -> RealState:
        # Raises NotFoundError before any write when the row is missing.
        await self._repository.get(real_state_id)

        updated = await self._repository.update(payload, real_state_id)
        logger.info("realstate_updated id=%s", real_state_id)
        return updated.model_copy(update={"id": real_state_id})

    async def delete(self, real_state_id: int) -> None:
        await self._repository.delete(real_state_id)
        logger.info("realstate_deleted id=%s", real_state_id)
