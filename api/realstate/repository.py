"""
Real state persistence (raw SQL).

Every driver failure is logged and surfaced as `InternalError`; a select that
matches no row is `NotFoundError`. Nothing else leaves this module.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from core.db import Database
from core.errors import InternalError, NotFoundError

from .schemas import RealState, RealStatePayload

logger = logging.getLogger(__name__)

# real_state_id is a BIGSERIAL; larger ids can never match a row.
BIGINT_MAX = 2**63 - 1

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS real_states (
    real_state_id           BIGSERIAL PRIMARY KEY,
    real_state_registration NUMERIC(20, 0) NOT NULL,
    real_state_address      TEXT NOT NULL,
    real_state_size         NUMERIC(20, 0) NOT NULL,
    real_state_price        DOUBLE PRECISION NOT NULL,
    real_state_state        TEXT NOT NULL
)
"""

CREATE_REAL_STATE = """
INSERT INTO real_states (
    real_state_registration, real_state_address, real_state_size, real_state_price, real_state_state
)
VALUES ($1, $2, $3, $4, $5)
RETURNING real_state_id
"""

GET_REAL_STATE = """
SELECT real_state_id, real_state_registration, real_state_address,
       real_state_size, real_state_price, real_state_state
FROM real_states
WHERE real_state_id = $1
"""

UPDATE_REAL_STATE = """
UPDATE real_states
SET real_state_registration = $1,
    real_state_address = $2,
    real_state_size = $3,
    real_state_price = $4,
    real_state_state = $5
WHERE real_state_id = $6
"""

DELETE_REAL_STATE = """
DELETE FROM real_states
WHERE real_state_id = $1
"""


def _payload_params(payload: RealStatePayload) -> tuple[Any, ...]:
    return (
        Decimal(payload.registration),
        payload.address,
        Decimal(payload.size),
        float(payload.price),
        payload.state,
    )


def _row_to_real_state(row: dict) -> RealState:
    return RealState(
        id=int(row["real_state_id"]),
        registration=int(row["real_state_registration"]),
        address=str(row["real_state_address"]),
        size=int(row["real_state_size"]),
        price=float(row["real_state_price"]),
        state=str(row["real_state_state"]),
    )


class RealStateRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def create(self, payload: RealStatePayload) -> int:
        try:
            row = await self._db.fetch_one(CREATE_REAL_STATE, *_payload_params(payload))
        except Exception as exc:
            logger.exception("realstate_create_failed")
            raise InternalError() from exc

        if row is None or row.get("real_state_id") is None:
            logger.error("realstate_create_failed reason=no_generated_id")
            raise InternalError()
        return int(row["real_state_id"])

    async def get(self, real_state_id: int) -> RealState:
        if real_state_id > BIGINT_MAX:
            raise NotFoundError()

        try:
            row = await self._db.fetch_one(GET_REAL_STATE, real_state_id)
        except Exception as exc:
            logger.exception("realstate_get_failed id=%s", real_state_id)
            raise InternalError() from exc

        if row is None:
            raise NotFoundError()

        try:
            return _row_to_real_state(row)
        except (KeyError, TypeError, ValueError) as exc:
            logger.exception("realstate_scan_failed id=%s", real_state_id)
            raise InternalError() from exc

    async def update(self, payload: RealStatePayload, real_state_id: int) -> RealState:
        """
        Overwrite every column except the id. Existence is the caller's concern.
        """
        if real_state_id <= BIGINT_MAX:
            try:
                await self._db.execute(UPDATE_REAL_STATE, *_payload_params(payload), real_state_id)
            except Exception as exc:
                logger.exception("realstate_update_failed id=%s", real_state_id)
                raise InternalError() from exc
        return RealState.from_payload(payload)

    async def delete(self, real_state_id: int) -> None:
        # No rows-affected check: deleting a missing id is a success.
        if real_state_id > BIGINT_MAX:
            return None
        try:
            await self._db.execute(DELETE_REAL_STATE, real_state_id)
        except Exception as exc:
            logger.exception("realstate_delete_failed id=%s", real_state_id)
            raise InternalError() from exc
