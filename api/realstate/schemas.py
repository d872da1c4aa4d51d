"""
Pydantic schemas for real state listings.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

UINT64_MAX = 2**64 - 1


class RealStatePayload(BaseModel):
    """
    Request body for create/update. Missing fields default to zero values,
    unknown keys (including a client-supplied `id`) are ignored and values of
    the wrong JSON type are rejected rather than coerced.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    registration: int = Field(default=0, ge=0, le=UINT64_MAX)
    address: str = ""
    size: int = Field(default=0, ge=0, le=UINT64_MAX)
    price: float = 0.0
    state: str = ""


class RealState(RealStatePayload):
    id: int | None = Field(default=None, ge=0, le=UINT64_MAX)

    @classmethod
    def from_payload(cls, payload: RealStatePayload, *, real_state_id: int | None = None) -> RealState:
        return cls(id=real_state_id, **payload.model_dump())

    def to_json(self) -> dict:
        body: dict = {}
        if self.id:
            body["id"] = self.id
        body.update(self.model_dump(exclude={"id"}))
        return body
