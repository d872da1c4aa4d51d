"""
Contracts between the real state layers.

The router depends on `RealStateService`, the service on `RealStateRepository`.
Tests substitute either side with a double.
"""

from __future__ import annotations

from typing import Protocol

from .schemas import RealState, RealStatePayload


class RealStateRepository(Protocol):
    async def create(self, payload: RealStatePayload) -> int: ...

    async def get(self, real_state_id: int) -> RealState: ...

    async def update(self, payload: RealStatePayload, real_state_id: int) -> RealState: ...

    async def delete(self, real_state_id: int) -> None: ...


class RealStateService(Protocol):
    async def create(self, payload: RealStatePayload) -> RealState: ...

    async def get(self, real_state_id: int) -> RealState: ...

    async def update(self, payload: RealStatePayload, real_state_id: int) -> RealState: ...

    async def delete(self, real_state_id: int) -> None: ...
