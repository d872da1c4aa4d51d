"""
Real state API endpoints.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import APIRouter, Depends, Request, Response, status

from core.errors import AppError, BadRequestError, UnexpectedError

from . import ports, schemas

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/realstate")

T = TypeVar("T")


def get_service(request: Request) -> ports.RealStateService:
    return request.app.state.realstate_service


def parse_real_state_id(real_state_id: str) -> int:
    """
    Path ids are unsigned 64-bit integers written as plain ASCII digits.
    """
    if not real_state_id or not real_state_id.isascii() or not real_state_id.isdigit():
        raise BadRequestError()
    value = int(real_state_id)
    if value > schemas.UINT64_MAX:
        raise BadRequestError()
    return value


async def _call_service(operation: Callable[..., Awaitable[T]], *args: Any) -> T:
    try:
        return await operation(*args)
    except AppError:
        raise
    except Exception as exc:
        logger.exception("realstate_unexpected_error operation=%s", getattr(operation, "__name__", operation))
        raise UnexpectedError() from exc


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_real_state(
    payload: schemas.RealStatePayload,
    service: ports.RealStateService = Depends(get_service),
) -> dict:
    created = await _call_service(service.create, payload)
    return created.to_json()


@router.get("/{real_state_id}")
async def get_real_state(
    listing_id: int = Depends(parse_real_state_id),
    service: ports.RealStateService = Depends(get_service),
) -> dict:
    real_state = await _call_service(service.get, listing_id)
    return real_state.to_json()


@router.put("/{real_state_id}")
async def update_real_state(
    payload: schemas.RealStatePayload,
    listing_id: int = Depends(parse_real_state_id),
    service: ports.RealStateService = Depends(get_service),
) -> dict:
    updated = await _call_service(service.update, payload, listing_id)
    return updated.to_json()


@router.delete("/{real_state_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_real_state(
    listing_id: int = Depends(parse_real_state_id),
    service: ports.RealStateService = Depends(get_service),
) -> Response:
    await _call_service(service.delete, listing_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
