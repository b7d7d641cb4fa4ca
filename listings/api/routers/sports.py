"""Sports RPC endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError

from ...models import (
    GetEventRequest,
    GetEventResponse,
    ListEventsRequest,
    ListEventsResponse,
)
from ...services import ListingError, SportsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["sports"])


def get_sports_service(request: Request) -> SportsService:
    return request.app.state.sports_service


@router.post("/list-events", response_model=ListEventsResponse)
def list_events(
    body: ListEventsRequest, service: SportsService = Depends(get_sports_service)
) -> ListEventsResponse:
    """List sporting events, optionally filtered and ordered."""

    try:
        return service.list_events(body)
    except (ListingError, SQLAlchemyError) as exc:
        logger.exception("ListEvents failed")
        raise HTTPException(500, f"Failed to list events: {exc}") from exc


@router.post("/events/get", response_model=GetEventResponse)
def get_event(
    body: GetEventRequest, service: SportsService = Depends(get_sports_service)
) -> GetEventResponse:
    try:
        return service.get_event(body)
    except (ListingError, SQLAlchemyError) as exc:
        logger.exception("GetEvent failed for id=%s", body.id)
        raise HTTPException(500, f"Failed to get event: {exc}") from exc


@router.get("/events/{event_id}", response_model=GetEventResponse)
def read_event(
    event_id: int, service: SportsService = Depends(get_sports_service)
) -> GetEventResponse:
    """Fetch a single event by id, 404 when unknown."""

    response = get_event(GetEventRequest(id=event_id), service)
    if response.event is None:
        raise HTTPException(404, "Event not found")
    return response


__all__ = ["router"]
