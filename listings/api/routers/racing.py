"""Racing RPC endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError

from ...models import GetRaceRequest, GetRaceResponse, ListRacesRequest, ListRacesResponse
from ...services import ListingError, RacingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["racing"])


def get_racing_service(request: Request) -> RacingService:
    return request.app.state.racing_service


@router.post("/list-races", response_model=ListRacesResponse)
def list_races(
    body: ListRacesRequest, service: RacingService = Depends(get_racing_service)
) -> ListRacesResponse:
    """List races, optionally filtered and ordered."""

    try:
        return service.list_races(body)
    except (ListingError, SQLAlchemyError) as exc:
        logger.exception("ListRaces failed")
        raise HTTPException(500, f"Failed to list races: {exc}") from exc


@router.post("/races/get", response_model=GetRaceResponse)
def get_race(
    body: GetRaceRequest, service: RacingService = Depends(get_racing_service)
) -> GetRaceResponse:
    """Fetch a single race; ``race`` is null when the id is unknown."""

    try:
        return service.get_race(body)
    except (ListingError, SQLAlchemyError) as exc:
        logger.exception("GetRace failed for id=%s", body.id)
        raise HTTPException(500, f"Failed to get race: {exc}") from exc


@router.get("/races/{race_id}", response_model=GetRaceResponse)
def read_race(
    race_id: int, service: RacingService = Depends(get_racing_service)
) -> GetRaceResponse:
    response = get_race(GetRaceRequest(id=race_id), service)
    if response.race is None:
        raise HTTPException(404, "Race not found")
    return response


__all__ = ["router"]
