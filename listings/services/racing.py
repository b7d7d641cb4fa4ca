"""Racing service: request/response envelopes around the races store."""

from __future__ import annotations

from ..models import (
    GetRaceRequest,
    GetRaceResponse,
    ListRacesRequest,
    ListRacesResponse,
)
from .races import RacesRepo


class RacingService:
    def __init__(self, races_repo: RacesRepo):
        self.races_repo = races_repo

    def list_races(self, request: ListRacesRequest) -> ListRacesResponse:
        races = self.races_repo.list(request.filter, request.order)
        return ListRacesResponse(races=races)

    def get_race(self, request: GetRaceRequest) -> GetRaceResponse:
        return GetRaceResponse(race=self.races_repo.get(request.id))


__all__ = ["RacingService"]
