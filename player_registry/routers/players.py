from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from player_registry.database import get_db
from player_registry.exceptions import BadRequestError, NotFoundError
from player_registry.filters import PlayerFilter, build_player_filter
from player_registry.models import Race, Profession
from player_registry.schemas import PlayerOrder, PlayerResponse
from player_registry.service import PlayerService
from player_registry.store import SqlAlchemyPlayerStore
from player_registry.validation import INT_MIN, INT_MAX, LONG_MIN, LONG_MAX

router = APIRouter()


def get_player_service(db: AsyncSession = Depends(get_db)) -> PlayerService:
    return PlayerService(SqlAlchemyPlayerStore(db))


def player_filter_params(
    name: Optional[str] = None,
    title: Optional[str] = None,
    race: Optional[Race] = None,
    profession: Optional[Profession] = None,
    after: Optional[int] = Query(None, ge=LONG_MIN, le=LONG_MAX),
    before: Optional[int] = Query(None, ge=LONG_MIN, le=LONG_MAX),
    banned: Optional[bool] = None,
    min_experience: Optional[int] = Query(None, alias="minExperience", ge=INT_MIN, le=INT_MAX),
    max_experience: Optional[int] = Query(None, alias="maxExperience", ge=INT_MIN, le=INT_MAX),
    min_level: Optional[int] = Query(None, alias="minLevel", ge=INT_MIN, le=INT_MAX),
    max_level: Optional[int] = Query(None, alias="maxLevel", ge=INT_MIN, le=INT_MAX),
) -> PlayerFilter:
    return build_player_filter(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


async def _run(operation):
    # ✅ Translate service errors into HTTP responses
    try:
        return await operation
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=List[PlayerResponse])
async def get_players(
    player_filter: PlayerFilter = Depends(player_filter_params),
    order: Optional[PlayerOrder] = None,
    page_number: Optional[int] = Query(None, alias="pageNumber", ge=0, le=INT_MAX),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1, le=INT_MAX),
    service: PlayerService = Depends(get_player_service),
):
    players = await service.list_players(player_filter, order, page_number, page_size)
    return [PlayerResponse.from_player(p) for p in players]


@router.get("/count", response_model=int)
async def get_player_count(
    player_filter: PlayerFilter = Depends(player_filter_params),
    service: PlayerService = Depends(get_player_service),
):
    return await service.count_players(player_filter)


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(player_id: str, service: PlayerService = Depends(get_player_service)):
    player = await _run(service.get_player(player_id))
    return PlayerResponse.from_player(player)


@router.delete("/{player_id}")
async def delete_player(player_id: str, service: PlayerService = Depends(get_player_service)):
    await _run(service.delete_player(player_id))
    return Response(status_code=200)


@router.post("", response_model=PlayerResponse)
async def create_player(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: PlayerService = Depends(get_player_service),
):
    player = await _run(service.create_player(payload))
    return PlayerResponse.from_player(player)


@router.post("/{player_id}", response_model=PlayerResponse)
async def update_player(
    player_id: str,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: PlayerService = Depends(get_player_service),
):
    player = await _run(service.update_player(player_id, payload))
    return PlayerResponse.from_player(player)
