"""Player service: orchestrates validation, level calculation and storage."""

from typing import Any, Dict, List, Optional
import logging

from pydantic import ValidationError

from player_registry.config import DEFAULT_PAGE_SIZE
from player_registry.exceptions import BadRequestError, NotFoundError
from player_registry.filters import MATCH_ALL, PlayerFilter
from player_registry.level import apply_level
from player_registry.models import Player
from player_registry.schemas import PlayerCreate, PlayerOrder, PlayerUpdate
from player_registry.store import PlayerStore
from player_registry.utils import millis_to_datetime
from player_registry.validation import parse_player_id, validate_new_player, validate_player_changes

logger = logging.getLogger(__name__)


def _parse_payload(schema, payload: Optional[Dict[str, Any]]):
    if payload is None:
        raise BadRequestError("Request body is required")
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Rejected player payload: {e.errors()}")
        raise BadRequestError(f"Invalid player payload: {e.error_count()} error(s)")


class PlayerService:
    def __init__(self, store: PlayerStore):
        self.store = store

    async def list_players(
        self,
        player_filter: PlayerFilter = MATCH_ALL,
        order: Optional[PlayerOrder] = None,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> List[Player]:
        order = order or PlayerOrder.ID
        page_number = 0 if page_number is None else page_number
        page_size = DEFAULT_PAGE_SIZE if page_size is None else page_size

        return await self.store.find_all(player_filter, order, page_number, page_size)

    async def count_players(self, player_filter: PlayerFilter = MATCH_ALL) -> int:
        return await self.store.count(player_filter)

    async def get_player(self, raw_id) -> Player:
        player_id = parse_player_id(raw_id)
        logger.info(f"Fetching player with ID: {player_id}")

        player = await self.store.get(player_id)
        if player is None:
            logger.warning(f"Player {player_id} not found.")
            raise NotFoundError(player_id)
        return player

    async def delete_player(self, raw_id) -> None:
        player = await self.get_player(raw_id)
        await self.store.delete(player.id)
        logger.info(f"Player {player.id} deleted")

    async def create_player(self, payload: Optional[Dict[str, Any]]) -> Player:
        data = _parse_payload(PlayerCreate, payload)
        validate_new_player(data)

        player = Player(
            name=data.name,
            title=data.title,
            race=data.race,
            profession=data.profession,
            birthday=millis_to_datetime(data.birthday),
            banned=data.banned if data.banned is not None else False,
            experience=data.experience,
        )
        apply_level(player)

        player = await self.store.save(player)
        logger.info(f"Player {player.name} created with ID: {player.id}")
        return player

    async def update_player(self, raw_id, payload: Optional[Dict[str, Any]]) -> Player:
        player = await self.get_player(raw_id)

        changes = _parse_payload(PlayerUpdate, payload).changes()
        validate_player_changes(changes)

        if "birthday" in changes:
            changes["birthday"] = millis_to_datetime(changes["birthday"])
        for key, value in changes.items():
            setattr(player, key, value)
        if "experience" in changes:
            apply_level(player)

        player = await self.store.save(player)
        logger.info(f"Player {player.id} updated: {sorted(changes)}")
        return player
