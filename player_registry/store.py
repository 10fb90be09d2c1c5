"""
Player storage.

``PlayerStore`` is the interface the service depends on;
``SqlAlchemyPlayerStore`` implements it over an async SQLAlchemy session.
"""

from typing import List, Optional, Protocol

from sqlalchemy import and_, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from player_registry.filters import AtLeast, AtMost, Clause, Contains, Equals, PlayerFilter
from player_registry.models import Player
from player_registry.schemas import PlayerOrder


class PlayerStore(Protocol):
    async def get(self, player_id: int) -> Optional[Player]:
        ...

    async def save(self, player: Player) -> Player:
        ...

    async def delete(self, player_id: int) -> None:
        ...

    async def find_all(
        self, player_filter: PlayerFilter, order: PlayerOrder, page_number: int, page_size: int
    ) -> List[Player]:
        ...

    async def count(self, player_filter: PlayerFilter) -> int:
        ...


def clause_to_sql(clause: Clause):
    column = getattr(Player, clause.field)

    if isinstance(clause, Contains):
        # no autoescape: % and _ from the caller keep their LIKE meaning
        return column.like(f"%{clause.value}%")
    if isinstance(clause, Equals):
        return column == clause.value
    if isinstance(clause, AtLeast):
        return column >= clause.value
    if isinstance(clause, AtMost):
        return column <= clause.value
    raise TypeError(f"Unsupported filter clause: {clause!r}")


def filter_to_sql(player_filter: PlayerFilter):
    """Translate a filter into a WHERE expression, or None when it matches everything."""
    if not player_filter:
        return None
    return and_(*(clause_to_sql(clause) for clause in player_filter))


class SqlAlchemyPlayerStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _filtered(self, stmt, player_filter: PlayerFilter):
        condition = filter_to_sql(player_filter)
        if condition is not None:
            stmt = stmt.where(condition)
        return stmt

    async def get(self, player_id: int) -> Optional[Player]:
        result = await self.db.execute(select(Player).where(Player.id == player_id))
        return result.scalars().first()

    async def save(self, player: Player) -> Player:
        self.db.add(player)
        await self.db.commit()
        await self.db.refresh(player)
        return player

    async def delete(self, player_id: int) -> None:
        player = await self.get(player_id)
        if player is not None:
            await self.db.delete(player)
            await self.db.commit()

    async def find_all(
        self, player_filter: PlayerFilter, order: PlayerOrder, page_number: int, page_size: int
    ) -> List[Player]:
        sort_column = getattr(Player, order.field_name)
        stmt = self._filtered(select(Player), player_filter).order_by(sort_column.asc())
        if order is not PlayerOrder.ID:
            # stable pages when the sort key has ties
            stmt = stmt.order_by(Player.id.asc())
        stmt = stmt.offset(page_number * page_size).limit(page_size)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count(self, player_filter: PlayerFilter) -> int:
        stmt = self._filtered(select(func.count(Player.id)), player_filter)
        result = await self.db.execute(stmt)
        return result.scalar_one()
