from datetime import datetime

import pytest

from player_registry.filters import MATCH_ALL, build_player_filter
from player_registry.models import Race
from player_registry.schemas import PlayerOrder
from player_registry.store import SqlAlchemyPlayerStore
from player_registry.utils import datetime_to_millis

from conftest import make_player


async def _ids(store, player_filter, order=PlayerOrder.ID, page_number=0, page_size=10):
    players = await store.find_all(player_filter, order, page_number, page_size)
    return [p.id for p in players]


@pytest.mark.asyncio
async def test_pages_follow_order(db, seeded):
    store = SqlAlchemyPlayerStore(db)

    assert await _ids(store, MATCH_ALL, page_size=3) == [1, 2, 3]
    assert await _ids(store, MATCH_ALL, page_number=1, page_size=3) == [4, 5]
    assert await _ids(store, MATCH_ALL, page_number=2, page_size=3) == []
    assert await store.count(MATCH_ALL) == 5


@pytest.mark.asyncio
@pytest.mark.parametrize("order,expected", [
    (PlayerOrder.ID, [1, 2, 3, 4, 5]),
    (PlayerOrder.EXPERIENCE, [1, 5, 2, 3, 4]),
    (PlayerOrder.LEVEL, [1, 5, 2, 3, 4]),
    (PlayerOrder.BIRTHDAY, [1, 2, 3, 4, 5]),
])
async def test_order(db, seeded, order, expected):
    store = SqlAlchemyPlayerStore(db)
    assert await _ids(store, MATCH_ALL, order=order) == expected


@pytest.mark.asyncio
@pytest.mark.parametrize("params,expected", [
    ({"name": "Ay"}, [1]),
    ({"name": "ay"}, [5]),
    ({"title": "Keeper"}, [1, 3]),
    ({"race": Race.HUMAN}, [1, 5]),
    ({"race": Race.HUMAN, "min_level": 1}, [5]),
    ({"banned": True}, [2, 5]),
    ({"banned": False, "max_experience": 1_600}, [1, 3]),
    ({"min_experience": 350, "max_experience": 1_600}, [2, 3]),
    ({"min_level": 2, "max_level": 5}, [2, 3]),
])
async def test_filters(db, seeded, params, expected):
    store = SqlAlchemyPlayerStore(db)
    player_filter = build_player_filter(**params)

    assert await _ids(store, player_filter) == expected
    assert await store.count(player_filter) == len(expected)


@pytest.mark.asyncio
async def test_birthday_bounds_are_inclusive(db, seeded):
    store = SqlAlchemyPlayerStore(db)
    player_filter = build_player_filter(
        after=datetime_to_millis(datetime(2002, 1, 1)),
        before=datetime_to_millis(datetime(2003, 1, 1)),
    )
    assert await _ids(store, player_filter) == [2, 3]


@pytest.mark.asyncio
async def test_inverted_range_is_empty(db, seeded):
    store = SqlAlchemyPlayerStore(db)
    player_filter = build_player_filter(after=1000, before=500)

    assert await _ids(store, player_filter) == []
    assert await store.count(player_filter) == 0


@pytest.mark.asyncio
async def test_save_get_delete(db):
    store = SqlAlchemyPlayerStore(db)

    player = await store.save(make_player(name="Eowyn", experience=300))
    assert player.id is not None

    fetched = await store.get(player.id)
    assert fetched.name == "Eowyn"
    assert fetched.level == 2

    await store.delete(player.id)
    assert await store.get(player.id) is None
    assert await store.count(MATCH_ALL) == 0
