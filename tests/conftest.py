from datetime import datetime

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from player_registry.database import Base, enable_case_sensitive_like, get_db
from player_registry.level import apply_level
from player_registry.main import app
from player_registry.models import Player, Race, Profession
from player_registry.utils import datetime_to_millis

# 2000-06-01T00:00:00Z
JUNE_2000 = datetime_to_millis(datetime(2000, 6, 1))


def make_player(name="Ayran", title="", race=Race.HUMAN, profession=Profession.WARRIOR,
                birthday=datetime(2000, 6, 1), banned=False, experience=0):
    player = Player(
        name=name,
        title=title,
        race=race,
        profession=profession,
        birthday=birthday,
        banned=banned,
        experience=experience,
    )
    return apply_level(player)


def player_payload(**overrides):
    payload = {
        "name": "Ayran",
        "title": "",
        "race": "HUMAN",
        "profession": "WARRIOR",
        "birthday": JUNE_2000,
        "experience": 0,
    }
    payload.update(overrides)
    return payload


@pytest_asyncio.fixture
async def engine():
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_case_sensitive_like(test_engine)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seeded(db):
    players = [
        make_player("Ayran", "Keeper", Race.HUMAN, Profession.WARRIOR, datetime(2001, 1, 1), False, 0),
        make_player("Borin", "", Race.DWARF, Profession.CLERIC, datetime(2002, 1, 1), True, 350),
        make_player("Celebrin", "Keeper of Lore", Race.ELF, Profession.SORCERER, datetime(2003, 1, 1), False, 1_600),
        make_player("Durza", "Warlord", Race.ORC, Profession.WARRIOR, datetime(2004, 1, 1), False, 5_000),
        make_player("ayla", "keeper", Race.HUMAN, Profession.ROGUE, datetime(2005, 1, 1), True, 100),
    ]
    db.add_all(players)
    await db.commit()
    return players
