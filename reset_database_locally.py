import asyncio
from datetime import datetime

from player_registry.database import engine, Base, async_session
from player_registry.level import apply_level
from player_registry.models import Player, Race, Profession

DEMO_PLAYERS = [
    ("Ayran", "Keeper of the Gate", Race.HUMAN, Profession.WARRIOR, datetime(2005, 6, 1), 0),
    ("Bravo", "", Race.DWARF, Profession.CLERIC, datetime(2003, 2, 14), 3_450),
    ("Charlie", "Shadow of Mirkwood", Race.ELF, Profession.ROGUE, datetime(2010, 11, 3), 58_900),
    ("Delta", "Warlord", Race.ORC, Profession.PALADIN, datetime(2001, 8, 22), 1_204_500),
]


async def drop_and_recreate_all_tables():
    async with engine.begin() as conn:
        print("⚠️ Dropping all tables...")
        await conn.run_sync(Base.metadata.drop_all)
        print("🔁 Recreating all tables...")
        await conn.run_sync(Base.metadata.create_all)
        print("✅ Tables recreated.")

    # 👇 Insert demo players after tables are created
    async with async_session() as session:
        print("👤 Adding demo players...")
        for name, title, race, profession, birthday, experience in DEMO_PLAYERS:
            player = Player(
                name=name,
                title=title,
                race=race,
                profession=profession,
                birthday=birthday,
                banned=False,
                experience=experience,
            )
            session.add(apply_level(player))
        await session.commit()
        print("✅ Demo players inserted.")


if __name__ == "__main__":
    asyncio.run(drop_and_recreate_all_tables())
