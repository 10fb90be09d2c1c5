from sqlalchemy import Column, Integer, String, DateTime, Boolean, Enum
from .database import Base
import enum


class Race(str, enum.Enum):
    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(str, enum.Enum):
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(12), nullable=False)
    title = Column(String(30), nullable=False, default="")
    race = Column(Enum(Race), nullable=False)
    profession = Column(Enum(Profession), nullable=False)
    birthday = Column(DateTime, nullable=False)  # naive UTC
    banned = Column(Boolean, nullable=False, default=False)
    experience = Column(Integer, nullable=False)
    level = Column(Integer, nullable=False)
    until_next_level = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<Player id={self.id} name={self.name!r} level={self.level}>"
