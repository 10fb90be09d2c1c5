from typing import Optional
from pydantic import BaseModel, Field
from enum import Enum

from player_registry.models import Race, Profession
from player_registry.utils import datetime_to_millis


class PlayerOrder(str, Enum):
    ID = "ID"
    NAME = "NAME"
    EXPERIENCE = "EXPERIENCE"
    BIRTHDAY = "BIRTHDAY"
    LEVEL = "LEVEL"

    @property
    def field_name(self) -> str:
        return self.value.lower()


class PlayerCreate(BaseModel):
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[int] = None  # epoch millis
    banned: Optional[bool] = None
    experience: Optional[int] = None

    class Config:
        # numeric names and titles arrive as strings, e.g. "name": 123
        coerce_numbers_to_str = True


class PlayerUpdate(PlayerCreate):
    """Partial update: a field left out or sent as null is not changed."""

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


class PlayerResponse(BaseModel):
    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: int
    banned: bool
    experience: int
    level: int
    until_next_level: int = Field(serialization_alias="untilNextLevel")

    @classmethod
    def from_player(cls, player) -> "PlayerResponse":
        return cls(
            id=player.id,
            name=player.name,
            title=player.title,
            race=player.race,
            profession=player.profession,
            birthday=datetime_to_millis(player.birthday),
            banned=player.banned,
            experience=player.experience,
            level=player.level,
            until_next_level=player.until_next_level,
        )
