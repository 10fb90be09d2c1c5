"""
Composable player filters.

A ``PlayerFilter`` is an AND over a set of tagged clauses. Each clause names a
player field and a value; the store translates clauses into its own query
language. A filter with no clauses matches every player.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, FrozenSet, Optional

from player_registry.models import Race, Profession
from player_registry.utils import millis_to_datetime


@dataclass(frozen=True)
class Clause:
    field: str
    value: Any


class Contains(Clause):
    """Case-sensitive substring match on a text field."""


class Equals(Clause):
    pass


class AtLeast(Clause):
    """Inclusive lower bound."""


class AtMost(Clause):
    """Inclusive upper bound."""


@dataclass(frozen=True)
class PlayerFilter:
    clauses: FrozenSet[Clause] = frozenset()

    def where(self, clause: Clause) -> "PlayerFilter":
        return PlayerFilter(self.clauses | {clause})

    def __and__(self, other: "PlayerFilter") -> "PlayerFilter":
        return PlayerFilter(self.clauses | other.clauses)

    def __bool__(self):
        return bool(self.clauses)

    def __iter__(self):
        return iter(self.clauses)

    def __len__(self):
        return len(self.clauses)


MATCH_ALL = PlayerFilter()


def birthday_bound(millis: int) -> datetime:
    """Epoch millis as a datetime, clamped to the representable range."""
    try:
        return millis_to_datetime(millis)
    except OverflowError:
        return datetime.max if millis > 0 else datetime.min


def build_player_filter(
    name: Optional[str] = None,
    title: Optional[str] = None,
    race: Optional[Race] = None,
    profession: Optional[Profession] = None,
    after: Optional[int] = None,
    before: Optional[int] = None,
    banned: Optional[bool] = None,
    min_experience: Optional[int] = None,
    max_experience: Optional[int] = None,
    min_level: Optional[int] = None,
    max_level: Optional[int] = None,
) -> PlayerFilter:
    """Collect a clause for every parameter that was supplied.

    ``after`` and ``before`` are epoch milliseconds bounding the birthday.
    Contradictory bounds are allowed and simply match nothing. Bounds past the
    datetime range are clamped to it.
    """
    candidates = [
        (name, lambda v: Contains("name", v)),
        (title, lambda v: Contains("title", v)),
        (race, lambda v: Equals("race", v)),
        (profession, lambda v: Equals("profession", v)),
        (after, lambda v: AtLeast("birthday", birthday_bound(v))),
        (before, lambda v: AtMost("birthday", birthday_bound(v))),
        (banned, lambda v: Equals("banned", v)),
        (min_experience, lambda v: AtLeast("experience", v)),
        (max_experience, lambda v: AtMost("experience", v)),
        (min_level, lambda v: AtLeast("level", v)),
        (max_level, lambda v: AtMost("level", v)),
    ]

    player_filter = MATCH_ALL
    for value, make_clause in candidates:
        if value is not None:
            player_filter = player_filter.where(make_clause(value))
    return player_filter
