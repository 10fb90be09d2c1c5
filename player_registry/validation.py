"""
Field validation for player records.

The ``is_*_valid`` functions are pure predicates. ``validate_new_player`` and
``validate_player_changes`` check a whole payload and raise ``BadRequestError``
on the first invalid field, before anything is written.
"""

from datetime import datetime
import re
import logging

from player_registry.exceptions import BadRequestError
from player_registry.utils import datetime_to_millis

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 12
TITLE_MAX_LENGTH = 30
MIN_EXPERIENCE = 0
MAX_EXPERIENCE = 10_000_000

# Numeric request parameters are 32-bit, ids and timestamps 64-bit
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1
LONG_MIN = -2 ** 63
LONG_MAX = 2 ** 63 - 1

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Birthday must fall within [BIRTHDAY_AFTER, BIRTHDAY_BEFORE)
BIRTHDAY_AFTER = datetime_to_millis(datetime(2000, 1, 1))
BIRTHDAY_BEFORE = datetime_to_millis(datetime(3001, 1, 1))


def is_id_valid(player_id):
    if player_id is None:
        return False
    return player_id > 0


def is_name_valid(name):
    if not name:
        return False
    return len(name) <= NAME_MAX_LENGTH


def is_title_valid(title):
    if title is None:
        return False
    return len(title) <= TITLE_MAX_LENGTH


def is_birthday_valid(birthday):
    if birthday is None:
        return False
    return BIRTHDAY_AFTER <= birthday < BIRTHDAY_BEFORE


def is_experience_valid(experience):
    if experience is None:
        return False
    return MIN_EXPERIENCE <= experience <= MAX_EXPERIENCE


def parse_player_id(raw_id) -> int:
    """Turn a path parameter into a positive 64-bit player id."""
    if isinstance(raw_id, str) and not _ID_PATTERN.fullmatch(raw_id):
        raise BadRequestError(f"Invalid player id: {raw_id!r}")
    try:
        player_id = int(raw_id)
    except (TypeError, ValueError):
        raise BadRequestError(f"Invalid player id: {raw_id!r}")

    if not is_id_valid(player_id):
        raise BadRequestError(f"Player id must be positive, got {player_id}")
    if player_id > LONG_MAX:
        raise BadRequestError(f"Player id out of range: {player_id}")
    return player_id


_FIELD_CHECKS = {
    "name": is_name_valid,
    "title": is_title_valid,
    "birthday": is_birthday_valid,
    "experience": is_experience_valid,
}


def _check_fields(fields: dict):
    for field, check in _FIELD_CHECKS.items():
        if field in fields and not check(fields[field]):
            logger.warning(f"Rejected player field {field}={fields[field]!r}")
            raise BadRequestError(f"Invalid value for '{field}'")


def validate_new_player(player) -> None:
    # race and profession are guaranteed enum members by the payload schema
    if player.race is None or player.profession is None:
        raise BadRequestError("Both 'race' and 'profession' are required")

    _check_fields({
        "name": player.name,
        "title": player.title,
        "birthday": player.birthday,
        "experience": player.experience,
    })


def validate_player_changes(changes: dict) -> None:
    """Validate only the fields present in a partial update."""
    _check_fields(changes)
