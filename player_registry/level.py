import math

# Experience needed for level L is 50 * L * (L + 1)
LEVEL_STEP = 50


def calculate_level(experience):
    # int() truncates toward zero; do not round
    return int((math.sqrt(2500 + 200 * experience) - 50) / 100)


def calculate_until_next_level(experience, level):
    return LEVEL_STEP * (level + 1) * (level + 2) - experience


def apply_level(player):
    """Recompute the derived level fields of a player from its experience."""
    player.level = calculate_level(player.experience)
    player.until_next_level = calculate_until_next_level(player.experience, player.level)
    return player
