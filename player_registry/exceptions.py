class PlayerRegistryError(Exception):
    """Base exception for player registry errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(PlayerRegistryError):
    """Raised for an invalid id, invalid field values or a missing payload."""


class NotFoundError(PlayerRegistryError):
    """Raised when a valid id matches no stored player."""

    def __init__(self, player_id: int):
        super().__init__(f"Player {player_id} not found.")
        self.player_id = player_id
