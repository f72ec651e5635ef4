"""Exceptions raised by game actions."""


class GameException(Exception):
    """Base class for errors raised during play."""

    default_message = "General game exception"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class StaminaException(GameException):
    """Raised when an entity lacks the stamina for an action."""

    default_message = "Not enough stamina to perform this action"


class FileLoadException(GameException):
    """Raised when a game asset cannot be loaded."""

    default_message = "Failed to load game file"