"""The single line of battle narration shown to the player."""

from dataclasses import dataclass


@dataclass
class Prompt:
    """Holds the most recent message of the battle."""

    text: str = ""

    def set(self, text: str) -> None:
        """Replace the shown message."""
        self.text = text

    def clear(self) -> None:
        """Remove the shown message."""
        self.text = ""

    def __str__(self) -> str:
        return self.text