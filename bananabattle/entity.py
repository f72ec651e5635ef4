"""Combatants and their statistics."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Entity:
    """A fighter with health, stamina and fixed attributes."""

    name: str
    sprite_path: str
    is_player: bool = False
    max_health: int = 200
    stamina: int = 100
    defense: int = 50
    intelligence: int = 0
    strength: int = 0
    current_health: int = field(init=False)
    current_stamina: int = field(init=False)

    def __post_init__(self) -> None:
        self.current_health = self.max_health
        self.current_stamina = self.stamina

    @property
    def is_alive(self) -> bool:
        return self.current_health > 0

    def apply_damage(self, damage: int) -> None:
        """Lower health by damage; a dead entity takes no more."""
        if self.current_health > 0:
            self.current_health -= damage
            logger.debug("%s health: %d", self.name, self.current_health)
        else:
            logger.debug("%s is dead", self.name)

    def apply_consumption(self, consumption: int) -> None:
        """Spend stamina, unless none is left."""
        if self.current_stamina > 0:
            self.current_stamina -= consumption
            logger.debug("%s stamina: %d", self.name, self.current_stamina)

    def apply_heal(self, heal: int) -> None:
        """Add heal to current health."""
        self.current_health += heal

    def restore_stamina(self) -> None:
        """Refill stamina to its full value."""
        self.current_stamina = self.stamina

    def stat_lines(self) -> list[tuple[str, int]]:
        """The statistics shown on screen, in display order."""
        return [
            ("health", self.current_health),
            ("stamina", self.current_stamina),
            ("defense", self.defense),
            ("intelligence", self.intelligence),
            ("strength", self.strength),
        ]