"""A usable binding of an attack to its user, target and prompt."""

from __future__ import annotations

from dataclasses import dataclass

from bananabattle.attacks import Attack
from bananabattle.entity import Entity
from bananabattle.prompt import Prompt


@dataclass
class Skill:
    """An attack ready to be used by attacker against enemy."""

    attack: Attack
    attacker: Entity
    enemy: Entity
    prompt: Prompt

    def use(self) -> None:
        """Perform the attack."""
        self.attack.deal_damage(self.attacker, self.enemy, self.prompt)

    @property
    def name(self) -> str:
        return self.attack.name

    @property
    def stamina(self) -> int:
        """Stamina cost of the attack."""
        return self.attack.consumption

    @property
    def strength(self) -> int:
        """Raw damage of the attack."""
        return self.attack.damage