"""Attacks and other actions an entity can perform."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from bananabattle.entity import Entity
from bananabattle.errors import GameException, StaminaException
from bananabattle.prompt import Prompt

NOT_ENOUGH_STAMINA = "Not enough stamina"


@dataclass(frozen=True)
class Attack(ABC):
    """An action with a name, a stamina cost and a raw damage value."""

    name: str
    consumption: int
    damage: int

    def check_stamina(self, entity: Entity) -> bool:
        """Whether entity has stamina enough to perform this action."""
        return entity.current_stamina >= self.consumption

    def deal_damage(self, attacker: Entity, defender: Entity, prompt: Prompt) -> None:
        """Hit defender with raw damage less its defense."""
        try:
            if not self.check_stamina(attacker):
                raise StaminaException()
            attacker.apply_consumption(self.consumption)
            defender.apply_damage(self.damage - defender.defense)
            prompt.set(f"{attacker.name} has used {self.name}")
        except GameException as exc:
            prompt.set(str(exc))

    @abstractmethod
    def describe(self, entity: Entity, prompt: Prompt) -> None:
        """Narrate that entity used this action."""


@dataclass(frozen=True)
class PenetrationAttack(Attack):
    """An attack that ignores the defender's defense."""

    def deal_damage(self, attacker: Entity, defender: Entity, prompt: Prompt) -> None:
        try:
            if not self.check_stamina(attacker):
                raise StaminaException()
            attacker.apply_consumption(self.consumption)
            defender.apply_damage(attacker.strength + self.damage)
            self.describe(attacker, prompt)
        except GameException as exc:
            prompt.set(str(exc))

    def describe(self, entity: Entity, prompt: Prompt) -> None:
        prompt.set(f"{entity.name} has used a Penetration Attack")


@dataclass(frozen=True)
class NormalAttack(Attack):
    """An attack adding the attacker's strength, reduced by defense."""

    def deal_damage(self, attacker: Entity, defender: Entity, prompt: Prompt) -> None:
        if not self.check_stamina(attacker):
            prompt.set(NOT_ENOUGH_STAMINA)
            return
        attacker.apply_consumption(self.consumption)
        defender.apply_damage(attacker.strength + self.damage - defender.defense)
        self.describe(attacker, prompt)

    def describe(self, entity: Entity, prompt: Prompt) -> None:
        prompt.set(f"{entity.name} has used a Normal Attack")


@dataclass(frozen=True)
class Heal(Attack):
    """Restores the attacker's health; damage is negative healing."""

    def deal_damage(self, attacker: Entity, defender: Entity, prompt: Prompt) -> None:
        if not self.check_stamina(attacker):
            prompt.set(NOT_ENOUGH_STAMINA)
            return
        attacker.apply_consumption(self.consumption)
        attacker.apply_heal(-self.damage + attacker.intelligence)
        self.describe(attacker, prompt)

    def describe(self, entity: Entity, prompt: Prompt) -> None:
        prompt.set(f"{entity.name} has used Heal")