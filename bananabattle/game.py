"""The battle screen: skill buttons, end-turn handling and the main loop."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from bananabattle.attacks import Attack, Heal, NormalAttack, PenetrationAttack
from bananabattle.entity import Entity
from bananabattle.prompt import Prompt
from bananabattle.skill import Skill

logger = logging.getLogger(__name__)

SCREEN_WIDTH = 1500
SCREEN_HEIGHT = 800
WINDOW_TITLE = "awesome"

PIERCE = PenetrationAttack("Pierce", 30, 100)
SPECIAL = PenetrationAttack("Special attack", 80, 300)
NORMAL = NormalAttack("Normal Attack", 10, 30)
HEAL = Heal("Heal", 40, -20)

WON_MESSAGE = "You won"
LOST_MESSAGE = "You Lost"

INTRO_TITLE = "Dr. Splitenstein"
INTRO_LINES = (
    "Hello there, subject 3230.",
    "It's finally your turn to go through the trials",
    "As you probably already know",
    "The world has been overtaken by humonguos monkeys",
    "And the only way to escape their opression",
    "Is to forge the ultimate banana",
    "After each trial you will gain new abilities",
    "And after the final trial your body will reach a qualitive change",
    "Turning you into the Sharpest Banana",
    "A banana that can cut through Heaven and Earth",
    "This has been proven through the effort of your peers",
    "Which unfortunately are no longer with us",
    "Well now it's your turn",
    "Good Luck and Have Fun",
)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned screen rectangle."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether point lies inside the rectangle, edges included."""
        px, py = point
        return (
            self.x <= px <= self.x + self.width
            and self.y <= py <= self.y + self.height
        )

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (int(self.x), int(self.y), int(self.width), int(self.height))


@dataclass
class Dialogue:
    """Lines of text revealed a few characters at a time."""

    lines: Sequence[str] = INTRO_LINES
    typing_speed: float = 20.0
    title: str = INTRO_TITLE
    index: int = 0
    finished: bool = False
    timer: float = 0.0

    def __post_init__(self) -> None:
        self.lines = tuple(self.lines)
        if not self.lines:
            raise ValueError("a dialogue needs at least one line")

    @property
    def _line(self) -> str:
        return self.lines[self.index]

    def _chars_to_show(self) -> int:
        return int(self.timer * self.typing_speed)

    def update(self, dt: float) -> None:
        """Advance the typing clock by dt seconds."""
        self.timer += dt
        if self._chars_to_show() > len(self._line):
            self.finished = True

    def advance(self) -> bool:
        """Move to the next line once the current one is fully shown."""
        if self.index <= len(self.lines) - 2 and self.finished:
            self.index += 1
            self.finished = False
            self.timer = 0.0
            return True
        return False

    def current_text(self) -> str:
        """The part of the current line revealed so far."""
        return self._line[: min(self._chars_to_show(), len(self._line))]


@dataclass
class Battle:
    """A fight between the player and one enemy."""

    player: Entity
    enemy: Entity
    skills: list[Skill]
    enemy_skill: Skill
    prompt: Prompt = field(default_factory=Prompt)

    def use_skill(self, index: int) -> None:
        """Have the player use the skill at index."""
        self.skills[index].use()

    def end_turn(self) -> None:
        """Let the enemy act, then refill both sides' stamina."""
        if self.enemy.current_health <= 0:
            self.prompt.set(WON_MESSAGE)
            return
        self.enemy_skill.use()
        if self.player.current_health <= 0:
            self.prompt.set(LOST_MESSAGE)
        else:
            self.player.restore_stamina()
            self.enemy.restore_stamina()


def make_battle() -> Battle:
    """The opening fight: Walter against The Prisoner."""
    prompt = Prompt()
    player = Entity("Walter", "./assets/banana_player.png", True, 800, 100, 25, 10, 20)
    enemy = Entity(
        "The Prisoner", "./assets/banana_prisoner.png", False, 1000, 50, 30, 0, 10
    )
    attacks: list[Attack] = [PIERCE, SPECIAL, NORMAL, HEAL]
    skills = [Skill(attack, player, enemy, prompt) for attack in attacks]
    enemy_skill = Skill(PIERCE, enemy, player, prompt)
    return Battle(player, enemy, skills, enemy_skill, prompt)


SKILL_BUTTONS = (
    Rect(20, 500, 720, 120),
    Rect(760, 500, 720, 120),
    Rect(20, 630, 720, 120),
    Rect(760, 630, 720, 120),
)
END_TURN_BUTTON = Rect(600.0, 15.0, 200, 50)
PLAYER_SPRITE = Rect(20.0, 30.0, 300.0, 500.0)
ENEMY_SPRITE = Rect(1000.0, 30.0, 300.0, 500.0)

_PLAYER_OFFSETS = (20.0, 70.0, 130.0, 180.0, 240.0, 290.0)
_ENEMY_OFFSETS = (1100.0, 1150.0, 1210.0, 1260.0, 1320.0, 1370.0)
# stat name -> (column, row, icon width)
_STAT_LAYOUT = {
    "health": (0, 0, 40),
    "stamina": (0, 1, 40),
    "defense": (1, 0, 50),
    "intelligence": (1, 1, 40),
    "strength": (2, 0, 40),
}
_ICON_PATHS = {
    "health": "./assets/hearts.png",
    "stamina": "./assets/battery-pack.png",
    "defense": "./assets/shield(1).png",
    "intelligence": "./assets/brain.png",
    "strength": "./assets/biceps.png",
}

_WHITE = (245, 245, 245)
_BLACK = (0, 0, 0)
_BUTTON_FILL = (161, 160, 98, 100)
_END_TURN_FILL = (11, 77, 13, 100)
_END_TURN_HOVER = (101, 194, 126, 100)
_OUTLINE = (255, 255, 255, 100)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the battle window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="bananabattle", description="Banana battle.")
    parser.add_argument("--fps", type=int, default=60, help="frame rate limit")
    args = parser.parse_args(argv)

    import pygame

    def load_image(path: str):
        try:
            return pygame.image.load(path).convert_alpha()
        except (pygame.error, FileNotFoundError) as exc:
            logger.warning("could not load %s: %s", path, exc)
            return None

    def blit_region(image, src: tuple[int, int, int, int], dest: Rect) -> None:
        if image is None:
            return
        region = pygame.Rect(src).clip(image.get_rect())
        if region.width == 0 or region.height == 0:
            return
        part = image.subsurface(region)
        scaled = pygame.transform.smoothscale(part, (int(dest.width), int(dest.height)))
        screen.blit(scaled, (int(dest.x), int(dest.y)))

    def fill_alpha(rect: Rect, colour: tuple[int, int, int, int]) -> None:
        overlay = pygame.Surface((int(rect.width), int(rect.height)), pygame.SRCALPHA)
        overlay.fill(colour)
        screen.blit(overlay, (int(rect.x), int(rect.y)))

    def outline(rect: Rect, thickness: int) -> None:
        pygame.draw.rect(screen, _WHITE, rect.as_tuple(), thickness)

    def text(value: str, pos: tuple[float, float], size: int) -> None:
        font = fonts.get(size)
        if font is None:
            font = fonts[size] = pygame.font.Font(None, size)
        screen.blit(font.render(value, True, _WHITE), (int(pos[0]), int(pos[1])))

    def draw_stats(entity: Entity) -> None:
        offsets = _PLAYER_OFFSETS if entity.is_player else _ENEMY_OFFSETS
        for stat, value in entity.stat_lines():
            column, row, icon_width = _STAT_LAYOUT[stat]
            icon_dest = Rect(offsets[2 * column], 30.0 + 50.0 * row, icon_width, 40)
            blit_region(icons[stat], (0, 0, 500, 500), icon_dest)
            text(str(value), (offsets[2 * column + 1], 35.0 + 55.0 * row), 30)

    def draw_button(rect: Rect, skill: Skill, hover: bool) -> None:
        if hover:
            outline(rect, 4)
            fill_alpha(rect, _BUTTON_FILL)
        outline(rect, 1)
        fill_alpha(rect, _BUTTON_FILL)
        centre = (rect.width + rect.x * 2) / 2
        text(skill.name, (centre - 100, rect.y + 10), 30)
        text(str(skill.stamina), (centre + 280, rect.y + 70), 25)
        text("Stamina Cost: ", (centre + 90, rect.y + 70), 25)
        text(str(skill.strength), (centre - 190, rect.y + 70), 25)
        text("Raw Damage: ", (centre - 350, rect.y + 70), 25)

    def draw_end_turn(hover: bool) -> None:
        fill_alpha(END_TURN_BUTTON, _END_TURN_FILL)
        outline(END_TURN_BUTTON, 3)
        text("End turn", (620, 25.0), 35)
        if hover:
            fill_alpha(END_TURN_BUTTON, _END_TURN_HOVER)
            outline(END_TURN_BUTTON, 5)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        fonts: dict[int, object] = {}
        battle = make_battle()
        sprites = {
            id(battle.player): load_image(battle.player.sprite_path),
            id(battle.enemy): load_image(battle.enemy.sprite_path),
        }
        icons = {stat: load_image(path) for stat, path in _ICON_PATHS.items()}

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_a:
                        logger.info("%s", battle.player.name)
                        battle.player.apply_damage(200)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    for index, rect in enumerate(SKILL_BUTTONS):
                        if rect.contains(event.pos):
                            battle.use_skill(index)
                    if END_TURN_BUTTON.contains(event.pos):
                        battle.end_turn()

            mouse = pygame.mouse.get_pos()
            screen.fill(_BLACK)
            for rect, skill in zip(SKILL_BUTTONS, battle.skills):
                draw_button(rect, skill, rect.contains(mouse))
            blit_region(sprites[id(battle.enemy)], (0, 0, 300, 500), ENEMY_SPRITE)
            blit_region(sprites[id(battle.player)], (0, 0, 300, 500), PLAYER_SPRITE)
            draw_stats(battle.player)
            draw_stats(battle.enemy)
            text(battle.prompt.text, (450, 200.0), 25)
            draw_end_turn(END_TURN_BUTTON.contains(mouse))
            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0