# bananabattle

A small turn-based battle game. You play Walter, a banana subject, against
The Prisoner. Each turn you pick skills that cost stamina, then end your turn
and let the enemy strike back. When a turn ends, stamina is restored for both
sides.

## Installing

```
pip install .
```

## Playing

```
bananabattle
bananabattle --fps 30
```

`--fps` limits the frame rate (default 60). A window opens with four skill
buttons along the bottom:

- **Pierce**: a penetration attack that ignores the enemy's defense.
- **Special attack**: a stronger, more expensive penetration attack.
- **Normal Attack**: a cheap hit reduced by the enemy's defense.
- **Heal**: restores health, boosted by your intelligence.

Each button shows the skill's raw damage and stamina cost. Click one to use
it. If you do not have enough stamina, the prompt says so and nothing
happens. Click **End turn** to let the enemy answer with Pierce; the prompt
announces when you have won or lost. Press Escape or close the window to
quit. Pressing `A` deals 200 damage to your own character, which is handy
for trying out the losing path.

Sprites and stat icons are loaded from `./assets` in the working directory
(for example `./assets/banana_player.png` and `./assets/hearts.png`). No
images are installed with the package; any that are missing are logged as a
warning and simply not drawn. Text is drawn with pygame's default font.

## What the window does not do

The battle screen does not show the story dialogue. The `Dialogue` class in
`bananabattle.game` holds the intro lines and the typing logic, but nothing
in the window draws it or reacts to the space bar. There is a single fight
only: no further trials, saving or loading.

## Using it as a library

The game logic works without a window:

```python
from bananabattle.game import make_battle

battle = make_battle()
battle.use_skill(0)      # Pierce
battle.end_turn()        # the enemy answers, stamina is restored
print(battle.prompt.text)
print(battle.enemy.current_health)
```

The story text reveals itself as time passes:

```python
from bananabattle.game import Dialogue

dialogue = Dialogue()
dialogue.update(0.5)             # 20 characters per second by default
print(dialogue.current_text())   # "Hello there"
dialogue.update(5.0)
dialogue.advance()               # moves on once the line is fully shown
```

The building blocks live in `bananabattle.entity` (`Entity`),
`bananabattle.attacks` (`Attack`, `PenetrationAttack`, `NormalAttack`,
`Heal`), `bananabattle.skill` (`Skill`), `bananabattle.prompt` (`Prompt`),
`bananabattle.errors` (`GameException`, `StaminaException`,
`FileLoadException`) and `bananabattle.game` (`Rect`, `Dialogue`, `Battle`,
`make_battle`, `main`).

## Running the tests

```
pip install .[test]
pytest
```