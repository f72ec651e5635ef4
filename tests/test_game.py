import pytest

from bananabattle.game import (
    HEAL,
    INTRO_LINES,
    INTRO_TITLE,
    LOST_MESSAGE,
    NORMAL,
    PIERCE,
    SPECIAL,
    WON_MESSAGE,
    Battle,
    Dialogue,
    Rect,
    make_battle,
)


def test_rect_contains_inside_point():
    assert Rect(600.0, 15.0, 200, 50).contains((700, 40))


def test_rect_contains_edges_inclusive():
    rect = Rect(10, 20, 30, 40)
    assert rect.contains((10, 20))
    assert rect.contains((40, 60))


@pytest.mark.parametrize("point", [(9, 30), (41, 30), (20, 19), (20, 61)])
def test_rect_excludes_outside_points(point):
    assert not Rect(10, 20, 30, 40).contains(point)


def test_dialogue_starts_empty_on_first_line():
    dialogue = Dialogue()
    assert dialogue.current_text() == ""
    assert dialogue.title == INTRO_TITLE


def test_dialogue_reveals_characters_over_time():
    dialogue = Dialogue(["Hello there"], typing_speed=10.0)
    dialogue.update(0.5)
    assert dialogue.current_text() == "Hello"
    assert not dialogue.finished


def test_dialogue_clamps_to_line_length_and_finishes():
    dialogue = Dialogue(["abc", "def"], typing_speed=20.0)
    dialogue.update(10.0)
    assert dialogue.current_text() == "abc"
    assert dialogue.finished


def test_dialogue_cannot_advance_before_finishing():
    dialogue = Dialogue(["abc", "def"])
    assert dialogue.advance() is False
    assert dialogue.index == 0


def test_dialogue_advance_resets_typing():
    dialogue = Dialogue(["abc", "def"])
    dialogue.update(10.0)
    assert dialogue.advance() is True
    assert dialogue.index == 1
    assert dialogue.current_text() == ""
    assert not dialogue.finished


def test_dialogue_stops_at_last_line():
    dialogue = Dialogue(["abc", "def"])
    dialogue.update(10.0)
    dialogue.advance()
    dialogue.update(10.0)
    assert dialogue.advance() is False
    assert dialogue.current_text() == "def"


def test_dialogue_default_lines_are_intro():
    dialogue = Dialogue()
    dialogue.update(100.0)
    assert dialogue.current_text() == INTRO_LINES[0]


def test_dialogue_rejects_empty_lines():
    with pytest.raises(ValueError):
        Dialogue([])


def test_make_battle_entities():
    battle = make_battle()
    assert battle.player.name == "Walter"
    assert battle.enemy.name == "The Prisoner"
    assert battle.player.is_player and not battle.enemy.is_player
    assert battle.player.current_health == 800
    assert battle.enemy.current_health == 1000


def test_make_battle_skills_share_prompt_and_targets():
    battle = make_battle()
    assert [s.attack for s in battle.skills] == [PIERCE, SPECIAL, NORMAL, HEAL]
    for skill in battle.skills:
        assert skill.attacker is battle.player
        assert skill.enemy is battle.enemy
        assert skill.prompt is battle.prompt
    assert battle.enemy_skill.attacker is battle.enemy
    assert battle.enemy_skill.enemy is battle.player
    assert battle.enemy_skill.attack == PIERCE


def test_use_skill_pierce_hits_enemy():
    battle = make_battle()
    battle.use_skill(0)
    assert battle.enemy.current_health == (
        battle.enemy.max_health - battle.player.strength - PIERCE.damage
    )
    assert battle.player.current_stamina == battle.player.stamina - PIERCE.consumption
    assert battle.prompt.text == "Walter has used a Penetration Attack"


def test_use_skill_heal_narrates():
    battle = make_battle()
    battle.use_skill(3)
    assert battle.prompt.text == "Walter has used Heal"
    assert battle.player.current_health > battle.player.max_health


def test_use_skill_out_of_range():
    battle = make_battle()
    with pytest.raises(IndexError):
        battle.use_skill(4)


def test_end_turn_enemy_attacks_and_stamina_refills():
    battle = make_battle()
    battle.use_skill(1)
    battle.end_turn()
    assert battle.player.current_health == (
        battle.player.max_health - battle.enemy.strength - PIERCE.damage
    )
    assert battle.player.current_stamina == battle.player.stamina
    assert battle.enemy.current_stamina == battle.enemy.stamina
    assert battle.prompt.text == "The Prisoner has used a Penetration Attack"


def test_end_turn_with_dead_enemy_reports_victory():
    battle = make_battle()
    battle.enemy.current_health = 0
    battle.end_turn()
    assert battle.prompt.text == WON_MESSAGE
    assert battle.player.current_health == battle.player.max_health


def test_end_turn_killing_player_reports_loss():
    battle = make_battle()
    battle.player.current_health = 5
    battle.use_skill(2)
    battle.end_turn()
    assert battle.prompt.text == LOST_MESSAGE
    assert battle.player.current_stamina == battle.player.stamina - NORMAL.consumption


def test_battle_is_constructible_directly():
    base = make_battle()
    battle = Battle(base.player, base.enemy, base.skills, base.enemy_skill, base.prompt)
    battle.enemy.current_health = -1
    battle.end_turn()
    assert base.prompt.text == WON_MESSAGE