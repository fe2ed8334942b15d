import io

import pytest

from combatsim.battle import Battle, select_enemy
from combatsim.character import Bard, Knight, Mage, Ranger


class ScriptedRandom:
    def __init__(self, *values):
        self.values = list(values)

    def randint(self, low, high):
        value = self.values.pop(0)
        assert low <= value <= high
        return value


def answers(*choices):
    queue = list(choices)

    def read():
        return queue.pop(0)

    return read


def no_input():
    raise AssertionError("input was not expected")


@pytest.mark.parametrize(
    "roll, cls, resource",
    [(1, Bard, "charisma"), (2, Knight, "stamina"), (3, Mage, "mana"), (4, Ranger, "stamina")],
)
def test_select_enemy(roll, cls, resource):
    enemy = select_enemy(ScriptedRandom(roll), io.StringIO())
    assert type(enemy) is cls
    assert enemy.name == "Demon"
    assert enemy.health == 20
    assert getattr(enemy, resource) == 5


def test_battle_picks_enemy_when_none_given():
    battle = Battle(Knight(25, "Arthur", 4, out=io.StringIO()), rng=ScriptedRandom(3), out=io.StringIO())
    assert type(battle.enemy) is Mage
    assert battle.turn == 1


def test_print_title():
    out = io.StringIO()
    battle = Battle(Knight(out=out), Mage(out=out), rng=ScriptedRandom(), out=out)
    battle.print_title()
    assert "Combat Simulator" in out.getvalue()


def test_player_wins_in_one_blow():
    out = io.StringIO()
    rng = ScriptedRandom(20, 20)
    player = Knight(25, "Arthur", 4, rng=rng, out=out)
    enemy = Knight(10, "Demon", 5, rng=rng, out=out)
    battle = Battle(player, enemy, rng=rng, out=out, read=answers("1"))
    assert battle.start() is True
    text = out.getvalue()
    assert "Arthur wins!" in text
    assert "loses!" not in text
    assert "Demon has 0hp" in text
    assert battle.turn == 1


def test_player_loses():
    out = io.StringIO()
    rng = ScriptedRandom(1, 1, 20, 20)
    player = Mage(5, "Merlin", 8, rng=rng, out=out)
    enemy = Bard(20, "Demon", 5, rng=rng, out=out)
    battle = Battle(player, enemy, rng=rng, out=out, read=answers("1"))
    assert battle.start() is False
    text = out.getvalue()
    assert "Merlin loses!" in text
    assert "wins!" not in text
    assert player.health == 0
    assert rng.values == []


def test_powerful_choice_spends_stamina():
    out = io.StringIO()
    rng = ScriptedRandom(20, 20)
    player = Knight(25, "Arthur", 4, rng=rng, out=out)
    enemy = Mage(15, "Demon", 5, rng=rng, out=out)
    battle = Battle(player, enemy, rng=rng, out=out, read=answers("2"))
    assert battle.start() is True
    assert player.stamina == 3
    assert "Arthur tries to do a long sword attack" in out.getvalue()


def test_fight_lasts_several_turns():
    out = io.StringIO()
    rng = ScriptedRandom(1, 1, 1, 20, 20)
    player = Ranger(20, "Robin", 5, rng=rng, out=out)
    enemy = Knight(10, "Demon", 5, rng=rng, out=out)
    battle = Battle(player, enemy, rng=rng, out=out, read=answers("1", "1"))
    assert battle.start() is True
    text = out.getvalue()
    assert battle.turn == 2
    assert "------- Turn 2 -------" in text
    assert text.index("------- Turn 1 -------") < text.index("------- Turn 2 -------")


def test_player_already_defeated_never_acts():
    out = io.StringIO()
    rng = ScriptedRandom()
    player = Bard(0, "Lute", 3, rng=rng, out=out)
    enemy = Knight(20, "Demon", 5, rng=rng, out=out)
    battle = Battle(player, enemy, rng=rng, out=out, read=no_input)
    assert battle.start() is False
    assert "Lute loses!" in out.getvalue()