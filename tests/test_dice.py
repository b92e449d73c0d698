"""Tests for snakes_ladders.dice."""

import pytest

from snakes_ladders.dice import Die, Roller, ScriptedDie


def test_rolls_in_range():
    die = Die(sides=6, seed=1)
    rolls = [die.roll() for _ in range(500)]
    assert min(rolls) == 1
    assert max(rolls) == 6


def test_same_seed_same_sequence():
    a = Die(sides=20, seed=42)
    b = Die(sides=20, seed=42)
    assert [a.roll() for _ in range(50)] == [b.roll() for _ in range(50)]


def test_reseed_restarts_sequence():
    die = Die(seed=7)
    first = [die.roll() for _ in range(10)]
    die.reseed(7)
    assert [die.roll() for _ in range(10)] == first


def test_roll_multiple_sums():
    die = Die(sides=6, seed=3)
    total = die.roll_multiple(3)
    assert 3 <= total <= 18


def test_die_needs_a_side():
    with pytest.raises(ValueError):
        Die(sides=0)


def test_scripted_die_cycles():
    die = ScriptedDie([1, 2, 3])
    assert [die.roll() for _ in range(7)] == [1, 2, 3, 1, 2, 3, 1]
    assert die.rolls == 7


def test_scripted_die_needs_values():
    with pytest.raises(ValueError):
        ScriptedDie([])


def test_both_satisfy_roller():
    assert isinstance(Die(), Roller)
    assert isinstance(ScriptedDie([4]), Roller)
