import dataclasses

import pytest

from lifegrid.rules import (
    MAX_NEIGHBORS,
    Rules,
    conway,
    day_night,
    highlife,
    make_rules,
    maze,
)


def test_preset_names_match_notation():
    assert conway().name == "Conway's Life (B3/S23)"
    assert highlife().name == "HighLife (B36/S23)"
    assert day_night().name == "Day & Night (B3678/S34678)"
    assert maze().name == "Maze (B3/S12345)"


def test_conway_birth_and_survival():
    rules = conway()
    assert rules.apply(False, 3) is True
    assert rules.apply(False, 2) is False
    assert rules.apply(True, 2) is True
    assert rules.apply(True, 3) is True
    assert rules.apply(True, 4) is False
    assert rules.apply(True, 1) is False


def test_highlife_extends_conway_birth():
    assert conway().birth < highlife().birth
    assert conway().survival == highlife().survival
    assert highlife().apply(False, 6) is True
    assert conway().apply(False, 6) is False


def test_maze_survival_is_permissive():
    rules = maze()
    assert all(rules.apply(True, n) for n in [1, 2, 3, 4, 5])
    assert not rules.apply(True, 6)


def test_apply_matches_sets():
    for rules in (conway(), highlife(), day_night(), maze()):
        for n in range(MAX_NEIGHBORS + 1):
            assert rules.apply(False, n) == (n in rules.birth)
            assert rules.apply(True, n) == (n in rules.survival)


def test_preset_sets_are_fixed():
    assert day_night().birth == frozenset({3, 6, 7, 8})
    assert day_night().survival == frozenset({3, 4, 6, 7, 8})
    assert maze().survival == frozenset({1, 2, 3, 4, 5})


@pytest.mark.parametrize("count", [-1, MAX_NEIGHBORS + 1, 100])
def test_apply_rejects_out_of_range(count):
    with pytest.raises(ValueError):
        conway().apply(True, count)


def test_make_rules_drops_invalid_counts():
    rules = make_rules("custom", [-1, 9, 3, 3], [2, 42])
    assert rules.birth == frozenset({3})
    assert rules.survival == frozenset({2})


def test_make_rules_default_name():
    assert make_rules(None, [3], [2]).name == "Custom"


def test_make_rules_truncates_long_name():
    long_name = "x" * 200
    rules = make_rules(long_name, [], [])
    assert len(rules.name) == 63
    assert long_name.startswith(rules.name)


def test_make_rules_accepts_any_iterable():
    rules = make_rules("gen", (n for n in [1, 2]), {4})
    assert rules.birth == frozenset({1, 2})
    assert rules.survival == frozenset({4})


def test_describe_conway():
    text = conway().describe()
    assert text == (
        "Rules: Conway's Life (B3/S23)\n"
        "Birth conditions (neighbor count): 3 \n"
        "Survival conditions (neighbor count): 2 3 \n"
    )


def test_describe_lists_counts_in_order():
    rules = make_rules("order", [8, 0, 4], [])
    assert "Birth conditions (neighbor count): 0 4 8 \n" in rules.describe()
    assert rules.describe().endswith("Survival conditions (neighbor count): \n")


def test_rules_are_immutable():
    rules = conway()
    with pytest.raises(dataclasses.FrozenInstanceError):
        rules.name = "other"  # type: ignore[misc]
    assert rules.name == "Conway's Life (B3/S23)"
    assert rules == conway()


def test_rules_equality():
    assert conway() == conway()
    assert conway() != highlife()
    assert isinstance(conway(), Rules)