import pytest

from lifegrid.state import GameState


def test_defaults():
    state = GameState()
    assert state.keep_alive is True
    assert state.pause is False
    assert state.loaded_filename is None
    assert state.current_rule_index == 0
    assert state.is_dragging is False
    assert state.drag_paint_mode is True


def test_toggle_pause_flips_and_returns():
    state = GameState()
    assert state.toggle_pause() is True
    assert state.pause is True
    assert state.toggle_pause() is False
    assert state.pause is False


def test_advance_rule_index_wraps():
    state = GameState()
    seen = [state.advance_rule_index(4) for _ in range(4)]
    assert seen == [1, 2, 3, 0]
    assert state.current_rule_index == 0


def test_advance_rule_index_single_set_stays():
    state = GameState()
    assert state.advance_rule_index(1) == 0


@pytest.mark.parametrize("count", [0, -3])
def test_advance_rule_index_rejects_nonpositive(count):
    state = GameState()
    with pytest.raises(ValueError):
        state.advance_rule_index(count)
    assert state.current_rule_index == 0


def test_filename_can_be_set_and_cleared():
    state = GameState()
    state.loaded_filename = "sample.txt"
    assert state.loaded_filename == "sample.txt"
    state.loaded_filename = None
    assert state.loaded_filename is None


def test_states_are_independent():
    first = GameState()
    second = GameState()
    first.toggle_pause()
    assert second.pause is False
    assert first != second