from __future__ import annotations

import pytest

from storygraph.colors import ColorTable, auto_color
from storygraph.errors import DuplicateEntityInBeat
from storygraph.layout import layout_beat
from storygraph.story import Beat
from storygraph.track_state import TrackState

ORIGIN = 10.0
IN_GROUP = 5.0
INTER_GROUP = 24.0


def _layout(beat, state, **kwargs):
    return layout_beat(beat, ORIGIN, IN_GROUP, INTER_GROUP, state, **kwargs)


def test_two_beat_scenario_positions():
    state = TrackState()

    first = _layout([["A", "B"], ["C"]], state)
    assert first.positions == {"A": 10.0, "B": 15.0, "C": 39.0}

    second = _layout([["A"], ["B", "C"]], state, beat_index=1)
    assert second.positions == {"A": 10.0, "B": 34.0, "C": 39.0}

    moves = {t.entity: (t.previous_y, t.new_y) for t in second.transitions}
    assert moves == {"A": (10.0, 10.0), "B": (15.0, 34.0), "C": (39.0, 39.0)}
    assert state.positions() == {"A": 10.0, "B": 34.0, "C": 39.0}


def test_new_entities_have_no_vertical_travel():
    state = TrackState()

    layout = _layout([["x", "y", "z"]], state)

    assert [t.new_y for t in layout.transitions] == [10.0, 15.0, 20.0]
    assert all(t.travel == 0 for t in layout.transitions)


def test_transitions_follow_group_then_entity_order():
    layout = _layout(Beat.from_groups([["b", "a"], ["d", "c"]]), TrackState())

    assert [t.entity for t in layout.transitions] == ["b", "a", "d", "c"]


def test_absent_entity_keeps_entry_and_resumes():
    state = TrackState()
    _layout([["A"], ["B"]], state)
    b_position = state.position_of("B")

    skipped = _layout([["A"]], state, beat_index=1)
    assert [t.entity for t in skipped.transitions] == ["A"]
    assert state.position_of("B") == b_position

    resumed = _layout([["B", "A"]], state, beat_index=2)
    b_move = next(t for t in resumed.transitions if t.entity == "B")
    assert b_move.previous_y == b_position
    assert b_move.new_y == ORIGIN


def test_empty_groups_contribute_nothing():
    with_empty = _layout([["A"], [], ["B"]], TrackState())
    without = _layout([["A"], ["B"]], TrackState())

    assert with_empty.positions == without.positions


def test_colors_are_assigned_and_recorded():
    state = TrackState(ColorTable({"raptor": "#ff0000"}))

    layout = _layout([["raptor", "grant"]], state)

    colors = {t.entity: t.color for t in layout.transitions}
    assert colors["raptor"].hex == "#ff0000"
    assert colors["grant"] == auto_color(1)
    assert state.get("grant").color == colors["grant"]


def test_duplicate_entity_raises_without_touching_state():
    state = TrackState()
    _layout([["A"], ["B"]], state)
    before = state.snapshot()

    with pytest.raises(DuplicateEntityInBeat) as excinfo:
        _layout([["B"], ["C", "A"], ["A"]], state, beat_index=3)

    assert excinfo.value.beat_index == 3
    assert excinfo.value.entity == "A"
    assert state.snapshot() == before
    assert "C" not in state


def test_duplicate_within_one_group_is_detected():
    with pytest.raises(DuplicateEntityInBeat):
        _layout([["A", "A"]], TrackState())


def test_skip_duplicates_keeps_first_occurrence(caplog):
    state = TrackState()

    with caplog.at_level("WARNING", logger="storygraph.layout"):
        layout = _layout([["A", "B"], ["A"]], state, skip_duplicates=True)

    assert layout.positions == {"A": 10.0, "B": 15.0}
    assert "Skipping repeated 'A'" in caplog.text
