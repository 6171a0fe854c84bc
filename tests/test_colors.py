from __future__ import annotations

import pytest

from storygraph.colors import Color, ColorAssigner, ColorTable, auto_color


def test_auto_color_starts_red_and_is_deterministic():
    first = auto_color(0)

    assert first == auto_color(0)
    assert first.r > first.g
    assert first.g == first.b


def test_first_twenty_auto_colors_are_distinct():
    colors = [auto_color(index) for index in range(20)]

    assert len(set(colors)) == len(colors)


def test_color_for_returns_existing_entry_unchanged():
    table = ColorTable()
    assigner = ColorAssigner()

    first = assigner.color_for("grant", table)
    again = assigner.color_for("grant", table)

    assert first is again
    assert len(table) == 1


def test_new_entities_use_insertion_index():
    table = ColorTable()
    assigner = ColorAssigner()

    assigned = [assigner.color_for(name, table) for name in ["a", "b", "c"]]

    assert assigned == [auto_color(0), auto_color(1), auto_color(2)]


def test_preset_colors_count_toward_index():
    table = ColorTable({"t-rex": "#ff0000"})
    assigner = ColorAssigner()

    assert assigner.color_for("t-rex", table) == Color(255, 0, 0)
    assert assigner.color_for("grant", table) == auto_color(1)


def test_color_table_refuses_overwrite():
    table = ColorTable()
    table.add("kids", Color(1, 2, 3))

    with pytest.raises(KeyError):
        table.add("kids", Color(4, 5, 6))


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#ff0000", Color(255, 0, 0)),
        ("1b1b1b", Color(27, 27, 27)),
        ("#0f0", Color(0, 255, 0)),
    ],
)
def test_color_from_hex(value, expected):
    assert Color.from_hex(value) == expected
    assert Color.from_hex(expected.hex) == expected


def test_color_from_hex_rejects_garbage():
    with pytest.raises(ValueError):
        Color.from_hex("#12345")


def test_auto_color_encodes_linear_hsv_to_srgb():
    assert [auto_color(index).hex for index in range(3)] == ["#bc4d4d", "#4d7bbc", "#9abc4d"]
