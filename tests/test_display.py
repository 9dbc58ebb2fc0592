import pytest

from sheetstudio.display import column_label, format_cell_value, grid_to_frame
from sheetstudio.workbook import wrap_rows


@pytest.mark.parametrize("index, expected", [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB")])
def test_column_label(index, expected):
    assert column_label(index) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (1234567, "1\u00A0234\u00A0567"),
        (12.5, "12,5"),
        (1234.5678, "1\u00A0234,568"),
        (100.0, "100"),
        (-2500, "-2\u00A0500"),
        ("text", "text"),
        ("", ""),
        (None, ""),
        (True, "True"),
    ],
)
def test_format_cell_value(value, expected):
    assert format_cell_value(value) == expected


def test_grid_to_frame_letters_and_row_numbers():
    grid = wrap_rows([["Month", "Sales", "Costs"], ["Jan", 1500]])

    frame = grid_to_frame(grid)

    assert list(frame.columns) == ["A", "B", "C"]
    assert list(frame.index) == [1, 2]
    assert frame.index.name == "#"
    assert frame.loc[2].tolist() == ["Jan", "1\u00A0500", ""]


def test_grid_to_frame_empty_grid():
    frame = grid_to_frame([])

    assert frame.empty
    assert list(frame.columns) == []
