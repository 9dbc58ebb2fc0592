from sheetstudio.notifications import format_rejected
from sheetstudio.workbook import Cell, WorkbookData, unwrap_rows, wrap_rows


def test_wrap_and_unwrap_rows():
    rows = [["a", 1], ["", 2.5, "tail"]]

    grid = wrap_rows(rows)

    assert grid[1][2] == Cell(value="tail")
    assert unwrap_rows(grid) == rows


def test_unwrap_drops_formula_metadata():
    grid = [[Cell(value=3, formula="=1+2")]]

    assert unwrap_rows(grid) == [[3]]


def test_workbook_from_raw_keeps_order():
    workbook = WorkbookData.from_raw("book.xlsx", {"B": [["x"]], "A": [["y"]]})

    assert workbook.sheet_names == ["B", "A"]
    assert workbook.first_sheet == "B"
    assert workbook.raw_rows("A") == [["y"]]


def test_empty_workbook_has_no_first_sheet():
    assert WorkbookData(name="empty").first_sheet == ""


def test_format_rejected_lists_configured_extensions():
    notification = format_rejected([".xlsx", ".xlsm"])

    assert notification.description == "Пожалуйста, загрузите файл Excel (.xlsx или .xlsm)"
    assert notification.is_error
