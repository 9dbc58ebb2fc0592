from __future__ import annotations

import datetime
import io

import pytest
from openpyxl import load_workbook

from sheetstudio.config import AppConfig
from sheetstudio.errors import DecodeFailure, FormatRejected
from sheetstudio.sampling import chart_records
from sheetstudio.state import ViewerState


@pytest.fixture
def loaded_state(make_workbook, sales_sheets) -> ViewerState:
    state = ViewerState()
    state.ingest(make_workbook(sales_sheets), "sales.xlsx")
    return state


def test_empty_state() -> None:
    state = ViewerState()

    assert not state.has_data
    assert state.sheet_names == []
    assert state.current_grid == []
    assert state.chart_sample == []
    with pytest.raises(ValueError):
        state.export()


def test_ingest_activates_first_sheet_and_samples_it(loaded_state: ViewerState) -> None:
    assert loaded_state.has_data
    assert loaded_state.file_name == "sales.xlsx"
    assert loaded_state.sheet_names == ["Продажи", "Notes", "Regions"]
    assert loaded_state.active_sheet == "Продажи"
    assert chart_records(loaded_state.chart_sample) == [
        {"name": "Jan", "Sales": 100, "Costs": 40},
        {"name": "Feb", "Costs": 35},
        {"name": "Mar", "Sales": 130.5},
    ]


def test_select_sheet_recomputes_chart(loaded_state: ViewerState) -> None:
    loaded_state.select_sheet("Regions")

    assert loaded_state.active_sheet == "Regions"
    assert [cell.value for cell in loaded_state.current_grid[1]] == ["North", 10, 12]
    assert chart_records(loaded_state.chart_sample) == [
        {"name": "North", "Q1": 10, "Q2": 12},
        {"name": "South", "Q1": 7, "Q2": 9},
    ]

    loaded_state.select_sheet("Notes")
    assert loaded_state.chart_sample == []


def test_select_unknown_sheet_keeps_state(loaded_state: ViewerState) -> None:
    before = list(loaded_state.chart_sample)

    with pytest.raises(KeyError):
        loaded_state.select_sheet("Missing")

    assert loaded_state.active_sheet == "Продажи"
    assert loaded_state.chart_sample == before


def test_failed_ingest_leaves_previous_state(loaded_state: ViewerState) -> None:
    workbook = loaded_state.workbook
    loaded_state.select_sheet("Regions")
    sample = list(loaded_state.chart_sample)

    with pytest.raises(DecodeFailure):
        loaded_state.ingest(b"garbage", "other.xlsx")
    with pytest.raises(FormatRejected):
        loaded_state.ingest(b"garbage", "other.txt")

    assert loaded_state.workbook is workbook
    assert loaded_state.active_sheet == "Regions"
    assert loaded_state.chart_sample == sample


def test_new_ingest_replaces_everything(loaded_state: ViewerState, make_workbook) -> None:
    loaded_state.select_sheet("Regions")

    loaded_state.ingest(make_workbook({"Only": [["k", "v"], ["a", 1]]}), "next.xlsx")

    assert loaded_state.file_name == "next.xlsx"
    assert loaded_state.sheet_names == ["Only"]
    assert loaded_state.active_sheet == "Only"
    assert chart_records(loaded_state.chart_sample) == [{"name": "a", "v": 1}]


def test_chart_settings_come_from_config(make_workbook) -> None:
    config = AppConfig()
    config.chart.max_rows = 1
    state = ViewerState(config=config)

    state.ingest(make_workbook({"S": [["k", "v"], ["a", 1], ["b", 2]]}), "s.xlsx")

    assert chart_records(state.chart_sample) == [{"name": "a", "v": 1}]


def test_export_active_sheet(loaded_state: ViewerState) -> None:
    loaded_state.select_sheet("Regions")

    name, payload = loaded_state.export()

    assert name == "sales_edited.xlsx"
    workbook = load_workbook(io.BytesIO(payload))
    assert workbook.sheetnames == ["Regions"]
    assert workbook["Regions"]["A2"].value == "North"


def test_handle_upload_notifications(make_workbook, sales_sheets) -> None:
    state = ViewerState()

    rejected = state.handle_upload(b"", "photo.png")
    assert rejected.is_error
    assert rejected.title == "Неверный формат"
    assert ".xlsx или .xls" in rejected.description
    assert not state.has_data

    failed = state.handle_upload(b"garbage", "broken.xlsx")
    assert failed.is_error
    assert failed.title == "Ошибка"
    assert not state.has_data

    succeeded = state.handle_upload(make_workbook(sales_sheets), "sales.xlsx")
    assert not succeeded.is_error
    assert succeeded.description == "sales.xlsx успешно импортирован"
    assert state.has_data


def test_handle_export_reports_success(loaded_state: ViewerState) -> None:
    name, payload, notification = loaded_state.handle_export()

    assert name == "sales_edited.xlsx"
    assert payload
    assert notification.title == "Экспорт завершён"


def test_date_cells_are_charted_as_serial_numbers(make_workbook) -> None:
    state = ViewerState()
    state.ingest(
        make_workbook({"Log": [["Event", "Date"], ["Launch", datetime.date(2024, 1, 2)]]}),
        "log.xlsx",
    )

    assert chart_records(state.chart_sample) == [{"name": "Launch", "Date": 45293}]
