"""Tests for the in-memory Qt spreadsheet model."""

from datetime import date

import pytest
from PySide6.QtCore import Qt

from rowshift.cell_value import CellType, CellValue
from rowshift.spreadsheet_model import CellStyle, SpreadsheetModel


def test_empty_model(model):
    assert model.row_count() == 0
    assert model.rowCount() == 0
    assert model.columnCount() == 26
    assert model.get_row(0) is None


def test_create_row_and_cells(model):
    row = model.create_row(2)
    cell = row.create_cell(1)
    cell.set_text("hi")

    assert model.row_count() == 3
    assert row.last_column_index() == 1
    assert row.get_cell(0) is None
    assert cell.row_index() == 2
    assert model.cell(2, 1) is cell


def test_negative_indices_raise(model):
    with pytest.raises(IndexError):
        model.get_row(-1)
    with pytest.raises(IndexError):
        model.create_row(-2)
    with pytest.raises(IndexError):
        model.create_row(0).create_cell(-1)
    with pytest.raises(IndexError):
        model.shift_rows(-1, 3, 1)


def test_shift_rows_moves_row_objects(fill):
    model = fill({(0, 0): "a", (1, 0): "b", (2, 0): "=A1", (4, 0): "e"})
    moved = model.get_row(1)
    cell = moved.get_cell(0)

    model.shift_rows(1, 2, 2)

    assert model.get_row(1) is None
    assert model.get_row(2) is None
    assert model.get_row(3) is moved
    assert cell.row_index() == 3
    # the row at the destination was overwritten
    assert model.get_row(4).get_cell(0).formula_text() == "A1"
    assert model.row_count() == 5


def test_shift_rows_with_empty_range_is_noop(fill):
    model = fill({(0, 0): 1})
    before = model.snapshot()

    model.shift_rows(3, 1, 2)
    model.shift_rows(0, 0, 0)
    model.shift_rows(0, -1, 2)

    assert model.snapshot() == before


def test_number_with_date_format_reads_as_date(model):
    cell = model.ensure_cell(0, 0)
    cell.set_number(45000)
    assert cell.value_variant().kind is CellType.NUMBER

    cell.set_style_ref(CellStyle(number_format=SpreadsheetModel.FORMAT_DATE_MDY))

    assert cell.is_date_formatted()
    assert cell.value_variant() == CellValue.date(45000.0)


def test_data_roles(fill):
    model = fill({(0, 0): "=SUM(B1:B2)", (0, 1): 1234.5, (0, 2): True, (0, 3): "label"})
    model.cell(0, 1).set_style_ref(CellStyle(number_format=SpreadsheetModel.FORMAT_NUMBER))

    assert model.data(model.index(0, 0), Qt.EditRole) == "=SUM(B1:B2)"
    assert model.data(model.index(0, 1), Qt.DisplayRole) == "1,234.50"
    assert model.data(model.index(0, 2), Qt.DisplayRole) == "TRUE"
    assert model.data(model.index(0, 3), Qt.DisplayRole) == "label"
    assert model.data(model.index(0, 4), Qt.DisplayRole) == ""


def test_date_display(model):
    cell = model.ensure_cell(0, 0)
    cell.set_date(date(2024, 2, 29))
    cell.set_style_ref(CellStyle(number_format=SpreadsheetModel.FORMAT_DATE_DMY))

    assert model.data(model.index(0, 0), Qt.DisplayRole) == "29/02/2024"


def test_set_data_parses_input(model):
    model.create_row(0)

    assert model.setData(model.index(0, 0), "=A2+1")
    assert model.setData(model.index(0, 1), "1,500")
    assert model.setData(model.index(0, 2), "words")

    assert model.cell(0, 0).value_variant() == CellValue.formula("A2+1")
    assert model.cell(0, 1).value_variant() == CellValue.number(1500)
    assert model.cell(0, 2).value_variant() == CellValue.text("words")
    assert model.get_cell_formula(0, 0) == "=A2+1"
    assert model.get_cell_formula(0, 1) is None


def test_cell_writes_emit_data_changed(model):
    cell = model.ensure_cell(0, 0)
    changed = []
    model.dataChanged.connect(lambda top_left, bottom_right, roles: changed.append(top_left.row()))

    cell.set_number(5)

    assert changed == [0]


def test_wide_rows_grow_column_count(model):
    model.create_row(0).create_cell(30)

    assert model.columnCount() == 31


def test_headers(model):
    assert model.headerData(0, Qt.Horizontal) == "A"
    assert model.headerData(27, Qt.Horizontal) == "AB"
    assert model.headerData(4, Qt.Vertical) == "5"
