"""Tests for row reference translation in formula text."""

import pytest

from rowshift.cell_value import CellValue
from rowshift.formula_translator import FormulaTranslator, UnsupportedMove, move_formula
from rowshift.spreadsheet_model import SpreadsheetModel


@pytest.fixture
def translator():
    return FormulaTranslator()


@pytest.mark.parametrize("insert_row_index", [0, 1, 5, 100])
def test_zero_move_returns_formula_unchanged(translator, insert_row_index):
    assert translator.translate("A1+B2", 0, insert_row_index) == "A1+B2"


def test_every_reference_moves_from_row_zero(translator):
    assert translator.translate("A1+B2", 1, 0) == "A2+B3"


def test_references_before_insert_point_stay(translator):
    # threshold is row 5 (insert index 4 + 1)
    assert translator.translate("A1+B5", 2, 4) == "A1+B7"


def test_reference_just_before_threshold_stays(translator):
    assert translator.translate("A4+A5+A6", 3, 4) == "A4+A8+A9"


def test_absolute_marker_freezes_row(translator):
    assert translator.translate("$A$1+B2", 1, 0) == "$A$1+B3"


def test_marker_stays_armed_over_letters(translator):
    # "$A1" is a column-absolute reference but the row is frozen too
    assert translator.translate("$A1+B2", 1, 0) == "$A1+B3"
    assert translator.translate("SUM($A:B5)", 2, 0) == "SUM($A:B5)"


def test_marker_after_digits_keeps_pending_number(translator):
    # The marker arms the flag before the pending "1" is flushed
    assert translator.translate("A1$B2", 1, 0) == "A1$B3"


def test_marker_is_consumed_by_one_number(translator):
    assert translator.translate("$A$1+C1+D1", 1, 0) == "$A$1+C2+D2"


def test_trailing_number_is_translated(translator):
    assert translator.translate("A10", 5) == "A15"
    assert translator.translate("=A10", 5) == "=A15"


def test_multi_digit_numbers_and_ranges(translator):
    assert translator.translate("SUM(A9:A12)*2", 10, 0) == "SUM(A19:A22)*12"


def test_ranges_split_by_insert_point(translator):
    assert translator.translate("SUM(C2:C20)", 3, 9) == "SUM(C2:C23)"


def test_negative_move(translator):
    assert translator.translate("A5+B6", -2) == "A3+B4"


def test_leading_zeros_are_normalised(translator):
    assert translator.translate("A007", 0) == "A007"
    assert translator.translate("A007", 1, 100) == "A7"


def test_formula_without_digits(translator):
    assert translator.translate("TODAY()", 3) == "TODAY()"
    assert translator.translate("", 3) == ""


@pytest.mark.parametrize("formula", ["A1+B2", "$A$1*C7", "SUM(A1:A30)/B4", "IF(A1>0,B2,C3)", ""])
@pytest.mark.parametrize("move_count", [-1, 0, 1, 4])
def test_two_argument_form_uses_insert_row_zero(translator, formula, move_count):
    assert translator.translate(formula, move_count) == translator.translate(formula, move_count, 0)


def test_translate_by_insert(translator):
    assert translator.translate_by_insert("A1+A3", 1, 1) == "A1+A4"


def test_custom_marker():
    translator = FormulaTranslator(absolute_marker="#")
    assert translator.translate("#A1+$B2", 1) == "#A1+$B3"


@pytest.mark.parametrize("marker", ["", "$$", "7"])
def test_invalid_marker_rejected(marker):
    with pytest.raises(ValueError):
        FormulaTranslator(absolute_marker=marker)


def test_move_formula_uses_default_translator():
    assert move_formula("A1+B5", 2, 4) == "A1+B7"


def test_multi_axis_move_is_unsupported(translator):
    result = translator.translate_multi_axis("A1+B2", 1, 1)

    assert isinstance(result, UnsupportedMove)
    assert result.supported is False
    assert result.formula == "A1+B2"
    assert "row" in result.reason


def test_update_formula_rewrites_cell():
    model = SpreadsheetModel()
    cell = model.ensure_cell(3, 0)
    cell.set_formula_text("A1+A4")

    FormulaTranslator().update_formula(cell, 2, 2)

    assert cell.formula_text() == "A1+A6"


def test_update_formula_skips_non_formula_and_blank_cells():
    model = SpreadsheetModel()
    number_cell = model.ensure_cell(0, 0)
    number_cell.set_number(12)
    blank_formula = model.ensure_cell(0, 1)
    blank_formula.set_value(CellValue.formula("  "))

    translator = FormulaTranslator()
    translator.update_formula(number_cell, 1, 0)
    translator.update_formula(blank_formula, 1, 0)

    assert number_cell.value_variant() == CellValue.number(12)
    assert blank_formula.formula_text() == "  "
