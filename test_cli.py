"""Tests for the rowshift command line."""

import pytest
from openpyxl import Workbook, load_workbook

from rowshift.cli import main


@pytest.fixture
def workbook_path(tmp_path):
    wb = Workbook()
    ws = wb.active
    ws.title = "Items"
    ws.append(["Item", "Qty", "Price", "Amount"])
    ws.append(["A", 2, 10, "=B2*C2"])
    ws.append(["Total", None, None, "=SUM(D2:D2)"])
    path = tmp_path / "book.xlsx"
    wb.save(path)
    return path


def test_translate_prints_result(capsys):
    assert main(["translate", "A1+B5", "--move", "2", "--insert-row", "5"]) == 0

    assert capsys.readouterr().out.strip() == "A1+B7"


def test_translate_defaults_to_moving_everything(capsys):
    assert main(["translate", "$A$1+B2", "--move", "1"]) == 0

    assert capsys.readouterr().out.strip() == "$A$1+B3"


def test_insert_row(workbook_path, tmp_path):
    output = tmp_path / "out.xlsx"

    code = main(["insert-row", str(workbook_path), "--row", "3", "--template", "2",
                 "--sheet", "Items", "--output", str(output)])

    assert code == 0
    ws = load_workbook(output)["Items"]
    assert ws["D3"].value == "=B3*C3"
    assert ws["A4"].value == "Total"


def test_move_rows_overwrites_input(workbook_path):
    assert main(["move-rows", str(workbook_path), "--start", "2", "--count", "2"]) == 0

    ws = load_workbook(workbook_path).active
    assert ws["D4"].value == "=B4*C4"
    assert ws["D5"].value == "=SUM(D4:D4)"


def test_copy_row(workbook_path):
    assert main(["copy-row", str(workbook_path), "--source", "2", "--target", "6"]) == 0

    ws = load_workbook(workbook_path).active
    assert ws["A6"].value == "A"
    assert ws["D6"].value == "=B6*C6"


def test_missing_file_returns_error(tmp_path):
    assert main(["move-rows", str(tmp_path / "nope.xlsx"), "--start", "1", "--count", "1"]) == 1


def test_empty_template_row_returns_error(workbook_path):
    assert main(["insert-row", str(workbook_path), "--row", "2", "--template", "20"]) == 1


def test_missing_command_exits_with_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 2
