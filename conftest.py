"""Pytest configuration for rowshift tests.

1. Puts client/ on sys.path so `rowshift` imports without installing
2. Points ROWSHIFT_HOME at a temporary directory so tests never touch ~/.rowshift
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

client_dir = Path(__file__).resolve().parent / "client"
if str(client_dir) not in sys.path:
    sys.path.insert(0, str(client_dir))

os.environ.setdefault("ROWSHIFT_HOME", tempfile.mkdtemp(prefix="rowshift-tests-"))


@pytest.fixture
def model():
    """Empty in-memory grid."""
    from rowshift.spreadsheet_model import SpreadsheetModel

    return SpreadsheetModel()


@pytest.fixture
def fill(model):
    """Write cells into the model: fill({(row, col): value_or_"=formula"}).

    Returns the model.
    """
    from rowshift.cell_value import set_cell_value

    def _fill(cells, style=None):
        for (row, col), value in cells.items():
            cell = model.ensure_cell(row, col)
            if isinstance(value, str) and value.startswith("="):
                cell.set_formula_text(value[1:])
            else:
                set_cell_value(cell, value)
            if style is not None:
                cell.set_style_ref(style)
        return model

    return _fill
