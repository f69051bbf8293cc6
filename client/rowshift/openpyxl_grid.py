"""
openpyxl Grid
Adapts an openpyxl worksheet to the rowshift grid interface so rows of real
.xlsx files can be copied, inserted and moved.

The interface is 0-based, openpyxl is 1-based.
"""

from copy import copy
from typing import Dict, Optional

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .cell_value import CellValue
from .logger import logger


class WorksheetCell:
    """Grid cell view of an openpyxl cell."""

    def __init__(self, cell):
        self._cell = cell

    def __repr__(self):
        return f"WorksheetCell({self._cell.coordinate}, {self._cell.value!r})"

    @property
    def coordinate(self):
        return self._cell.coordinate

    def value_variant(self):
        cell = self._cell
        value = cell.value
        if value is None:
            return CellValue.blank()

        data_type = cell.data_type
        if data_type == 'f':
            if isinstance(value, str):
                return CellValue.formula(value[1:] if value.startswith('=') else value)
            # ArrayFormula / DataTableFormula
            return CellValue.unsupported(value)
        if data_type == 'b':
            return CellValue.boolean(value)
        if data_type in ('n', 'd'):
            if cell.is_date:
                return CellValue.date(value)
            return CellValue.number(value)
        if data_type == 'e':
            return CellValue.error(value)
        if data_type in ('s', 'inlineStr', 'str'):
            return CellValue.text(value)
        return CellValue.unsupported(value)

    def set_text(self, value):
        self._cell.value = value

    def set_boolean(self, value):
        self._cell.value = bool(value)

    def set_number(self, value):
        self._cell.value = value

    def set_date(self, value):
        self._cell.value = value

    def set_error(self, code):
        self._cell.value = code

    def formula_text(self):
        value = self._cell.value
        if self._cell.data_type == 'f' and isinstance(value, str):
            return value[1:] if value.startswith('=') else value
        return None

    def set_formula_text(self, formula):
        self._cell.value = f"={formula}"

    def is_date_formatted(self):
        return self._cell.is_date

    def style_ref(self):
        # Indices into the workbook's shared style tables
        return self._cell._style

    def set_style_ref(self, style):
        # Copy the index array so later style edits on one cell do not leak
        # into the other; the referenced styles stay shared.
        self._cell._style = copy(style)

    def comment_ref(self):
        return self._cell.comment

    def set_comment_ref(self, comment):
        # openpyxl copies comments that already belong to another cell
        self._cell.comment = comment

    def row_index(self):
        return self._cell.row - 1


class WorksheetRow:
    """Grid row view of one worksheet row."""

    def __init__(self, grid, index):
        self._grid = grid
        self.index = index

    def __repr__(self):
        return f"WorksheetRow(index={self.index})"

    @property
    def _ws(self):
        return self._grid.worksheet

    @property
    def height(self):
        row_number = self.index + 1
        if row_number not in self._ws.row_dimensions:
            return None
        return self._ws.row_dimensions[row_number].height

    @height.setter
    def height(self, value):
        self._ws.row_dimensions[self.index + 1].height = value

    def last_column_index(self):
        return self._grid._row_columns().get(self.index + 1, 0) - 1

    def get_cell(self, col):
        if col < 0:
            raise ValueError(f"Invalid column index {col}")
        cell = self._ws._cells.get((self.index + 1, col + 1))
        return WorksheetCell(cell) if cell is not None else None

    def create_cell(self, col):
        return WorksheetCell(self._ws.cell(row=self.index + 1, column=col + 1))


class WorksheetGrid:
    """Grid over an openpyxl Worksheet."""

    def __init__(self, worksheet: Worksheet):
        self.worksheet = worksheet
        # Row views handed out so far; re-indexed when rows shift
        self._rows: Dict[int, WorksheetRow] = {}
        # 1-based row number -> highest 1-based column holding a cell
        self._columns: Optional[Dict[int, int]] = None
        self._indexed_cells = 0

    def _row_columns(self):
        """Row to last column index of the worksheet cells.

        Built in one pass over the cells and reused until the number of cells
        changes or rows are shifted.
        """
        cells = self.worksheet._cells
        if self._columns is None or self._indexed_cells != len(cells):
            columns = {}
            for (row, col) in cells:
                if col > columns.get(row, 0):
                    columns[row] = col
            self._columns = columns
            self._indexed_cells = len(cells)
        return self._columns

    def row_count(self):
        """Last populated row index + 1."""
        rows = list(self._row_columns())
        rows.extend(
            r for r, dim in self.worksheet.row_dimensions.items() if dim.height is not None
        )
        return max(rows) if rows else 0

    def _row_exists(self, row_number):
        if row_number in self._row_columns():
            return True
        dims = self.worksheet.row_dimensions
        return row_number in dims and dims[row_number].height is not None

    def _row_view(self, index):
        row = self._rows.get(index)
        if row is None:
            row = WorksheetRow(self, index)
            self._rows[index] = row
        return row

    def get_row(self, index):
        if index < 0:
            raise ValueError(f"Invalid row index {index}")
        if not self._row_exists(index + 1):
            return None
        return self._row_view(index)

    def create_row(self, index):
        if index < 0:
            raise ValueError(f"Invalid row index {index}")
        return self._row_view(index)

    def shift_rows(self, from_index, to_index, distance):
        """Move rows [from_index, to_index] by distance without touching formulas."""
        if distance == 0 or from_index > to_index:
            return
        if from_index < 0:
            raise ValueError(f"Invalid row range {from_index}-{to_index}")

        ws = self.worksheet
        first, last = from_index + 1, to_index + 1

        if ws._cells:
            cell_range = f"A{first}:{get_column_letter(ws.max_column)}{last}"
            ws.move_range(cell_range, rows=distance, cols=0, translate=False)
        self._columns = None

        # Row heights move with their rows
        heights = {}
        for r, dim in list(ws.row_dimensions.items()):
            if first <= r <= last and dim.height is not None:
                heights[r] = dim.height
                dim.height = None
        for r, height in heights.items():
            ws.row_dimensions[r + distance].height = height

        moved = {}
        for index, row in self._rows.items():
            if from_index <= index <= to_index:
                row.index = index + distance
                moved[row.index] = row
        kept = {
            index: row for index, row in self._rows.items()
            if not from_index <= index <= to_index and index not in moved
        }
        kept.update(moved)
        self._rows = kept

        logger.debug(f"Shifted worksheet rows {first}-{last} by {distance}")
