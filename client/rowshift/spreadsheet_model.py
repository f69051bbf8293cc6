"""
Spreadsheet Model
In-memory grid of rows and typed cells, exposed as a Qt table model so it can
back a QTableView directly.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Optional

from PySide6 import QtCore
from PySide6.QtCore import Qt

from .cell_value import CellType, CellValue
from .logger import logger


@dataclass
class CellStyle:
    """Formatting shared by reference between cells."""

    number_format: str = "General"
    bold: bool = False
    italic: bool = False
    text_color: Optional[str] = None
    bg_color: Optional[str] = None


@dataclass
class CellComment:
    text: str
    author: str = ""


class SheetCell:
    """A cell of a SheetRow. Its row index follows the row when rows shift."""

    def __init__(self, row, col):
        self._row = row
        self.col = col
        self._value = CellValue.blank()
        self._style = None
        self._comment = None

    def __repr__(self):
        return f"SheetCell(row={self.row_index()}, col={self.col}, value={self._value!r})"

    def _changed(self):
        self._row.cell_changed(self)

    def value_variant(self):
        if self._value.kind is CellType.NUMBER and self.is_date_formatted():
            return CellValue.date(self._value.value)
        return self._value

    def set_value(self, cell_value):
        self._value = cell_value
        self._changed()

    def set_text(self, value):
        self.set_value(CellValue.text(value))

    def set_boolean(self, value):
        self.set_value(CellValue.boolean(value))

    def set_number(self, value):
        self.set_value(CellValue.number(value))

    def set_date(self, value):
        self.set_value(CellValue.date(value))

    def set_error(self, code):
        self.set_value(CellValue.error(code))

    def formula_text(self):
        if self._value.kind is CellType.FORMULA:
            return self._value.value
        return None

    def set_formula_text(self, formula):
        self.set_value(CellValue.formula(formula))

    def is_date_formatted(self):
        return self._style is not None and self._style.number_format in SpreadsheetModel.DATE_FORMATS

    def style_ref(self):
        return self._style

    def set_style_ref(self, style):
        self._style = style
        self._changed()

    def comment_ref(self):
        return self._comment

    def set_comment_ref(self, comment):
        self._comment = comment
        self._changed()

    def row_index(self):
        return self._row.index


class SheetRow:
    """A row of a SpreadsheetModel; cells are keyed by column index."""

    def __init__(self, model, index):
        self._model = model
        self.index = index
        self.height = None
        self._cells: Dict[int, SheetCell] = {}

    def __repr__(self):
        return f"SheetRow(index={self.index}, cells={len(self._cells)})"

    def last_column_index(self):
        return max(self._cells) if self._cells else -1

    def get_cell(self, col):
        if col < 0:
            raise IndexError(f"Invalid column index {col}")
        return self._cells.get(col)

    def create_cell(self, col):
        """Create a blank cell at col, replacing any existing one."""
        if col < 0:
            raise IndexError(f"Invalid column index {col}")
        cell = SheetCell(self, col)
        self._cells[col] = cell
        self._model._column_added(col)
        return cell

    def cells(self):
        """Yield populated cells in column order."""
        for col in sorted(self._cells):
            yield self._cells[col]

    def cell_changed(self, cell):
        self._model._cell_changed(self.index, cell.col)


class SpreadsheetModel(QtCore.QAbstractTableModel):
    """Model for rows of typed cells, usable as a rowshift grid."""

    # Excel-compatible format codes
    FORMAT_GENERAL = "General"
    FORMAT_NUMBER = "#,##0.00"
    FORMAT_NUMBER_NO_DECIMAL = "#,##0"
    FORMAT_PERCENTAGE = "0.00%"
    FORMAT_DATE_MDY = "mm/dd/yyyy"
    FORMAT_DATE_DMY = "dd/mm/yyyy"
    FORMAT_DATE_YMD = "yyyy-mm-dd"
    FORMAT_TIME = "hh:mm:ss"
    FORMAT_DATETIME = "yyyy-mm-dd hh:mm:ss"
    FORMAT_TEXT = "@"

    DATE_FORMATS = frozenset({
        FORMAT_DATE_MDY, FORMAT_DATE_DMY, FORMAT_DATE_YMD, FORMAT_TIME, FORMAT_DATETIME,
    })

    def __init__(self, cols=26, parent=None):
        """Initialize the spreadsheet model.

        Args:
            cols: Minimum number of columns reported to views
            parent: Parent QObject
        """
        super().__init__(parent)
        self._cols = cols
        self._rows: Dict[int, SheetRow] = {}

    # Grid interface

    def row_count(self):
        """Last populated row index + 1."""
        return max(self._rows) + 1 if self._rows else 0

    def get_row(self, index):
        if index < 0:
            raise IndexError(f"Invalid row index {index}")
        return self._rows.get(index)

    def create_row(self, index):
        """Create an empty row at index, replacing any existing one."""
        if index < 0:
            raise IndexError(f"Invalid row index {index}")
        old_count = self.row_count()
        row = SheetRow(self, index)
        if index >= old_count:
            self.beginInsertRows(QtCore.QModelIndex(), old_count, index)
            self._rows[index] = row
            self.endInsertRows()
        else:
            self._rows[index] = row
            self._emit_row_changed(index)
        return row

    def shift_rows(self, from_index, to_index, distance):
        """Move rows [from_index, to_index] by distance.

        Rows at the destination are overwritten and the vacated rows become
        empty. Cell content, including formula text, moves unchanged.
        """
        if distance == 0 or from_index > to_index:
            return
        if from_index < 0:
            raise IndexError(f"Invalid row range {from_index}-{to_index}")
        if from_index + distance < 0:
            raise IndexError(f"Cannot shift row {from_index} by {distance}")

        self.beginResetModel()
        moving = [self._rows.pop(i) for i in range(from_index, to_index + 1) if i in self._rows]
        for row in moving:
            row.index += distance
            self._rows[row.index] = row
        self.endResetModel()

        logger.debug(f"Shifted rows {from_index + 1}-{to_index + 1} by {distance}")

    # Convenience accessors

    def cell(self, row, col) -> Optional[SheetCell]:
        """Return the cell at (row, col) or None."""
        sheet_row = self._rows.get(row)
        return sheet_row.get_cell(col) if sheet_row else None

    def ensure_cell(self, row, col) -> SheetCell:
        """Return the cell at (row, col), creating row and cell as needed."""
        sheet_row = self.get_row(row) or self.create_row(row)
        return sheet_row.get_cell(col) or sheet_row.create_cell(col)

    def get_cell_formula(self, row, col):
        """Get the formula of a cell if it exists (with the leading "=")."""
        cell = self.cell(row, col)
        text = cell.formula_text() if cell else None
        return f"={text}" if text is not None else None

    def snapshot(self):
        """Return {(row, col): (CellValue, style, comment)} plus row heights.

        Used to compare grid states.
        """
        cells = {}
        heights = {}
        for index, row in self._rows.items():
            heights[index] = row.height
            for cell in row.cells():
                cells[(index, cell.col)] = (cell._value, cell.style_ref(), cell.comment_ref())
        return {"cells": cells, "heights": heights}

    # Qt model interface

    def rowCount(self, parent=QtCore.QModelIndex()):
        """Return the number of rows."""
        return self.row_count()

    def columnCount(self, parent=QtCore.QModelIndex()):
        """Return the number of columns."""
        return self._cols

    def data(self, index, role=Qt.DisplayRole):
        """Return data for the given index and role."""
        if not index.isValid():
            return None

        cell = self.cell(index.row(), index.column())
        if cell is None:
            return "" if role in (Qt.DisplayRole, Qt.EditRole) else None

        cell_value = cell.value_variant()
        if role == Qt.EditRole:
            if cell_value.kind is CellType.FORMULA:
                # When editing, show the formula
                return f"={cell_value.value}"
            return self._format_value(cell_value, None)

        if role == Qt.DisplayRole:
            style = cell.style_ref()
            return self._format_value(cell_value, style.number_format if style else None)

        if role == Qt.TextAlignmentRole:
            if cell_value.kind in (CellType.NUMBER, CellType.DATE, CellType.FORMULA):
                return Qt.AlignRight | Qt.AlignVCenter
            return Qt.AlignLeft | Qt.AlignVCenter

        return None

    def _format_value(self, cell_value, cell_format):
        """Render a CellValue as text using an Excel-compatible format."""
        kind = cell_value.kind
        value = cell_value.value
        if kind is CellType.BLANK:
            return ""
        if kind is CellType.FORMULA:
            return f"={value}"
        if kind is CellType.BOOLEAN:
            return "TRUE" if value else "FALSE"
        if kind is CellType.DATE:
            if isinstance(value, (datetime, date)):
                if cell_format == self.FORMAT_DATE_MDY:
                    return value.strftime("%m/%d/%Y")
                elif cell_format == self.FORMAT_DATE_DMY:
                    return value.strftime("%d/%m/%Y")
                return value.isoformat()
            return str(value)
        if kind is CellType.NUMBER:
            if cell_format == self.FORMAT_NUMBER:
                return f"{value:,.2f}"
            elif cell_format == self.FORMAT_NUMBER_NO_DECIMAL:
                return f"{value:,.0f}"
            elif cell_format == self.FORMAT_PERCENTAGE:
                return f"{value * 100:.2f}%"
            return f"{value:g}"
        return str(value)

    def setData(self, index, value, role=Qt.EditRole):
        """Set data for the given index.

        Text starting with "=" becomes a formula, numeric text a number.
        """
        if not index.isValid() or role != Qt.EditRole:
            return False

        cell = self.ensure_cell(index.row(), index.column())
        value_str = str(value).strip() if value is not None else ""

        if value_str.startswith('='):
            cell.set_formula_text(value_str[1:])
        elif not value_str:
            cell.set_value(CellValue.blank())
        else:
            try:
                cell.set_number(float(value_str.replace(',', '')))
            except ValueError:
                cell.set_text(value_str)
        return True

    def flags(self, index):
        """Return item flags for the given index."""
        if not index.isValid():
            return Qt.NoItemFlags

        return Qt.ItemIsEnabled | Qt.ItemIsSelectable | Qt.ItemIsEditable

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        """Return header data."""
        if role == Qt.DisplayRole:
            if orientation == Qt.Horizontal:
                # Column headers: A, B, C, ..., Z, AA, AB, ...
                return self._column_name(section)
            else:
                # Row headers: 1, 2, 3, ...
                return str(section + 1)
        return None

    @staticmethod
    def _column_name(index):
        """Convert column index to spreadsheet column name (A, B, C, ..., AA, AB, ...)."""
        name = ""
        index += 1  # Make it 1-based
        while index > 0:
            index -= 1
            name = chr(65 + (index % 26)) + name
            index //= 26
        return name

    # Change notifications from rows and cells

    def _column_added(self, col):
        if col >= self._cols:
            self.beginInsertColumns(QtCore.QModelIndex(), self._cols, col)
            self._cols = col + 1
            self.endInsertColumns()

    def _cell_changed(self, row, col):
        if row in self._rows:
            index = self.index(row, col)
            self.dataChanged.emit(index, index, [Qt.DisplayRole, Qt.EditRole])

    def _emit_row_changed(self, row):
        self.dataChanged.emit(
            self.index(row, 0),
            self.index(row, max(self._cols - 1, 0)),
            [Qt.DisplayRole, Qt.EditRole]
        )
