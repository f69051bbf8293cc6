"""
Grid Interfaces
The minimal row/cell access the copy and shift logic needs from a sheet.

Any object with these methods works; SpreadsheetModel (in memory) and
WorksheetGrid (openpyxl) are the bundled implementations. All indices are
0-based.
"""

from typing import Any, Optional, Protocol

from .cell_value import CellValue


class Cell(Protocol):
    """A single cell of a row."""

    def value_variant(self) -> CellValue: ...

    def set_text(self, value: str) -> None: ...

    def set_boolean(self, value: bool) -> None: ...

    def set_number(self, value: float) -> None: ...

    def set_date(self, value) -> None: ...

    def set_error(self, code) -> None: ...

    def formula_text(self) -> Optional[str]: ...

    def set_formula_text(self, formula: str) -> None: ...

    def is_date_formatted(self) -> bool: ...

    def style_ref(self) -> Any: ...

    def set_style_ref(self, style) -> None: ...

    def comment_ref(self) -> Any: ...

    def set_comment_ref(self, comment) -> None: ...

    def row_index(self) -> int: ...


class Row(Protocol):
    """A row of cells; columns without a cell are simply absent."""

    height: Optional[float]

    def last_column_index(self) -> int:
        """Index of the last populated column, -1 for an empty row."""
        ...

    def get_cell(self, col: int) -> Optional[Cell]: ...

    def create_cell(self, col: int) -> Cell: ...


class Grid(Protocol):
    """A sheet: an ordered sequence of rows."""

    def row_count(self) -> int:
        """Last populated row index + 1."""
        ...

    def get_row(self, index: int) -> Optional[Row]: ...

    def create_row(self, index: int) -> Row: ...

    def shift_rows(self, from_index: int, to_index: int, distance: int) -> None:
        """Move rows [from_index, to_index] down by distance.

        Rows keep their native content; formula text is not rewritten.
        """
        ...
