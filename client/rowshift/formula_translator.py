"""
Formula Translator
Rewrites the row numbers inside a formula when rows move, the way a
spreadsheet application updates references after a copy or an insert.

Only row numbers are touched. Column letters, sheet names, function names
and operators are copied through as-is.
"""

import string
from dataclasses import dataclass
from typing import ClassVar

from .cell_value import CellType

ABSOLUTE_MARKER = "$"


@dataclass(frozen=True)
class UnsupportedMove:
    """Result of a translation this module cannot perform.

    Returned instead of a formula string so callers have to handle it.
    """

    formula: str
    reason: str
    supported: ClassVar[bool] = False


class FormulaTranslator:
    """Shifts row references in formula text."""

    def __init__(self, absolute_marker=ABSOLUTE_MARKER):
        """Initialize the translator.

        Args:
            absolute_marker: Character that freezes the next row number
        """
        if len(absolute_marker) != 1 or absolute_marker in string.digits:
            raise ValueError(f"absolute_marker must be one non-digit character, got {absolute_marker!r}")
        self.absolute_marker = absolute_marker

    def translate(self, formula: str, move_count: int, insert_row_index: int = 0) -> str:
        """Move the row references of a formula.

        Every maximal run of digits is read as a 1-based row number. Numbers at
        or after the edit point (insert_row_index + 1) are increased by
        move_count, numbers before it are kept.

        A marker character arms a flag that keeps the next digit run verbatim.
        The flag stays armed over any non-digit characters until a run is
        consumed, so "$A1" keeps its row as well as its column.

        Args:
            formula: Formula text, with or without the leading "="
            move_count: Rows to move by (negative moves up)
            insert_row_index: 0-based row where the edit happened. The default
                of 0 shifts every unmarked reference.

        Returns:
            The translated formula
        """
        if move_count == 0:
            return formula

        parts = []
        digits = ""
        armed = False
        for ch in formula:
            if ch in string.digits:
                digits += ch
                continue
            elif ch == self.absolute_marker:
                armed = True

            if digits:
                if armed:
                    parts.append(digits)
                    armed = False
                else:
                    parts.append(self._shift_row_number(digits, move_count, insert_row_index))
                digits = ""
            parts.append(ch)

        # Formula may end in a row number
        if digits:
            if armed:
                parts.append(digits)
            else:
                parts.append(self._shift_row_number(digits, move_count, insert_row_index))

        return "".join(parts)

    def translate_by_insert(self, formula: str, move_count: int, insert_row_index: int) -> str:
        """Update a formula after move_count rows were inserted at insert_row_index.

        References above the insertion are left alone.
        """
        return self.translate(formula, move_count, insert_row_index)

    def translate_multi_axis(self, formula: str, move_row_count: int, move_col_count: int):
        """Moving rows and columns together is not implemented.

        Returns:
            UnsupportedMove; translate rows with translate() and handle columns
            separately.
        """
        return UnsupportedMove(
            formula=formula,
            reason=f"cannot move by {move_row_count} rows and {move_col_count} columns at once; "
                   f"only row moves are supported",
        )

    def update_formula(self, cell, insert_row_count: int, insert_point: int):
        """Re-translate the formula of a cell in place.

        Args:
            cell: Grid cell; cells that do not hold a formula are skipped
            insert_row_count: Number of rows inserted, the cause of the update
            insert_point: 0-based row where the rows were inserted
        """
        if cell.value_variant().kind is not CellType.FORMULA:
            return
        formula = cell.formula_text()
        if not formula or not formula.strip():
            return
        cell.set_formula_text(self.translate(formula, insert_row_count, insert_point))

    @staticmethod
    def _shift_row_number(digits, move_count, insert_row_index):
        row_num = int(digits)
        # insert_row_index is 0-based, formula rows start at 1
        if insert_row_index + 1 <= row_num:
            return str(row_num + move_count)
        return str(row_num)


default_translator = FormulaTranslator()


def move_formula(formula, move_count, insert_row_index=0):
    """Translate with the default "$" marker. See FormulaTranslator.translate."""
    return default_translator.translate(formula, move_count, insert_row_index)
