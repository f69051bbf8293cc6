"""
Cell Copier
Copies value, style, comment and formula from one grid cell to another.
"""

from typing import Optional

from .cell_value import CellType
from .formula_translator import FormulaTranslator, default_translator
from .grid import Cell
from .logger import logger


class CellCopier:
    """Copies single cells, moving formula references with the copy."""

    def __init__(self, translator: FormulaTranslator = None):
        self.translator = translator or default_translator

    def copy(self, source: Cell, target: Optional[Cell]):
        """Copy a cell the way a spreadsheet copy/paste does.

        Style and comment are shared with the source, not duplicated. Formula
        row references move by the row distance between the two cells.

        Args:
            source: Cell to copy from
            target: Cell to copy to; nothing happens when it is None
        """
        if target is None:
            return

        comment = source.comment_ref()
        if comment is not None:
            target.set_comment_ref(comment)
        target.set_style_ref(source.style_ref())

        self.copy_value(source, target)

    def copy_value(self, source: Cell, target: Cell):
        """Copy the cell value, picking the setter for the source's variant.

        Unsupported variants are logged and skipped.
        """
        cell_value = source.value_variant()
        kind = cell_value.kind

        if kind is CellType.TEXT:
            target.set_text(cell_value.value)
        elif kind is CellType.BOOLEAN:
            target.set_boolean(cell_value.value)
        elif kind is CellType.NUMBER or kind is CellType.DATE:
            # The grid decides through number formats whether a number is a date
            if kind is CellType.DATE or source.is_date_formatted():
                target.set_date(cell_value.value)
            else:
                target.set_number(cell_value.value)
        elif kind is CellType.ERROR:
            target.set_error(cell_value.value)
        elif kind is CellType.BLANK:
            pass
        elif kind is CellType.FORMULA:
            self.copy_formula(source, target)
        else:
            logger.error(f"Cannot copy value of type {kind.value} from row {source.row_index()}")

    def copy_formula(self, source: Cell, target: Cell):
        """Copy a formula, moving its row references by the copy distance.

        Every reference is shifted (drag-copy semantics), except the ones
        frozen with the absolute marker.
        """
        if source.value_variant().kind is not CellType.FORMULA:
            return
        formula = source.formula_text()
        if not formula or not formula.strip():
            return

        move_count = target.row_index() - source.row_index()
        target.set_formula_text(self.translator.translate(formula, move_count))
