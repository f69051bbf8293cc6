"""
Row Shifting
Inserts and moves rows on a grid and corrects the formulas of the rows that
moved.

The grid does the physical move (rows keep their content, formula text is
left as it was). This module rewrites the formula text afterwards.
"""

from .cell_copier import CellCopier
from .cell_value import CellType
from .formula_translator import FormulaTranslator, default_translator
from .grid import Grid, Row
from .logger import logger
from .row_copier import RowCopier


class RowShiftOrchestrator:
    """Row insert/move operations with formula reference updates."""

    def __init__(self, translator: FormulaTranslator = None, row_copier: RowCopier = None,
                 default_row_height=None):
        """Initialize the orchestrator.

        Args:
            translator: FormulaTranslator used after moves (default "$" marker)
            row_copier: RowCopier used to fill inserted rows
            default_row_height: Height for inserted rows whose template has none
        """
        self.translator = translator or default_translator
        self.row_copier = row_copier or RowCopier()
        self.default_row_height = default_row_height

    @classmethod
    def from_settings(cls, app_settings):
        """Build an orchestrator from AppSettings (absolute marker, row height)."""
        translator = FormulaTranslator(app_settings.get_absolute_marker())
        row_copier = RowCopier(CellCopier(translator))
        return cls(translator, row_copier, app_settings.get_default_row_height())

    def insert_row(self, sheet: Grid, template_row: Row, row_index: int):
        """Insert one row at row_index filled from template_row.

        Rows from row_index down are pushed down by one. The template's
        formulas are copied with their references moved by the distance
        between the template and the new row.
        """
        self.insert_rows(sheet, template_row, row_index, 1)

    def insert_rows(self, sheet: Grid, template_row: Row, row_index: int, row_count: int):
        """Insert row_count rows at row_index, each filled from template_row.

        Args:
            sheet: Grid to edit
            template_row: Row whose content and style is copied into new rows
            row_index: 0-based index of the first inserted row
            row_count: Number of rows to insert; non-positive does nothing
        """
        if row_count <= 0:
            logger.debug(f"insert_rows called with row_count={row_count}, nothing to do")
            return

        last_row = sheet.row_count() - 1
        if last_row >= row_index:
            sheet.shift_rows(row_index, last_row, row_count)

        for index in range(row_index, row_index + row_count):
            new_row = sheet.get_row(index)
            if new_row is None:
                new_row = sheet.create_row(index)
            self.row_copier.copy_row(template_row, new_row)
            if new_row.height is None and self.default_row_height is not None:
                new_row.height = self.default_row_height

        logger.info(f"Inserted {row_count} row(s) at row {row_index + 1}")

    def move_rows(self, sheet: Grid, start_row_index: int, move_count: int, insert_point: int = None):
        """Move a row and every row below it down by move_count.

        After the move, formulas in the moved rows are rewritten: references
        to rows after insert_point + 1 (0-based) grow by move_count, earlier
        references stay.

        Args:
            sheet: Grid to edit
            start_row_index: 0-based first row to move
            move_count: Rows to move down by; non-positive does nothing
            insert_point: 0-based row whose insertion caused the move. Defaults
                to start_row_index - move_count - 1; negative values become 0.
        """
        if move_count <= 0:
            logger.debug(f"move_rows called with move_count={move_count}, nothing to do")
            return

        if insert_point is None:
            insert_point = start_row_index - move_count - 1
        insert_point = insert_point if insert_point > 0 else 0

        last_row = sheet.row_count() - 1
        if last_row < start_row_index:
            logger.debug(f"move_rows: no rows from row {start_row_index + 1} down, nothing to do")
            return
        sheet.shift_rows(start_row_index, last_row, move_count)

        # Range the rows landed in
        first_moved = start_row_index + move_count
        last_moved = last_row + move_count

        updated = 0
        for index in range(first_moved, last_moved + 1):
            row = sheet.get_row(index)
            if row is None:
                continue
            for col in range(row.last_column_index() + 1):
                cell = row.get_cell(col)
                if cell is None or cell.value_variant().kind is not CellType.FORMULA:
                    continue
                # The move already happened, so the edit point is one row further down
                self.translator.update_formula(cell, move_count, insert_point + 1)
                updated += 1

        logger.info(
            f"Moved rows {start_row_index + 1}-{last_row + 1} down by {move_count}, "
            f"updated {updated} formula(s)"
        )
