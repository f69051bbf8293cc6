"""
Row Copier
Copies a whole row (height and cells) into another row.
"""

from typing import Optional

from .cell_copier import CellCopier
from .grid import Row


class RowCopier:
    """Copies rows cell by cell through a CellCopier."""

    def __init__(self, cell_copier: CellCopier = None):
        self.cell_copier = cell_copier or CellCopier()

    def copy_row(self, source: Row, target: Optional[Row]):
        """Copy height and every populated cell of source into target.

        Target cells are created as needed. Columns without a source cell are
        left as they are in target.

        Args:
            source: Row to copy from
            target: Row to copy to; nothing happens when it is None
        """
        if target is None:
            return

        target.height = source.height
        for col in range(source.last_column_index() + 1):
            source_cell = source.get_cell(col)
            if source_cell is None:
                continue
            target_cell = target.get_cell(col)
            if target_cell is None:
                target_cell = target.create_cell(col)
            self.cell_copier.copy(source_cell, target_cell)
