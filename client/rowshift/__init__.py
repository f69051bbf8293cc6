# rowshift package
# Row copy/insert/move for spreadsheet grids with formula reference updates

from .version import __version__
from .cell_value import CellType, CellValue, set_cell_value
from .formula_translator import FormulaTranslator, UnsupportedMove, move_formula
from .cell_copier import CellCopier
from .row_copier import RowCopier
from .grid import Cell, Grid, Row
from .row_shift import RowShiftOrchestrator
from .settings import AppSettings

__all__ = [
    "__version__",
    "AppSettings",
    "CellCopier",
    "CellType",
    "CellValue",
    "Cell",
    "Grid",
    "Row",
    "FormulaTranslator",
    "RowCopier",
    "RowShiftOrchestrator",
    "UnsupportedMove",
    "move_formula",
    "set_cell_value",
]
