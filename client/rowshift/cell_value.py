"""
Cell Values
Tagged cell value shared by every grid implementation and the copy logic.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


class CellType(Enum):
    """Which variant of a cell value is active."""

    TEXT = "text"
    BOOLEAN = "boolean"
    NUMBER = "number"
    DATE = "date"
    ERROR = "error"
    FORMULA = "formula"
    BLANK = "blank"
    # Anything a grid cannot express with the variants above
    # (array formulas, rich objects, ...).
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class CellValue:
    """A cell's value together with the variant it belongs to.

    Formula values hold the formula text without the leading "=".
    """

    kind: CellType
    value: Any = None

    @classmethod
    def text(cls, value):
        return cls(CellType.TEXT, str(value))

    @classmethod
    def boolean(cls, value):
        return cls(CellType.BOOLEAN, bool(value))

    @classmethod
    def number(cls, value):
        return cls(CellType.NUMBER, float(value))

    @classmethod
    def date(cls, value):
        return cls(CellType.DATE, value)

    @classmethod
    def error(cls, code):
        return cls(CellType.ERROR, code)

    @classmethod
    def formula(cls, text):
        return cls(CellType.FORMULA, text)

    @classmethod
    def blank(cls):
        return cls(CellType.BLANK)

    @classmethod
    def unsupported(cls, raw):
        return cls(CellType.UNSUPPORTED, raw)

    @property
    def is_formula(self):
        return self.kind is CellType.FORMULA

    @property
    def is_blank(self):
        return self.kind is CellType.BLANK

    @classmethod
    def from_python(cls, value):
        """Classify a native Python value.

        Args:
            value: bool, number, date/datetime or any other object

        Returns:
            CellValue, or None when value is None
        """
        if value is None:
            return None
        # bool is an int subclass, so it has to be checked first
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, (int, float, Decimal)):
            return cls.number(value)
        if isinstance(value, (datetime, date)):
            return cls.date(value)
        return cls.text(value)


def write_value(cell, cell_value: CellValue) -> bool:
    """Write a CellValue through a cell's per-variant setters.

    Returns:
        False if the variant has no setter (blank or unsupported), True otherwise
    """
    kind = cell_value.kind
    if kind is CellType.TEXT:
        cell.set_text(cell_value.value)
    elif kind is CellType.BOOLEAN:
        cell.set_boolean(cell_value.value)
    elif kind is CellType.NUMBER:
        cell.set_number(cell_value.value)
    elif kind is CellType.DATE:
        cell.set_date(cell_value.value)
    elif kind is CellType.ERROR:
        cell.set_error(cell_value.value)
    elif kind is CellType.FORMULA:
        cell.set_formula_text(cell_value.value)
    else:
        return False
    return True


def set_cell_value(cell, value):
    """Set a native Python value on a cell, picking the matching setter.

    None leaves the cell untouched.
    """
    cell_value = CellValue.from_python(value)
    if cell_value is None:
        return
    write_value(cell, cell_value)
