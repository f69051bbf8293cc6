"""
rowshift command line

Usage:
    rowshift translate "SUM(A1:A10)" --move 2
    rowshift insert-row book.xlsx --row 4 --template 3
    rowshift move-rows book.xlsx --start 5 --count 2 --output moved.xlsx
    rowshift copy-row book.xlsx --source 2 --target 9

Row numbers on the command line are 1-based, like the row headers of a
spreadsheet application.
"""

import argparse
import logging
import sys

import openpyxl

from .cell_copier import CellCopier
from .formula_translator import FormulaTranslator
from .logger import logger, set_level
from .openpyxl_grid import WorksheetGrid
from .row_copier import RowCopier
from .row_shift import RowShiftOrchestrator
from .settings import AppSettings
from .version import __version__


def build_parser():
    parser = argparse.ArgumentParser(
        prog="rowshift",
        description="Copy, insert and move spreadsheet rows while keeping formula references correct",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    translate = subparsers.add_parser("translate", help="Print a formula with its row references moved")
    translate.add_argument("formula", help="Formula text, with or without the leading '='")
    translate.add_argument("--move", type=int, required=True, help="Rows to move by")
    translate.add_argument("--insert-row", type=int, default=1,
                           help="1-based row where the edit happened (default: 1, move everything)")

    def add_file_args(sub):
        sub.add_argument("file", help="Path to an .xlsx workbook")
        sub.add_argument("--sheet", help="Worksheet name (default: active sheet)")
        sub.add_argument("--output", "-o", help="Where to save (default: overwrite the input)")

    insert = subparsers.add_parser("insert-row", help="Insert rows filled from a template row")
    add_file_args(insert)
    insert.add_argument("--row", type=int, required=True, help="1-based row to insert at")
    insert.add_argument("--template", type=int, required=True, help="1-based template row")
    insert.add_argument("--count", type=int, default=1, help="Number of rows to insert")

    move = subparsers.add_parser("move-rows", help="Move a row and everything below it down")
    add_file_args(move)
    move.add_argument("--start", type=int, required=True, help="1-based first row to move")
    move.add_argument("--count", type=int, required=True, help="Rows to move down by")
    move.add_argument("--insert-point", type=int, default=None,
                      help="1-based row whose insertion caused the move")

    copy_row = subparsers.add_parser("copy-row", help="Copy one row onto another")
    add_file_args(copy_row)
    copy_row.add_argument("--source", type=int, required=True, help="1-based source row")
    copy_row.add_argument("--target", type=int, required=True, help="1-based target row")

    return parser


def _load_grid(args):
    workbook = openpyxl.load_workbook(args.file)
    worksheet = workbook[args.sheet] if args.sheet else workbook.active
    return workbook, WorksheetGrid(worksheet)


def run(args, settings=None):
    """Execute a parsed command. Returns the process exit code."""
    if settings is None:
        settings = AppSettings()
    translator = FormulaTranslator(settings.get_absolute_marker())

    if args.command == "translate":
        print(translator.translate(args.formula, args.move, args.insert_row - 1))
        return 0

    try:
        workbook, grid = _load_grid(args)
    except (OSError, KeyError, ValueError) as e:
        logger.error(f"Failed to load {args.file}: {e}")
        return 1

    orchestrator = RowShiftOrchestrator.from_settings(settings)

    if args.command == "insert-row":
        template = grid.get_row(args.template - 1)
        if template is None:
            logger.error(f"Template row {args.template} is empty")
            return 1
        orchestrator.insert_rows(grid, template, args.row - 1, args.count)
    elif args.command == "move-rows":
        insert_point = args.insert_point - 1 if args.insert_point is not None else None
        orchestrator.move_rows(grid, args.start - 1, args.count, insert_point)
    elif args.command == "copy-row":
        source = grid.get_row(args.source - 1)
        if source is None:
            logger.error(f"Source row {args.source} is empty")
            return 1
        target = grid.get_row(args.target - 1) or grid.create_row(args.target - 1)
        RowCopier(CellCopier(translator)).copy_row(source, target)

    output = args.output or args.file
    try:
        workbook.save(output)
    except OSError as e:
        logger.error(f"Failed to save {output}: {e}")
        return 1

    logger.info(f"Saved {output}")
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
