"""Utility functions for building A1 cell references."""

import re
from enum import Enum

import gspread

_ROW_DIGITS = re.compile(r'\d+$')


class CellRangeOptions(Enum):
    """Which parts of a cell range get a '$' so they don't shift when the formula is repeated."""
    NONE = 'none'
    FIX_ROW = 'fix_row'
    FIX_COLUMN = 'fix_column'
    FIX_BOTH = 'fix_both'


def convert_index_to_column_name(col_idx_0based: int) -> str:
    """Converts a 0-based column index into its column letter(s) (0 -> 'A', 26 -> 'AA')."""
    if col_idx_0based < 0:
        raise ValueError(f"Column index must be zero or greater, got {col_idx_0based}")
    # gspread uses 1-based indexing; drop the row number from the A1 result
    cell_a1 = gspread.utils.rowcol_to_a1(1, col_idx_0based + 1)
    return _ROW_DIGITS.sub('', cell_a1)


def create_cell_reference(column_name: str, row_num: int) -> str:
    """Creates a relative cell reference, e.g. 'M3'."""
    return f"{column_name}{row_num}"


def create_cell_range_string(column_name: str, start_row_num: int, end_row_num: int,
                             options: CellRangeOptions = CellRangeOptions.NONE) -> str:
    """Creates a single-column cell range, e.g. 'A$21:A$28' when the rows are fixed."""
    col_prefix = '$' if options in (CellRangeOptions.FIX_COLUMN, CellRangeOptions.FIX_BOTH) else ''
    row_prefix = '$' if options in (CellRangeOptions.FIX_ROW, CellRangeOptions.FIX_BOTH) else ''
    start_cell = f"{col_prefix}{column_name}{row_prefix}{start_row_num}"
    end_cell = f"{col_prefix}{column_name}{row_prefix}{end_row_num}"
    return f"{start_cell}:{end_cell}"
