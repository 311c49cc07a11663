"""Builders for Sheets API v4 batchUpdate requests.

Each function returns a plain dict in the shape the API expects, ready to be
collected into ``{"requests": [...]}`` and sent with ``Spreadsheet.batch_update``.
"""

import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


def _grid_range(sheet_id: Optional[int], start_row_index: int, row_count: int, column_index: int) -> Dict[str, int]:
    """Single-column GridRange covering row_count rows from start_row_index (0-based, end exclusive)."""
    grid_range = {
        'startRowIndex': start_row_index,
        'endRowIndex': start_row_index + row_count,
        'startColumnIndex': column_index,
        'endColumnIndex': column_index + 1,
    }
    # An omitted sheetId means the first sheet
    if sheet_id is not None:
        grid_range['sheetId'] = sheet_id
    return grid_range


def _repeat_cell(grid_range: Dict[str, int], cell: Dict[str, Any], fields: str) -> Dict[str, Any]:
    return {
        'repeatCell': {
            'range': grid_range,
            'cell': cell,
            'fields': fields,
        }
    }


def create_repeated_sheet_formula_request(sheet_id: Optional[int], start_row_index: int, column_index: int,
                                          row_count: int, formula: str) -> Dict[str, Any]:
    """Repeats a formula down a column. Relative references shift per row as in a sheet fill-down."""
    logger.debug(f"Repeating formula over {row_count} row(s) from row index {start_row_index}, column {column_index}: {formula}")
    return _repeat_cell(
        _grid_range(sheet_id, start_row_index, row_count, column_index),
        {'userEnteredValue': {'formulaValue': formula}},
        'userEnteredValue',
    )


def create_repeated_number_request(sheet_id: Optional[int], start_row_index: int, column_index: int,
                                   row_count: int, value: float = 0) -> Dict[str, Any]:
    """Writes the same number into every cell of a column range."""
    return _repeat_cell(
        _grid_range(sheet_id, start_row_index, row_count, column_index),
        {'userEnteredValue': {'numberValue': value}},
        'userEnteredValue',
    )


def create_checkbox_request(sheet_id: Optional[int], start_row_index: int, column_index: int,
                            row_count: int) -> Dict[str, Any]:
    """Turns a column range into unchecked checkboxes.

    The value is set explicitly; a checkbox left empty sorts unpredictably.
    """
    return _repeat_cell(
        _grid_range(sheet_id, start_row_index, row_count, column_index),
        {
            'dataValidation': {'condition': {'type': 'BOOLEAN'}},
            'userEnteredValue': {'boolValue': False},
        },
        'dataValidation,userEnteredValue',
    )


def create_cell_width_request(sheet_id: Optional[int], width: int, column_index: int) -> Dict[str, Any]:
    """Sets the pixel width of a single column."""
    dimension_range = {
        'dimension': 'COLUMNS',
        'startIndex': column_index,
        'endIndex': column_index + 1,
    }
    if sheet_id is not None:
        dimension_range['sheetId'] = sheet_id
    return {
        'updateDimensionProperties': {
            'range': dimension_range,
            'properties': {'pixelSize': width},
            'fields': 'pixelSize',
        }
    }


def create_header_row_request(sheet_id: Optional[int], row_index: int, headers: List[str],
                              start_column_index: int = 0) -> Dict[str, Any]:
    """Writes header strings across a single row."""
    start = {'rowIndex': row_index, 'columnIndex': start_column_index}
    if sheet_id is not None:
        start['sheetId'] = sheet_id
    return {
        'updateCells': {
            'start': start,
            'rows': [{'values': [{'userEnteredValue': {'stringValue': header}} for header in headers]}],
            'fields': 'userEnteredValue',
        }
    }
