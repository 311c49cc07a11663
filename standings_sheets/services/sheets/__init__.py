"""Module for building Google Sheets requests.

Provides functions to:
- Convert column indices to A1 column letters and build cell ranges.
- Build repeatCell, updateDimensionProperties and updateCells requests.

The gspread client and the sending functions live in .client and .updater.
"""

# Public API for the sheets service

from .utils import CellRangeOptions, convert_index_to_column_name, create_cell_reference, create_cell_range_string
from .request_creator import (
    create_repeated_sheet_formula_request,
    create_repeated_number_request,
    create_checkbox_request,
    create_cell_width_request,
    create_header_row_request,
)

__all__ = [
    'CellRangeOptions',
    'convert_index_to_column_name',
    'create_cell_reference',
    'create_cell_range_string',
    'create_repeated_sheet_formula_request',
    'create_repeated_number_request',
    'create_checkbox_request',
    'create_cell_width_request',
    'create_header_row_request',
]
