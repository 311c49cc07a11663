"""Functions for sending standings requests to Google Sheets."""

import logging
from typing import Any, Dict, List, Optional

import gspread

# Project imports
from standings_sheets.config.config import DEFAULT_STANDINGS_TABLE_COLUMNS
from standings_sheets.config.config_loader import get_config
from standings_sheets.services.standings.factory import create_default_factory
from standings_sheets.services.standings.formula_generator import FormulaGenerator
from standings_sheets.services.standings.rounds import RoundLayout, build_round_requests
from standings_sheets.services.standings.sheet_helper import StandingsSheetHelper

# Local imports
from .client import _get_worksheet

logger = logging.getLogger(__name__)


def send_requests(spreadsheet: gspread.Spreadsheet, requests: List[Dict[str, Any]]) -> bool:
    """Sends the requests in a single batchUpdate call.
    Args:
        spreadsheet: The spreadsheet the requests apply to.
        requests: Request dicts as built by the request creators.
    Returns:
        True if successful, False otherwise.
    """
    if not requests:
        logger.warning("send_requests called with no requests.")
        return True # Nothing to send is success

    try:
        spreadsheet.batch_update({'requests': requests})
        logger.info(f"Successfully sent {len(requests)} request(s) to spreadsheet {spreadsheet.id}.")
        return True
    except gspread.exceptions.APIError as e:
        logger.error(f"Error sending {len(requests)} request(s) to spreadsheet {spreadsheet.id}: {e}", exc_info=True)
        return False


def update_round(division_name: str, round_num: int, round_counts_for_standings: bool = True,
                 sheet_helper: Optional[StandingsSheetHelper] = None,
                 team_name_column_width: Optional[int] = None) -> bool:
    """Builds one round of a division's scores and standings sheet and sends it.
    Args:
        division_name: Name of the division in the division config file.
        round_num: The round to build, from 1.
        round_counts_for_standings: False if every game this round is a scrimmage.
        sheet_helper: Column layout. Defaults to the regular season layout.
        team_name_column_width: If given, also resizes every column of the sheet.
    Returns:
        True if successful, False otherwise.
    """
    try:
        division_config = get_config().get_division_config(division_name)
        if not division_config:
            logger.error(f"Could not find config for division '{division_name}'")
            return False
        worksheet = _get_worksheet(division_config['google_sheet_id'], division_config['worksheet_name'])
    except (ValueError, RuntimeError) as e:
        logger.error(f"Configuration error for division '{division_name}': {e}", exc_info=True)
        return False

    if not worksheet:
        logger.error(f"Failed to get worksheet '{division_config['worksheet_name']}' for division '{division_name}'")
        return False

    if sheet_helper is None:
        sheet_helper = StandingsSheetHelper.from_standings_columns(DEFAULT_STANDINGS_TABLE_COLUMNS)
    try:
        factory = create_default_factory(FormulaGenerator(sheet_helper))
        layout = RoundLayout(division_config['num_teams'], division_config['games_per_round'])
        requests = build_round_requests(
            sheet_helper, factory, layout, round_num, worksheet.id,
            first_teams_sheet_cell=division_config['teams_sheet_cell'],
            round_counts_for_standings=round_counts_for_standings,
        )
    except ValueError as e:
        logger.error(f"Failed to build round {round_num} for division '{division_name}': {e}", exc_info=True)
        return False

    if team_name_column_width is not None:
        requests.extend(sheet_helper.create_cell_width_requests(worksheet.id, team_name_column_width))

    return send_requests(worksheet.spreadsheet, requests)
