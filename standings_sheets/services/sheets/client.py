"""Google Sheets access for the standings updater.

One gspread client is shared by every division. Worksheets are looked up once
per (spreadsheet ID, worksheet name) and kept for later rounds.
"""

import logging
import json
import threading
from typing import Optional, Dict, Tuple
import gspread
from google.oauth2 import service_account
from gspread.exceptions import APIError, SpreadsheetNotFound, WorksheetNotFound

from standings_sheets.config.config import SCOPES
from standings_sheets.config.config_loader import get_config

logger = logging.getLogger(__name__)

_gspread_client: Optional[gspread.Client] = None
_gspread_client_lock = threading.Lock()
_worksheet_cache: Dict[Tuple[str, str], gspread.Worksheet] = {}
_worksheet_cache_lock = threading.Lock()


def _load_credentials() -> service_account.Credentials:
    """Builds service account credentials from the JSON held in the app config.
    Raises:
        ValueError: If the JSON is missing or can't be parsed.
    """
    sa_json = get_config().service_account_json_string
    if not sa_json:
        logger.critical("No service account JSON in the app config")
        raise ValueError("Missing service account credentials in configuration")
    try:
        info = json.loads(sa_json)
    except json.JSONDecodeError as e:
        logger.critical(f"Service account JSON in the app config is not valid JSON: {e}")
        raise ValueError("Invalid service account JSON in configuration") from e
    return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)


def _get_gspread_client() -> gspread.Client:
    """Returns the shared gspread client, authorizing it on first use.
    Raises:
        ValueError: If the credentials are missing or invalid.
    """
    global _gspread_client
    if _gspread_client is None:
        with _gspread_client_lock:
            if _gspread_client is None:
                _gspread_client = gspread.authorize(_load_credentials())
                logger.info("Authorized gspread client")
    return _gspread_client


def _open_worksheet(sheet_id: str, worksheet_name: str) -> Optional[gspread.Worksheet]:
    """Opens a worksheet, logging why and returning None when it can't be reached."""
    try:
        return _get_gspread_client().open_by_key(sheet_id).worksheet(worksheet_name)
    except APIError as e:
        logger.error(f"Sheets API error opening '{worksheet_name}' in spreadsheet '{sheet_id}': {e}", exc_info=True)
        if e.response.status_code == 403:
            logger.error("Permission denied. Share the spreadsheet with the service account email as an editor.")
    except SpreadsheetNotFound:
        logger.error(f"Spreadsheet '{sheet_id}' not found or not shared with the service account.")
    except WorksheetNotFound:
        logger.error(f"No worksheet named '{worksheet_name}' in spreadsheet '{sheet_id}'.")
    return None


def _get_worksheet(sheet_id: str, worksheet_name: str) -> Optional[gspread.Worksheet]:
    """Gets a worksheet by spreadsheet ID and name. Lookups that fail are not cached."""
    key = (sheet_id, worksheet_name)
    with _worksheet_cache_lock:
        worksheet = _worksheet_cache.get(key)
        if worksheet is None:
            logger.info(f"Opening worksheet '{worksheet_name}' in spreadsheet '{sheet_id}'")
            worksheet = _open_worksheet(sheet_id, worksheet_name)
            if worksheet is not None:
                _worksheet_cache[key] = worksheet
        return worksheet
