"""Maps standings header names to sheet column indices and letters."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from standings_sheets.config import config
from standings_sheets.services.sheets.request_creator import create_cell_width_request
from standings_sheets.services.sheets.utils import convert_index_to_column_name

logger = logging.getLogger(__name__)


class StandingsSheetHelper:
    """Holds the header layout of a scores and standings sheet.

    header_row_columns is every column in sheet order (game score columns first),
    standings_table_columns is the subset that makes up the standings table.
    """

    def __init__(self, header_columns: Iterable[str], standings_table_columns: Iterable[str]):
        self.header_row_columns: List[str] = list(header_columns)
        self.standings_table_columns: List[str] = list(standings_table_columns)

    @classmethod
    def from_standings_columns(cls, standings_table_columns: Iterable[str],
                               game_score_columns: Iterable[str] = config.GAME_SCORE_COLUMN_HEADERS) -> 'StandingsSheetHelper':
        """Lays the standings table out directly to the right of the game score columns."""
        standings_table_columns = list(standings_table_columns)
        return cls(list(game_score_columns) + standings_table_columns, standings_table_columns)

    def get_column_index_by_header(self, col_header: str) -> int:
        """Gets the 0-based column index for a header, or -1 if the column isn't used."""
        try:
            return self.header_row_columns.index(col_header)
        except ValueError:
            return -1

    def get_column_name_by_header(self, col_header: str) -> Optional[str]:
        """Gets the column letter(s) for a header (HOME -> 'A'), or None if the column isn't used."""
        idx = self.get_column_index_by_header(col_header)
        if idx == -1:
            return None
        return convert_index_to_column_name(idx)

    @property
    def home_team_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_HOME_TEAM)

    @property
    def home_goals_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_HOME_GOALS)

    @property
    def away_goals_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_AWAY_GOALS)

    @property
    def away_team_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_AWAY_TEAM)

    @property
    def team_name_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_TEAM_NAME)

    @property
    def games_played_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_GAMES_PLAYED)

    @property
    def num_wins_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_NUM_WINS)

    @property
    def num_losses_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_NUM_LOSSES)

    @property
    def num_draws_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_NUM_DRAWS)

    @property
    def game_points_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_GAME_PTS)

    @property
    def total_points_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_TOTAL_PTS)

    @property
    def rank_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_RANK)

    @property
    def winner_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_WINNING_TEAM)

    @property
    def goals_for_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_GOALS_FOR)

    @property
    def goals_against_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_GOALS_AGAINST)

    @property
    def goal_differential_column_name(self) -> Optional[str]:
        return self.get_column_name_by_header(config.HDR_GOAL_DIFF)

    def create_cell_width_requests(self, sheet_id: Optional[int], team_name_column_width: int) -> List[Dict[str, Any]]:
        """Creates requests to resize every column of the scores and standings sheet.

        Args:
            sheet_id: The sheet (tab) ID, not the spreadsheet ID.
            team_name_column_width: Width for the team name columns. Depends on the
                longest team name, so the caller measures it.

        Returns:
            One updateDimensionProperties request per header column.
        """
        requests = []
        for col_idx, header in enumerate(self.header_row_columns):
            if header in config.TEAM_NAME_WIDTH_HEADERS:
                col_width = team_name_column_width
            elif header == config.HDR_WINNING_TEAM:
                col_width = config.WIDTH_WINNING_TEAM_COL
            elif header in config.WIDE_NUM_WIDTH_HEADERS:
                col_width = config.WIDTH_WIDE_NUM_COL
            else:
                # Columns that only hold numbers
                col_width = config.WIDTH_NUM_COL
            requests.append(create_cell_width_request(sheet_id, col_width, col_idx))
        logger.debug(f"Prepared {len(requests)} column width request(s) for sheet {sheet_id}")
        return requests
