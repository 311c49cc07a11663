"""Lays out weekly rounds on the scores and standings sheet and builds their requests.

Each round is a block of rows: one header row, then the game scores and the
standings table side by side, then ROUND_OFFSET_STANDINGS_TABLE blank rows
before the next round. Standings values are cumulative, so every round after
the first adds the previous round's row for the same team.
"""

import logging
from typing import Any, Dict, List, Optional

from standings_sheets.config import config
from standings_sheets.services.sheets.request_creator import (
    create_header_row_request,
    create_repeated_sheet_formula_request,
)
from standings_sheets.services.standings.factory import StandingsRequestCreatorFactory
from standings_sheets.services.standings.request_creators import ScoreBasedStandingsRequestCreatorConfig
from standings_sheets.services.standings.sheet_helper import StandingsSheetHelper

logger = logging.getLogger(__name__)


class RoundLayout:
    """Row positions of each round for a division. Rounds are numbered from 1."""

    def __init__(self, num_teams: int, games_per_round: Optional[int] = None):
        if num_teams < 2:
            raise ValueError(f"A division needs at least 2 teams, got {num_teams}")
        self.num_teams = num_teams
        self.games_per_round = games_per_round if games_per_round is not None else num_teams // 2
        if self.games_per_round < 1:
            raise ValueError(f"games_per_round must be at least 1, got {self.games_per_round}")

    @property
    def rows_per_round(self) -> int:
        data_rows = max(self.num_teams, self.games_per_round)
        return 1 + data_rows + config.ROUND_OFFSET_STANDINGS_TABLE

    def header_row_index(self, round_num: int) -> int:
        """0-based index of the round's header row."""
        if round_num < 1:
            raise ValueError(f"Rounds are numbered from 1, got {round_num}")
        return (round_num - 1) * self.rows_per_round

    def first_data_row_index(self, round_num: int) -> int:
        """0-based index of the round's first game and first team row."""
        return self.header_row_index(round_num) + 1

    def start_games_row_num(self, round_num: int) -> int:
        """1-based row number of the round's first game (and first team)."""
        return self.first_data_row_index(round_num) + 1

    def end_games_row_num(self, round_num: int) -> int:
        return self.start_games_row_num(round_num) + self.games_per_round - 1

    def last_round_start_row_num(self, round_num: int) -> int:
        """1-based row number of the previous round's first team row, 0 in round 1."""
        if round_num <= 1:
            return 0
        return self.start_games_row_num(round_num - 1)


def build_round_requests(sheet_helper: StandingsSheetHelper, factory: StandingsRequestCreatorFactory,
                         layout: RoundLayout, round_num: int, sheet_id: Optional[int],
                         first_teams_sheet_cell: str = config.DEFAULT_TEAMS_SHEET_CELL,
                         round_counts_for_standings: bool = True) -> List[Dict[str, Any]]:
    """Builds every request needed to set up one round of the scores and standings sheet.

    Args:
        sheet_helper: Column layout of the sheet.
        factory: Source of the request creator for each column.
        layout: Row layout of the division's rounds.
        round_num: The round to build, from 1.
        sheet_id: The sheet (tab) ID.
        first_teams_sheet_cell: Cell holding the division's first team name.
        round_counts_for_standings: False if the round is all scrimmages.

    Returns:
        The header row request, then one request per column that has a creator.
    """
    data_row_index = layout.first_data_row_index(round_num)
    start_row_num = layout.start_games_row_num(round_num)
    requests = [create_header_row_request(sheet_id, layout.header_row_index(round_num), sheet_helper.header_row_columns)]

    def _config(row_count: int) -> ScoreBasedStandingsRequestCreatorConfig:
        return ScoreBasedStandingsRequestCreatorConfig(
            sheet_id=sheet_id,
            sheet_start_row_index=data_row_index,
            start_games_row_num=start_row_num,
            row_count=row_count,
            end_games_row_num=layout.end_games_row_num(round_num),
            first_teams_sheet_cell=first_teams_sheet_cell,
            last_round_start_row_num=layout.last_round_start_row_num(round_num),
            round_counts_for_standings=round_counts_for_standings,
        )

    winner_creator = factory.get_request_creator(config.HDR_WINNING_TEAM)
    if winner_creator is not None:
        requests.append(winner_creator.create_request(_config(layout.games_per_round)))

    for header in sheet_helper.standings_table_columns:
        if header == config.HDR_TEAM_NAME:
            # Team names are pulled from the teams sheet, one per row in the same order every round
            team_col_idx = sheet_helper.get_column_index_by_header(header)
            requests.append(create_repeated_sheet_formula_request(sheet_id, data_row_index, team_col_idx,
                                                                  layout.num_teams, f"={first_teams_sheet_cell}"))
            continue
        creator = factory.get_request_creator(header)
        if creator is None:
            logger.debug(f"No request creator for column '{header}', leaving it for manual entry")
            continue
        requests.append(creator.create_request(_config(layout.num_teams)))

    logger.info(f"Built {len(requests)} request(s) for round {round_num} (counts for standings: {round_counts_for_standings})")
    return requests
