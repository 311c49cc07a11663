"""Classes that create the request for one column of the standings table.

Each creator owns a single header. It resolves the column once at construction
and turns a config describing the row layout into a repeatCell request.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple

from standings_sheets.config import config as cfg
from standings_sheets.services.sheets.request_creator import (
    create_checkbox_request,
    create_repeated_number_request,
    create_repeated_sheet_formula_request,
)
from standings_sheets.services.standings.formula_generator import FormulaGenerator

logger = logging.getLogger(__name__)


class StandingsRequestCreatorConfig:
    """Row layout shared by every standings request creator.

    Attributes:
        sheet_id: The sheet (tab) ID the request applies to.
        sheet_start_row_index: 0-based index of the first row the request fills.
        start_games_row_num: 1-based row number of the first game score row
            (usually sheet_start_row_index + 1).
        row_count: Number of rows filled (the number of games or of teams).
    """

    def __init__(self, sheet_id: Optional[int], sheet_start_row_index: int, start_games_row_num: int, row_count: int):
        self.sheet_id = sheet_id
        self.sheet_start_row_index = sheet_start_row_index
        self.start_games_row_num = start_games_row_num
        self.row_count = row_count


class ScoreBasedStandingsRequestCreatorConfig(StandingsRequestCreatorConfig):
    """Row layout for columns computed from the game scores.

    Attributes:
        end_games_row_num: 1-based row number of the last game score row.
        first_teams_sheet_cell: Cell holding the first team of the division, e.g. 'Teams!A2'.
        last_round_start_row_num: 1-based row number of the first standings row of the
            previous round, 0 in round 1.
        round_counts_for_standings: False when every game this round is a scrimmage.
    """

    def __init__(self, sheet_id: Optional[int], sheet_start_row_index: int, start_games_row_num: int, row_count: int,
                 end_games_row_num: int, first_teams_sheet_cell: str, last_round_start_row_num: int = 0,
                 round_counts_for_standings: bool = True):
        super().__init__(sheet_id, sheet_start_row_index, start_games_row_num, row_count)
        self.end_games_row_num = end_games_row_num
        self.first_teams_sheet_cell = first_teams_sheet_cell
        self.last_round_start_row_num = last_round_start_row_num
        self.round_counts_for_standings = round_counts_for_standings


class StandingsRequestCreator(ABC):
    """Base class for creating the request that builds one standings table column.

    required_column_headers lists the other columns the formula reads. A creator
    can only be built when its own column and all of those are in the layout.
    """

    required_column_headers: Tuple[str, ...] = ()

    def __init__(self, formula_generator: FormulaGenerator, column_header: str):
        self._formula_generator = formula_generator
        self._column_header = column_header
        self._column_name = formula_generator.sheet_helper.get_column_name_by_header(column_header)
        if self._column_name is None:
            raise ValueError(
                f"Can't find column '{column_header}' in the collection. "
                f"Did you forget to add it to StandingsSheetHelper.header_row_columns?"
            )
        self._column_index = formula_generator.sheet_helper.get_column_index_by_header(column_header)
        missing = [header for header in self.required_column_headers
                   if formula_generator.sheet_helper.get_column_index_by_header(header) < 0]
        if missing:
            raise ValueError(f"Column '{column_header}' needs column(s) {missing}, which are not in the collection.")

    @property
    def column_header(self) -> str:
        return self._column_header

    @property
    def column_index(self) -> int:
        return self._column_index

    def is_applicable_to_column(self, column_header: str) -> bool:
        return column_header == self._column_header

    def _get_add_last_round_value_formula(self, row_num: int) -> str:
        """After round 1, adds the previous round's total for the same team (e.g. '+G3')."""
        return '' if row_num == 0 else f"+{self._column_name}{row_num}"

    @abstractmethod
    def _generate_formula(self, config: StandingsRequestCreatorConfig) -> str:
        ...

    def create_request(self, config: StandingsRequestCreatorConfig) -> Dict[str, Any]:
        """Creates a request that fills the column with a repeated formula."""
        return create_repeated_sheet_formula_request(config.sheet_id, config.sheet_start_row_index,
                                                     self._column_index, config.row_count,
                                                     self._generate_formula(config))


class ScoreBasedStandingsRequestCreator(StandingsRequestCreator):
    """Column computed from the game results (e.g. goals scored/conceded), cumulative across rounds."""

    required_column_headers = (cfg.HDR_HOME_TEAM, cfg.HDR_HOME_GOALS, cfg.HDR_AWAY_GOALS, cfg.HDR_AWAY_TEAM)

    def __init__(self, formula_generator: FormulaGenerator, column_header: str,
                 formula_generator_method: Callable[[int, int, str], str]):
        super().__init__(formula_generator, column_header)
        self._formula_generator_method = formula_generator_method

    def _generate_formula(self, config: ScoreBasedStandingsRequestCreatorConfig) -> str:
        add_last_round_value = self._get_add_last_round_value_formula(config.last_round_start_row_num)
        formula = self._formula_generator_method(config.start_games_row_num, config.end_games_row_num,
                                                 config.first_teams_sheet_cell)
        return f"={formula}{add_last_round_value}"


class ScrimmageBasedStandingsRequestCreator(ScoreBasedStandingsRequestCreator):
    """Column computed from game results where the round may be all scrimmages (e.g. games played, wins)."""

    def create_request(self, config: ScoreBasedStandingsRequestCreatorConfig) -> Dict[str, Any]:
        if config.round_counts_for_standings:
            return super().create_request(config)

        if config.last_round_start_row_num == 0:
            # Games don't count for standings, enter a zero
            logger.debug(f"Round doesn't count for standings, writing 0 to column '{self._column_header}'")
            return create_repeated_number_request(config.sheet_id, config.sheet_start_row_index,
                                                  self._column_index, config.row_count, 0)

        # Keep the previous round's total unchanged
        logger.debug(f"Round doesn't count for standings, carrying column '{self._column_header}' forward")
        return create_repeated_sheet_formula_request(config.sheet_id, config.sheet_start_row_index,
                                                     self._column_index, config.row_count,
                                                     f"={self._column_name}{config.last_round_start_row_num}")


class GameWinnerRequestCreator(StandingsRequestCreator):
    """Column for which team won each game."""

    required_column_headers = (cfg.HDR_HOME_GOALS, cfg.HDR_AWAY_GOALS)

    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_WINNING_TEAM)

    def _generate_formula(self, config: StandingsRequestCreatorConfig) -> str:
        return self._formula_generator.get_game_winner_formula(config.start_games_row_num)


class GamesPlayedRequestCreator(ScrimmageBasedStandingsRequestCreator):
    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_GAMES_PLAYED, formula_generator.get_games_played_formula)


class GamesWonRequestCreator(ScrimmageBasedStandingsRequestCreator):
    required_column_headers = ScrimmageBasedStandingsRequestCreator.required_column_headers + (cfg.HDR_WINNING_TEAM,)

    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_NUM_WINS, formula_generator.get_games_won_formula)


class GamesLostRequestCreator(ScrimmageBasedStandingsRequestCreator):
    required_column_headers = ScrimmageBasedStandingsRequestCreator.required_column_headers + (cfg.HDR_WINNING_TEAM,)

    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_NUM_LOSSES, formula_generator.get_games_lost_formula)


class GamesDrawnRequestCreator(ScrimmageBasedStandingsRequestCreator):
    required_column_headers = ScrimmageBasedStandingsRequestCreator.required_column_headers + (cfg.HDR_WINNING_TEAM,)

    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_NUM_DRAWS, formula_generator.get_games_drawn_formula)


class GamePointsRequestCreator(StandingsRequestCreator):
    """Column for game points, 3 for a win and 1 for a draw."""

    required_column_headers = (cfg.HDR_NUM_WINS, cfg.HDR_NUM_DRAWS)

    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_GAME_PTS)

    def _generate_formula(self, config: StandingsRequestCreatorConfig) -> str:
        return self._formula_generator.get_game_points_formula(config.start_games_row_num)


class TotalPointsRequestCreator(StandingsRequestCreator):
    """Column for total points: game points plus bonus points, minus deductions."""

    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_TOTAL_PTS)

    def _generate_formula(self, config: StandingsRequestCreatorConfig) -> str:
        return self._formula_generator.get_total_points_formula(config.start_games_row_num)


class RankRequestCreator(StandingsRequestCreator):
    """Base class for rank columns. Ranks on total points over the rows of the table."""

    required_column_headers = (cfg.HDR_TOTAL_PTS,)

    def _generate_formula(self, config: StandingsRequestCreatorConfig) -> str:
        start_row_num = config.sheet_start_row_index + 1
        end_row_num = config.sheet_start_row_index + config.row_count
        return f"={self._formula_generator.get_team_rank_formula(start_row_num, end_row_num)}"


class TeamRankRequestCreator(RankRequestCreator):
    """Column for team rank. May be edited by hand after a manual tiebreaker."""

    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_RANK)


class CalculatedRankRequestCreator(RankRequestCreator):
    """Column for the rank from the formula alone, kept next to RANK when ties are broken manually."""

    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_CALC_RANK)


class GoalsScoredRequestCreator(ScoreBasedStandingsRequestCreator):
    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_GOALS_FOR, formula_generator.get_goals_scored_formula)


class GoalsAgainstRequestCreator(ScoreBasedStandingsRequestCreator):
    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_GOALS_AGAINST, formula_generator.get_goals_against_formula)


class GoalDifferentialRequestCreator(StandingsRequestCreator):
    required_column_headers = (cfg.HDR_GOALS_FOR, cfg.HDR_GOALS_AGAINST)

    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_GOAL_DIFF)

    def _generate_formula(self, config: StandingsRequestCreatorConfig) -> str:
        return self._formula_generator.get_goal_differential_formula(config.start_games_row_num)


class CheckboxRequestCreator(StandingsRequestCreator):
    """Base class for columns of checkboxes rather than formulas."""

    def _generate_formula(self, config: StandingsRequestCreatorConfig) -> str:
        """Unused, create_request writes checkboxes instead of a formula."""
        raise NotImplementedError(f"Column '{self._column_header}' holds checkboxes, not a formula")

    def create_request(self, config: StandingsRequestCreatorConfig) -> Dict[str, Any]:
        return create_checkbox_request(config.sheet_id, config.sheet_start_row_index,
                                       self._column_index, config.row_count)


class TiebreakerRequestCreator(CheckboxRequestCreator):
    """Column of checkboxes marking teams whose rank was decided by a manual tiebreaker."""

    def __init__(self, formula_generator: FormulaGenerator):
        super().__init__(formula_generator, cfg.HDR_TIEBREAKER)
