"""Generates the formulas used by the standings table.

Row numbers are 1-based sheet row numbers. The counting and goals formulas
leave out the leading '=' so tournament sheets can combine several of them;
the request creators add it.
"""

from typing import Optional

from standings_sheets.config import config
from standings_sheets.services.sheets.utils import CellRangeOptions, create_cell_range_string, create_cell_reference
from standings_sheets.services.standings.sheet_helper import StandingsSheetHelper


class ScoreEntryColumns:
    """Column letters of the game score entry columns."""

    def __init__(self, home_team_column_name: str, home_goals_column_name: str,
                 away_goals_column_name: str, away_team_column_name: str):
        self.home_team_column_name = home_team_column_name
        self.home_goals_column_name = home_goals_column_name
        self.away_goals_column_name = away_goals_column_name
        self.away_team_column_name = away_team_column_name


class FormulaGenerator:
    """Builds formula strings from the column layout of a StandingsSheetHelper."""

    def __init__(self, sheet_helper: StandingsSheetHelper):
        self.sheet_helper = sheet_helper

    def get_game_winner_formula(self, row_num: int) -> str:
        """Formula for who won the game on row_num.

        Blank if either score is blank, otherwise H for a home win, A for an away win
        and D for a draw, e.g.
        =IFS(OR(ISBLANK(B3), ISBLANK(C3)), "", B3>C3, "H", B3<C3, "A", B3=C3, "D")
        """
        home_goals_cell = create_cell_reference(self.sheet_helper.home_goals_column_name, row_num)
        away_goals_cell = create_cell_reference(self.sheet_helper.away_goals_column_name, row_num)
        return (
            f'=IFS(OR(ISBLANK({home_goals_cell}), ISBLANK({away_goals_cell})), "", '
            f'{home_goals_cell}>{away_goals_cell}, "{config.HOME_TEAM_INDICATOR}", '
            f'{home_goals_cell}<{away_goals_cell}, "{config.AWAY_TEAM_INDICATOR}", '
            f'{home_goals_cell}={away_goals_cell}, "{config.DRAW_INDICATOR}")'
        )

    def get_games_played_formula(self, start_row_num: int, end_row_num: int, first_team_cell: str) -> str:
        """Number of games played: appearances in the home or away column where a score has been entered.

        COUNTIFS(A$21:A$28,"="&Teams!A2,B$21:B$28,"<>")+COUNTIFS(D$21:D$28,"="&Teams!A2,C$21:C$28,"<>")
        """
        home_team = self._get_formula_for_game_range_per_team(self.sheet_helper.home_team_column_name, start_row_num, end_row_num, first_team_cell)
        away_team = self._get_formula_for_game_range_per_team(self.sheet_helper.away_team_column_name, start_row_num, end_row_num, first_team_cell)
        home_score = self._get_formula_for_ignoring_blank_scores(self.sheet_helper.home_goals_column_name, start_row_num, end_row_num)
        away_score = self._get_formula_for_ignoring_blank_scores(self.sheet_helper.away_goals_column_name, start_row_num, end_row_num)
        return f"COUNTIFS({home_team},{home_score})+COUNTIFS({away_team},{away_score})"

    def get_games_won_formula(self, start_row_num: int, end_row_num: int, first_team_cell: str) -> str:
        """Home games with winner H plus away games with winner A."""
        return self._get_result_count_formula(start_row_num, end_row_num, first_team_cell,
                                              config.HOME_TEAM_INDICATOR, config.AWAY_TEAM_INDICATOR)

    def get_games_lost_formula(self, start_row_num: int, end_row_num: int, first_team_cell: str) -> str:
        """Home games with winner A plus away games with winner H."""
        return self._get_result_count_formula(start_row_num, end_row_num, first_team_cell,
                                              config.AWAY_TEAM_INDICATOR, config.HOME_TEAM_INDICATOR)

    def get_games_drawn_formula(self, start_row_num: int, end_row_num: int, first_team_cell: str) -> str:
        return self._get_result_count_formula(start_row_num, end_row_num, first_team_cell,
                                              config.DRAW_INDICATOR, config.DRAW_INDICATOR)

    def get_game_points_formula(self, row_num: int) -> str:
        """Game points: 3 for a win, 1 for a draw, e.g. =(H3*3) + J3"""
        pts_from_wins = f"{create_cell_reference(self.sheet_helper.num_wins_column_name, row_num)}*{config.POINTS_PER_WIN}"
        pts_from_draws = create_cell_reference(self.sheet_helper.num_draws_column_name, row_num)
        return f"=({pts_from_wins}) + {pts_from_draws}"

    def get_total_points_formula(self, row_num: int) -> str:
        """Game points plus whichever bonus point columns the sheet has, minus deductions, e.g. =K3+L3"""
        added = [config.HDR_GAME_PTS, config.HDR_REF_PTS, config.HDR_VOL_PTS, config.HDR_SPORTSMANSHIP_PTS]
        terms = [f"+{create_cell_reference(name, row_num)}"
                 for name in map(self.sheet_helper.get_column_name_by_header, added) if name is not None]
        deduction_column_name = self.sheet_helper.get_column_name_by_header(config.HDR_PTS_DEDUCTION)
        if deduction_column_name is not None:
            terms.append(f"-{create_cell_reference(deduction_column_name, row_num)}")
        if not terms:
            raise ValueError(f"Total points needs at least the '{config.HDR_GAME_PTS}' column")
        return f"={''.join(terms).lstrip('+')}"

    def get_team_rank_formula(self, start_row_num: int, end_row_num: int,
                              row_num: Optional[int] = None, column_name: Optional[str] = None) -> str:
        """Team rank within the standings table, e.g. RANK(M3,M$3:M$18)

        Args:
            start_row_num: Row number of the first team in the standings table.
            end_row_num: Row number of the last team in the standings table.
            row_num: Row of the team the formula is for. Defaults to start_row_num,
                which is what a repeated formula needs.
            column_name: Column holding the value to rank on. Defaults to total points.
        """
        if row_num is None:
            row_num = start_row_num
        if column_name is None:
            column_name = self.sheet_helper.total_points_column_name
        cell_range = create_cell_range_string(column_name, start_row_num, end_row_num, CellRangeOptions.FIX_ROW)
        return f"RANK({create_cell_reference(column_name, row_num)},{cell_range})"

    def get_goals_scored_formula(self, start_row_num: int, end_row_num: int, first_team_cell: str) -> str:
        """Goals scored: home goals where the team was home plus away goals where it was away.

        SUMIFS(B$21:B$28, A$21:A$28,"="&Teams!A2)+SUMIFS(C$21:C$28, D$21:D$28,"="&Teams!A2)
        """
        return self.get_goals_formula(self._score_entry_columns(), start_row_num, end_row_num, first_team_cell, True)

    def get_goals_against_formula(self, start_row_num: int, end_row_num: int, first_team_cell: str) -> str:
        """Goals conceded: same as goals scored with the goal columns swapped."""
        return self.get_goals_formula(self._score_entry_columns(), start_row_num, end_row_num, first_team_cell, False)

    def get_goals_formula(self, score_entry_columns: ScoreEntryColumns, start_row_num: int, end_row_num: int,
                          first_team_cell: str, goals_for: bool) -> str:
        """Goals scored (goals_for=True) or conceded (goals_for=False) using explicit score columns."""
        home_goals_range = create_cell_range_string(score_entry_columns.home_goals_column_name, start_row_num, end_row_num, CellRangeOptions.FIX_ROW)
        away_goals_range = create_cell_range_string(score_entry_columns.away_goals_column_name, start_row_num, end_row_num, CellRangeOptions.FIX_ROW)
        home_teams = self._get_formula_for_game_range_per_team(score_entry_columns.home_team_column_name, start_row_num, end_row_num, first_team_cell)
        away_teams = self._get_formula_for_game_range_per_team(score_entry_columns.away_team_column_name, start_row_num, end_row_num, first_team_cell)

        home_goals = f"{home_goals_range if goals_for else away_goals_range}, {home_teams}"
        away_goals = f"{away_goals_range if goals_for else home_goals_range}, {away_teams}"
        return f"SUMIFS({home_goals})+SUMIFS({away_goals})"

    def get_goal_differential_formula(self, row_num: int) -> str:
        """Goals for minus goals against, e.g. =O3 - P3"""
        gf_cell = create_cell_reference(self.sheet_helper.goals_for_column_name, row_num)
        ga_cell = create_cell_reference(self.sheet_helper.goals_against_column_name, row_num)
        return f"={gf_cell} - {ga_cell}"

    def _score_entry_columns(self) -> ScoreEntryColumns:
        return ScoreEntryColumns(
            home_team_column_name=self.sheet_helper.home_team_column_name,
            home_goals_column_name=self.sheet_helper.home_goals_column_name,
            away_goals_column_name=self.sheet_helper.away_goals_column_name,
            away_team_column_name=self.sheet_helper.away_team_column_name,
        )

    def _get_result_count_formula(self, start_row_num: int, end_row_num: int, first_team_cell: str,
                                  home_indicator: str, away_indicator: str) -> str:
        """COUNTIFS(A$21:A$28,"="&Teams!A2,E$21:E$28,"H")+COUNTIFS(D$21:D$28,"="&Teams!A2,E$21:E$28,"A")"""
        home_team = self._get_formula_for_game_range_per_team(self.sheet_helper.home_team_column_name, start_row_num, end_row_num, first_team_cell)
        away_team = self._get_formula_for_game_range_per_team(self.sheet_helper.away_team_column_name, start_row_num, end_row_num, first_team_cell)
        winner_range = create_cell_range_string(self.sheet_helper.winner_column_name, start_row_num, end_row_num, CellRangeOptions.FIX_ROW)
        return (
            f'COUNTIFS({home_team},{winner_range},"{home_indicator}")'
            f'+COUNTIFS({away_team},{winner_range},"{away_indicator}")'
        )

    def _get_formula_for_game_range_per_team(self, column_name: str, start_row_num: int, end_row_num: int,
                                             first_team_cell: str) -> str:
        cell_range = create_cell_range_string(column_name, start_row_num, end_row_num, CellRangeOptions.FIX_ROW)
        return f'{cell_range},"="&{first_team_cell}' # A$21:A$28,"="&Teams!A2

    def _get_formula_for_ignoring_blank_scores(self, column_name: str, start_row_num: int, end_row_num: int) -> str:
        cell_range = create_cell_range_string(column_name, start_row_num, end_row_num, CellRangeOptions.FIX_ROW)
        return f'{cell_range},"<>"' # B$21:B$28,"<>"
