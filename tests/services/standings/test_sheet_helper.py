import unittest

# Module to test
from standings_sheets.config import config
from standings_sheets.services.standings.sheet_helper import StandingsSheetHelper


class TestStandingsSheetHelper(unittest.TestCase):

    def setUp(self):
        self.helper = StandingsSheetHelper.from_standings_columns(config.DEFAULT_STANDINGS_TABLE_COLUMNS)

    def test_from_standings_columns_layout(self):
        """Game score columns come first, then the standings table."""
        self.assertEqual(self.helper.header_row_columns[:5], config.GAME_SCORE_COLUMN_HEADERS)
        self.assertEqual(self.helper.header_row_columns[5:], config.DEFAULT_STANDINGS_TABLE_COLUMNS)
        self.assertEqual(self.helper.standings_table_columns, config.DEFAULT_STANDINGS_TABLE_COLUMNS)

    def test_get_column_index_by_header(self):
        self.assertEqual(self.helper.get_column_index_by_header(config.HDR_HOME_TEAM), 0)
        self.assertEqual(self.helper.get_column_index_by_header(config.HDR_GOAL_DIFF), 16)

    def test_get_column_index_by_header_missing(self):
        self.assertEqual(self.helper.get_column_index_by_header(config.HDR_YELLOW_CARDS), -1)

    def test_get_column_name_by_header(self):
        self.assertEqual(self.helper.get_column_name_by_header(config.HDR_HOME_TEAM), 'A')
        self.assertEqual(self.helper.get_column_name_by_header(config.HDR_TOTAL_PTS), 'M')
        self.assertIsNone(self.helper.get_column_name_by_header(config.HDR_TIEBREAKER))

    def test_named_column_properties(self):
        expected = {
            'home_team_column_name': 'A',
            'home_goals_column_name': 'B',
            'away_goals_column_name': 'C',
            'away_team_column_name': 'D',
            'winner_column_name': 'E',
            'team_name_column_name': 'F',
            'games_played_column_name': 'G',
            'num_wins_column_name': 'H',
            'num_losses_column_name': 'I',
            'num_draws_column_name': 'J',
            'game_points_column_name': 'K',
            'total_points_column_name': 'M',
            'rank_column_name': 'N',
            'goals_for_column_name': 'O',
            'goals_against_column_name': 'P',
            'goal_differential_column_name': 'Q',
        }
        for prop, col in expected.items():
            with self.subTest(prop=prop):
                self.assertEqual(getattr(self.helper, prop), col)

    def test_columns_past_z(self):
        """Layouts wider than 26 columns use two-letter column names."""
        headers = [f"X{i}" for i in range(27)] + [config.HDR_RANK]
        helper = StandingsSheetHelper(headers, [config.HDR_RANK])
        self.assertEqual(helper.rank_column_name, 'AB')

    def test_create_cell_width_requests(self):
        requests = self.helper.create_cell_width_requests(sheet_id=42, team_name_column_width=140)

        self.assertEqual(len(requests), len(self.helper.header_row_columns))
        widths = {}
        for request in requests:
            props = request['updateDimensionProperties']
            self.assertEqual(props['range']['sheetId'], 42)
            self.assertEqual(props['range']['dimension'], 'COLUMNS')
            self.assertEqual(props['range']['endIndex'], props['range']['startIndex'] + 1)
            widths[self.helper.header_row_columns[props['range']['startIndex']]] = props['properties']['pixelSize']

        self.assertEqual(widths[config.HDR_HOME_TEAM], 140)
        self.assertEqual(widths[config.HDR_AWAY_TEAM], 140)
        self.assertEqual(widths[config.HDR_TEAM_NAME], 140)
        self.assertEqual(widths[config.HDR_WINNING_TEAM], config.WIDTH_WINNING_TEAM_COL)
        self.assertEqual(widths[config.HDR_TOTAL_PTS], config.WIDTH_WIDE_NUM_COL)
        self.assertEqual(widths[config.HDR_RANK], config.WIDTH_WIDE_NUM_COL)
        self.assertEqual(widths[config.HDR_GAMES_PLAYED], config.WIDTH_NUM_COL)
        self.assertEqual(widths[config.HDR_HOME_GOALS], config.WIDTH_NUM_COL)


if __name__ == '__main__':
    unittest.main()
