import unittest
from unittest.mock import patch

# Module to test
from standings_sheets import app


@patch('standings_sheets.app.update_round')
class TestApp(unittest.TestCase):

    def test_main_success(self, mock_update_round):
        mock_update_round.return_value = True

        self.assertEqual(app.main(["U12 Boys", "3"]), 0)
        mock_update_round.assert_called_once_with("U12 Boys", 3, round_counts_for_standings=True,
                                                  team_name_column_width=None)

    def test_main_scrimmage_with_widths(self, mock_update_round):
        mock_update_round.return_value = True

        self.assertEqual(app.main(["U12 Boys", "1", "--scrimmage", "--team-name-width", "140"]), 0)
        mock_update_round.assert_called_once_with("U12 Boys", 1, round_counts_for_standings=False,
                                                  team_name_column_width=140)

    def test_main_failure(self, mock_update_round):
        mock_update_round.return_value = False

        self.assertEqual(app.main(["U12 Boys", "2"]), 1)


@patch('standings_sheets.services.sheets.updater._get_worksheet')
@patch('standings_sheets.services.sheets.updater.get_config')
class TestAppFailures(unittest.TestCase):

    def test_main_missing_credentials(self, mock_get_config, mock_get_ws):
        mock_get_config.side_effect = ValueError("Service Account credentials are required")

        self.assertEqual(app.main(["U12 Boys", "1"]), 1)
        mock_get_ws.assert_not_called()

    def test_main_round_zero(self, mock_get_config, mock_get_ws):
        mock_get_config.return_value.get_division_config.return_value = {
            "division_name": "U12 Boys",
            "google_sheet_id": "sheet_id",
            "worksheet_name": "Scores",
            "teams_sheet_cell": "Teams!A2",
            "num_teams": 6,
            "games_per_round": 3,
        }

        self.assertEqual(app.main(["U12 Boys", "0"]), 1)
        mock_get_ws.return_value.spreadsheet.batch_update.assert_not_called()


if __name__ == '__main__':
    unittest.main()
