import json
import unittest
from unittest.mock import patch, MagicMock
import gspread # Import for exceptions
import requests

# Module to test
from standings_sheets.services.sheets import client


class TestSheetsClient(unittest.TestCase):

    def setUp(self):
        # Reset the module level singletons between tests
        client._gspread_client = None
        client._worksheet_cache.clear()

    def tearDown(self):
        client._gspread_client = None
        client._worksheet_cache.clear()

    @patch('standings_sheets.services.sheets.client.gspread.authorize')
    @patch('standings_sheets.services.sheets.client.service_account.Credentials.from_service_account_info')
    @patch('standings_sheets.services.sheets.client.get_config')
    def test_get_gspread_client_authorizes_once(self, mock_get_config, mock_from_info, mock_authorize):
        mock_get_config.return_value.service_account_json_string = json.dumps({"type": "service_account"})

        first = client._get_gspread_client()
        second = client._get_gspread_client()

        self.assertIs(first, second)
        mock_from_info.assert_called_once_with({"type": "service_account"}, scopes=client.SCOPES)
        mock_authorize.assert_called_once_with(mock_from_info.return_value)

    @patch('standings_sheets.services.sheets.client.get_config')
    def test_get_gspread_client_invalid_json(self, mock_get_config):
        mock_get_config.return_value.service_account_json_string = "{not json"

        with self.assertRaises(ValueError):
            client._get_gspread_client()
        self.assertIsNone(client._gspread_client)

    @patch('standings_sheets.services.sheets.client._get_gspread_client')
    def test_get_worksheet_cached(self, mock_get_client):
        mock_ws = MagicMock()
        mock_get_client.return_value.open_by_key.return_value.worksheet.return_value = mock_ws

        self.assertIs(client._get_worksheet("sheet_id", "Scores"), mock_ws)
        self.assertIs(client._get_worksheet("sheet_id", "Scores"), mock_ws)

        mock_get_client.return_value.open_by_key.assert_called_once_with("sheet_id")
        mock_get_client.return_value.open_by_key.return_value.worksheet.assert_called_once_with("Scores")

    @patch('standings_sheets.services.sheets.client._get_gspread_client')
    def test_get_worksheet_not_found(self, mock_get_client):
        mock_get_client.return_value.open_by_key.return_value.worksheet.side_effect = gspread.exceptions.WorksheetNotFound("Scores")

        self.assertIsNone(client._get_worksheet("sheet_id", "Scores"))
        self.assertNotIn(("sheet_id", "Scores"), client._worksheet_cache)

    @patch('standings_sheets.services.sheets.client._get_gspread_client')
    def test_get_worksheet_api_error(self, mock_get_client):
        mock_response = MagicMock(spec=requests.Response)
        mock_response.status_code = 403
        mock_get_client.return_value.open_by_key.side_effect = gspread.exceptions.APIError(mock_response)

        self.assertIsNone(client._get_worksheet("sheet_id", "Scores"))


if __name__ == '__main__':
    unittest.main()
