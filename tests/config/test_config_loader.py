import json
import os
import tempfile
import unittest
from unittest.mock import patch

# Module to test
from standings_sheets.config import config_loader


@patch('standings_sheets.config.config_loader.load_dotenv')
class TestAppConfig(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)
        config_loader._config_instance = None
        self.addCleanup(setattr, config_loader, '_config_instance', None)

    def _write_divisions(self, divisions):
        path = os.path.join(self.tmp_dir.name, "division_configs.json")
        with open(path, 'w') as f:
            json.dump(divisions, f)
        return path

    def _env(self, division_path, **extra):
        env = {"SERVICE_ACCOUNT_JSON": '{"type": "service_account"}', "DIVISION_CONFIG_PATH": division_path}
        env.update(extra)
        return patch.dict(os.environ, env, clear=True)

    def test_load_divisions(self, mock_dotenv):
        path = self._write_divisions([
            {"division_name": "U10 Girls", "google_sheet_id": "abc", "num_teams": 8},
            {"division_name": "U12 Boys", "google_sheet_id": "def", "worksheet_name": "Scores",
             "teams_sheet_cell": "Teams!B2", "num_teams": "6", "games_per_round": 2},
        ])
        with self._env(path):
            cfg = config_loader.get_config()

        mock_dotenv.assert_called_once()
        self.assertEqual(cfg.service_account_json_string, '{"type": "service_account"}')
        self.assertEqual(len(cfg.division_configs), 2)
        self.assertEqual(cfg.get_division_config("U10 Girls"), {
            "division_name": "U10 Girls",
            "google_sheet_id": "abc",
            "worksheet_name": "Sheet1",
            "teams_sheet_cell": "Teams!A2",
            "num_teams": 8,
            "games_per_round": 4,
        })
        u12 = cfg.get_division_config("U12 Boys")
        self.assertEqual(u12["num_teams"], 6)
        self.assertEqual(u12["games_per_round"], 2)
        self.assertEqual(u12["teams_sheet_cell"], "Teams!B2")
        self.assertIsNone(cfg.get_division_config("U14"))

    def test_invalid_entries_skipped(self, mock_dotenv):
        path = self._write_divisions([
            "not an object",
            {"google_sheet_id": "abc", "num_teams": 4},  # no name
            {"division_name": "No Sheet", "num_teams": 4},
            {"division_name": "Bad Teams", "google_sheet_id": "abc", "num_teams": "many"},
            {"division_name": "One Team", "google_sheet_id": "abc", "num_teams": 1},
            {"division_name": "Good", "google_sheet_id": "abc", "num_teams": 4},
            {"division_name": "Good", "google_sheet_id": "dup", "num_teams": 4},
        ])
        with self._env(path):
            cfg = config_loader.get_config()

        self.assertEqual([d["division_name"] for d in cfg.division_configs], ["Good"])
        self.assertEqual(cfg.get_division_config("Good")["google_sheet_id"], "abc")

    def test_games_per_round_below_one_uses_default(self, mock_dotenv):
        path = self._write_divisions([
            {"division_name": "Zero", "google_sheet_id": "abc", "num_teams": 6, "games_per_round": 0},
            {"division_name": "Negative", "google_sheet_id": "def", "num_teams": 8, "games_per_round": -2},
        ])
        with self._env(path):
            cfg = config_loader.get_config()

        self.assertEqual(cfg.get_division_config("Zero")["games_per_round"], 3)
        self.assertEqual(cfg.get_division_config("Negative")["games_per_round"], 4)

    def test_credentials_from_file(self, mock_dotenv):
        sa_path = os.path.join(self.tmp_dir.name, "sa.json")
        with open(sa_path, 'w') as f:
            f.write('{"from": "file"}')
        path = self._write_divisions([])
        with patch.dict(os.environ, {"GOOGLE_APPLICATION_CREDENTIALS": sa_path, "DIVISION_CONFIG_PATH": path}, clear=True):
            cfg = config_loader.get_config()

        self.assertEqual(cfg.service_account_json_string, '{"from": "file"}')
        self.assertEqual(cfg.division_configs, [])

    def test_missing_credentials(self, mock_dotenv):
        path = self._write_divisions([])
        with patch.dict(os.environ, {"DIVISION_CONFIG_PATH": path}, clear=True):
            with self.assertRaises(ValueError):
                config_loader.get_config()
        self.assertIsNone(config_loader._config_instance)

    def test_missing_division_file(self, mock_dotenv):
        with self._env(os.path.join(self.tmp_dir.name, "missing.json")):
            with self.assertRaises(ValueError):
                config_loader.get_config()

    def test_division_file_not_a_list(self, mock_dotenv):
        path = self._write_divisions({"division_name": "U10"})
        with self._env(path):
            with self.assertRaises(ValueError):
                config_loader.get_config()

    def test_singleton(self, mock_dotenv):
        path = self._write_divisions([])
        with self._env(path):
            self.assertIs(config_loader.get_config(), config_loader.get_config())


if __name__ == '__main__':
    unittest.main()
