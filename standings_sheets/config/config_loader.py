import os
import logging
import json
from typing import Optional, List, Dict, Any
import threading # For singleton lock

from dotenv import load_dotenv

from .config import DEFAULT_TEAMS_SHEET_CELL

logger = logging.getLogger(__name__)

# Singleton instance and lock
_config_instance = None
_config_lock = threading.Lock()

# Default path for the division config file if env var is not set
DEFAULT_DIVISION_CONFIG_PATH = "division_configs.json"


class AppConfig:
    """Holds the application configuration, loaded once as a singleton."""
    def __init__(self):
        logger.debug("Initializing AppConfig instance...")

        # --- Shared Configuration ---
        self.service_account_json_string: Optional[str] = None

        # --- Per-Division Configuration ---
        self.division_configs: List[Dict[str, Any]] = []
        self._division_config_map: Dict[str, Dict[str, Any]] = {} # For quick lookup by name

    def _load_shared_config(self):
        """Loads the service account credentials shared by every division."""
        # Priority: GOOGLE_APPLICATION_CREDENTIALS file path, then SERVICE_ACCOUNT_JSON env var
        gac_path = os.environ.get("GOOGLE_APPLICATION_CREDENTIALS")
        sa_json_env = os.environ.get("SERVICE_ACCOUNT_JSON")

        if gac_path:
            logger.info(f"GOOGLE_APPLICATION_CREDENTIALS path found: {gac_path}")
            try:
                with open(gac_path, 'r') as f:
                    self.service_account_json_string = f.read()
                logger.info(f"Successfully loaded service account JSON from file: {gac_path}")
            except FileNotFoundError:
                logger.error(f"Service account file specified by GOOGLE_APPLICATION_CREDENTIALS not found: {gac_path}")
                raise ValueError(f"Service account file not found: {gac_path}")
            except OSError as e:
                logger.error(f"Error reading service account file {gac_path}: {e}", exc_info=True)
                raise ValueError(f"Error reading service account file: {gac_path}") from e
        elif sa_json_env:
            logger.info("Using SERVICE_ACCOUNT_JSON environment variable for service account key.")
            self.service_account_json_string = sa_json_env
        else:
            logger.error("Service Account credentials not found. Set either GOOGLE_APPLICATION_CREDENTIALS (path) or SERVICE_ACCOUNT_JSON (content) environment variable.")
            raise ValueError("Service Account credentials are required")

        if not self.service_account_json_string:
            logger.error("Failed to load service account JSON string.")
            raise ValueError("Service Account JSON string is missing or empty.")

        logger.info("Shared configuration loaded (Service Account)")

    def _load_division_configs(self):
        """Loads the list of division configurations from a JSON file."""
        config_path = os.environ.get("DIVISION_CONFIG_PATH", DEFAULT_DIVISION_CONFIG_PATH)
        logger.info(f"Attempting to load division configurations from: {config_path}")

        try:
            with open(config_path, 'r') as f:
                raw_configs = json.load(f)
        except FileNotFoundError:
            logger.error(f"Division configuration file not found at: {config_path}")
            raise ValueError(f"Division configuration file not found: {config_path}")
        except json.JSONDecodeError as e:
            logger.error(f"Error decoding JSON from division config file {config_path}: {e}")
            raise ValueError(f"Invalid JSON in division configuration file: {config_path}")

        if not isinstance(raw_configs, list):
            logger.error(f"Division configuration file {config_path} should contain a JSON list (array). Found: {type(raw_configs)}")
            raise ValueError("Division configuration must be a JSON list.")

        self.division_configs = []
        self._division_config_map = {}

        for i, cfg_dict in enumerate(raw_configs):
            valid_config = self._validate_division_config(i, cfg_dict)
            if valid_config is None:
                continue
            name = valid_config["division_name"]
            if name in self._division_config_map:
                logger.warning(f"Duplicate division_name '{name}' (index {i}). Skipping duplicate entry.")
                continue
            self.division_configs.append(valid_config)
            self._division_config_map[name] = valid_config
            logger.info(f"Loaded config for division '{name}' (Sheet: {valid_config['google_sheet_id']}, Teams: {valid_config['num_teams']})")

        if not self.division_configs:
            logger.warning(f"No valid division configurations loaded from {config_path}. The application might not function.")
        else:
            logger.info(f"Successfully loaded {len(self.division_configs)} division configurations.")

    @staticmethod
    def _validate_division_config(i: int, cfg_dict: Any) -> Optional[Dict[str, Any]]:
        """Returns the normalized config for one division, or None if it must be skipped."""
        if not isinstance(cfg_dict, dict):
            logger.warning(f"Item at index {i} in division configs is not a JSON object, skipping.")
            return None

        name = cfg_dict.get("division_name")
        sheet_id = cfg_dict.get("google_sheet_id")
        worksheet_name = cfg_dict.get("worksheet_name", "Sheet1")
        teams_sheet_cell = cfg_dict.get("teams_sheet_cell", DEFAULT_TEAMS_SHEET_CELL)

        if not name or not isinstance(name, str):
            logger.warning(f"Division config at index {i} is missing required 'division_name'. Skipping.")
            return None
        if not sheet_id:
            logger.warning(f"Division config '{name}' (index {i}) is missing required 'google_sheet_id'. Skipping.")
            return None
        if not isinstance(worksheet_name, str) or not worksheet_name:
            logger.warning(f"Division config '{name}' (index {i}) has invalid 'worksheet_name'. Using default 'Sheet1'.")
            worksheet_name = "Sheet1"

        try:
            num_teams = int(cfg_dict.get("num_teams"))
        except (ValueError, TypeError):
            logger.warning(f"Division config '{name}' (index {i}) has missing or invalid 'num_teams'. Skipping.")
            return None
        if num_teams < 2:
            logger.warning(f"Division config '{name}' (index {i}) needs at least 2 teams, got {num_teams}. Skipping.")
            return None

        games_per_round = cfg_dict.get("games_per_round", num_teams // 2)
        try:
            games_per_round = int(games_per_round)
        except (ValueError, TypeError):
            logger.warning(f"Division config '{name}' (index {i}) has invalid 'games_per_round'. Using {num_teams // 2}.")
            games_per_round = num_teams // 2
        if games_per_round < 1:
            logger.warning(f"Division config '{name}' (index {i}) needs at least 1 game per round, got {games_per_round}. Using {num_teams // 2}.")
            games_per_round = num_teams // 2

        return {
            "division_name": name,
            "google_sheet_id": sheet_id,
            "worksheet_name": worksheet_name,
            "teams_sheet_cell": teams_sheet_cell,
            "num_teams": num_teams,
            "games_per_round": games_per_round,
        }

    def load(self):
        """Load all configurations (shared and per-division)."""
        logger.info("Loading application configuration...")
        load_dotenv() # Local development with a .env file
        self._load_shared_config()
        self._load_division_configs()
        logger.info("Configuration loading complete.")

    def get_division_config(self, division_name: str) -> Optional[Dict[str, Any]]:
        """Retrieves a division's configuration by name."""
        return self._division_config_map.get(division_name)


def get_config() -> AppConfig:
    """Gets the singleton AppConfig instance, loading it on first call."""
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            # Double-check locking
            if _config_instance is None:
                logger.info("Creating and loading singleton AppConfig instance.")
                temp_instance = AppConfig()
                try:
                    temp_instance.load()
                    _config_instance = temp_instance
                except Exception as e:
                    logger.critical(f"Failed to load configuration during singleton creation: {e}", exc_info=True)
                    # Prevent partially configured singleton from being assigned
                    raise

    if _config_instance is None:
        logger.critical("Configuration instance is None after attempting initialization.")
        raise RuntimeError("Application configuration could not be initialized.")

    return _config_instance
