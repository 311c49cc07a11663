"""Configuration settings for the standings sheets."""

# --- Google Sheets Configuration ---
# Google API Scopes needed
SCOPES = [
    'https://www.googleapis.com/auth/spreadsheets',
    'https://www.googleapis.com/auth/drive.file'
]

# --- Game Result Indicators --- #
# Values written by the winner formula and matched by the counting formulas
HOME_TEAM_INDICATOR = 'H'
AWAY_TEAM_INDICATOR = 'A'
WIN_INDICATOR = 'W'
LOSS_INDICATOR = 'L'
DRAW_INDICATOR = 'D'

# --- Column Headers --- #
# Game score entry
HDR_HOME_TEAM = 'HOME'
HDR_HOME_GOALS = 'HG'
HDR_AWAY_GOALS = 'AG'
HDR_AWAY_TEAM = 'AWAY'
HDR_WINNING_TEAM = 'WINNER'

# Standings table
HDR_TEAM_NAME = 'TEAM'
HDR_TOTAL_PTS = 'TOTAL'
HDR_RANK = 'RANK'
HDR_GAMES_PLAYED = 'GP'
HDR_NUM_WINS = 'W'
HDR_NUM_LOSSES = 'L'
HDR_NUM_DRAWS = 'D'
HDR_GAME_PTS = 'PTS'
HDR_GOALS_FOR = 'GF'
HDR_GOALS_AGAINST = 'GA'
HDR_GOAL_DIFF = 'GD'

# Regular season extras
HDR_REF_PTS = 'REF'
HDR_VOL_PTS = 'VOL'
HDR_SPORTSMANSHIP_PTS = 'SPT'
HDR_PTS_DEDUCTION = 'DED'

# Tournament extras
HDR_YELLOW_CARDS = 'YC'
HDR_RED_CARDS = 'RC'
HDR_HOME_PTS = 'Pts (H)'
HDR_AWAY_PTS = 'Pts (A)'
HDR_CALC_RANK = 'C-RANK' # Rank from the formula only, ignores a manual tiebreaker
HDR_TIEBREAKER = 'TB'

# Columns for entering game scores, in sheet order
GAME_SCORE_COLUMN_HEADERS = [
    HDR_HOME_TEAM, HDR_HOME_GOALS, HDR_AWAY_GOALS, HDR_AWAY_TEAM, HDR_WINNING_TEAM
]

# Standings table used by a typical regular season sheet
DEFAULT_STANDINGS_TABLE_COLUMNS = [
    HDR_TEAM_NAME, HDR_GAMES_PLAYED, HDR_NUM_WINS, HDR_NUM_LOSSES, HDR_NUM_DRAWS,
    HDR_GAME_PTS, HDR_REF_PTS, HDR_TOTAL_PTS, HDR_RANK,
    HDR_GOALS_FOR, HDR_GOALS_AGAINST, HDR_GOAL_DIFF
]

# --- Scoring --- #
POINTS_PER_WIN = 3 # A draw is worth 1

# --- Column Widths (pixels) --- #
WIDTH_WINNING_TEAM_COL = 65
WIDTH_NUM_COL = 30
WIDTH_WIDE_NUM_COL = 50

# Headers that get the team name width
TEAM_NAME_WIDTH_HEADERS = {HDR_HOME_TEAM, HDR_AWAY_TEAM, HDR_TEAM_NAME}
# Headers slightly wider than a number column because the header text is longer
WIDE_NUM_WIDTH_HEADERS = {HDR_TOTAL_PTS, HDR_RANK, HDR_CALC_RANK, HDR_HOME_PTS, HDR_AWAY_PTS}

# --- Round Layout --- #
ROUND_OFFSET_STANDINGS_TABLE = 2 # Blank rows separating each round's block
DEFAULT_TEAMS_SHEET_CELL = 'Teams!A2'
