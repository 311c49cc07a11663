"""Standings table formulas and requests.

StandingsSheetHelper maps headers to columns, FormulaGenerator builds formula
strings from those columns, and the request creators turn formulas into
Sheets API requests for one column each.
"""

from .sheet_helper import StandingsSheetHelper
from .formula_generator import FormulaGenerator, ScoreEntryColumns
from .request_creators import StandingsRequestCreatorConfig, ScoreBasedStandingsRequestCreatorConfig
from .factory import StandingsRequestCreatorFactory, create_default_factory
from .rounds import RoundLayout, build_round_requests

__all__ = [
    'StandingsSheetHelper',
    'FormulaGenerator',
    'ScoreEntryColumns',
    'StandingsRequestCreatorConfig',
    'ScoreBasedStandingsRequestCreatorConfig',
    'StandingsRequestCreatorFactory',
    'create_default_factory',
    'RoundLayout',
    'build_round_requests',
]
