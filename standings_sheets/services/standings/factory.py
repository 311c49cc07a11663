"""Factory for finding the request creator that builds a given standings column."""

import logging
from typing import Iterable, List, Optional

from standings_sheets.services.standings.formula_generator import FormulaGenerator
from standings_sheets.services.standings import request_creators as rc

logger = logging.getLogger(__name__)

# Creators that only need the formula generator, tried in this order by create_default_factory
DEFAULT_CREATOR_CLASSES = [
    rc.GameWinnerRequestCreator,
    rc.GamesPlayedRequestCreator,
    rc.GamesWonRequestCreator,
    rc.GamesLostRequestCreator,
    rc.GamesDrawnRequestCreator,
    rc.GamePointsRequestCreator,
    rc.TotalPointsRequestCreator,
    rc.TeamRankRequestCreator,
    rc.CalculatedRankRequestCreator,
    rc.GoalsScoredRequestCreator,
    rc.GoalsAgainstRequestCreator,
    rc.GoalDifferentialRequestCreator,
    rc.TiebreakerRequestCreator,
]


class StandingsRequestCreatorFactory:
    """Holds the request creators in use and picks the one applicable to a column."""

    def __init__(self, creators: Iterable[rc.StandingsRequestCreator]):
        self.creators: List[rc.StandingsRequestCreator] = list(creators)

    def get_request_creator(self, column_header: str) -> Optional[rc.StandingsRequestCreator]:
        """Gets the creator applicable to column_header, or None if there isn't one.

        Raises:
            ValueError: If more than one creator claims the column.
        """
        matches = [creator for creator in self.creators if creator.is_applicable_to_column(column_header)]
        if len(matches) > 1:
            raise ValueError(f"{len(matches)} request creators are applicable to column '{column_header}', expected at most one")
        return matches[0] if matches else None


def create_default_factory(formula_generator: FormulaGenerator) -> StandingsRequestCreatorFactory:
    """Builds a factory with every default creator whose column, and the columns it reads, exist in the sheet layout."""
    helper = formula_generator.sheet_helper
    creators = []
    for creator_class in DEFAULT_CREATOR_CLASSES:
        try:
            creators.append(creator_class(formula_generator))
        except ValueError as e:
            logger.debug(f"Skipping {creator_class.__name__} for sheet layout {helper.header_row_columns}: {e}")
    logger.info(f"Created request creator factory with {len(creators)} creator(s)")
    return StandingsRequestCreatorFactory(creators)
