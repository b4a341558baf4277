"""
bbt
===

Bayesian Bradley-Terry rating updates for players competing individually or in ranked teams,
following the online rating method of Weng and Lin.
"""
from bbt.core.errors import ConfigurationInvalid, EmptyTeam, MismatchedTeamCount, RatingError
from bbt.core.rating import Outcome, Rating
from bbt.core.base import TeamRatingSystem
from bbt.models.bradley_terry import BradleyTerryRater, Rater
from bbt.utils.data_utils import MatchDataset

__all__ = [
    'BradleyTerryRater',
    'ConfigurationInvalid',
    'EmptyTeam',
    'MatchDataset',
    'MismatchedTeamCount',
    'Outcome',
    'Rater',
    'Rating',
    'RatingError',
    'TeamRatingSystem',
]
