"""value types describing a single player's skill belief and two player outcomes"""
from dataclasses import dataclass, field
from enum import Enum
from bbt.utils.constants import DEFAULT_MU, DEFAULT_SIGMA, ORDINAL_Z


@dataclass(frozen=True)
class Rating:
    """
    Immutable Gaussian skill belief for one player.

    Attributes:
        mu (float): mean skill estimate
        sigma (float): standard deviation of the skill estimate, callers must supply sigma > 0.
                       A zero or negative sigma is not checked here and shows up as nan/inf
                       in any rater that consumes the rating.
        sigma_sq (float): sigma squared, derived once at construction and never settable
    """

    mu: float = DEFAULT_MU
    sigma: float = DEFAULT_SIGMA
    sigma_sq: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'sigma_sq', self.sigma**2.0)

    @classmethod
    def from_max_points(cls, max_points: float):
        """default prior for an unrated player on a scale of [0, max_points]"""
        return cls(mu=max_points / 2.0, sigma=max_points / 3.0)

    def ordinal(self, z: float = ORDINAL_Z) -> float:
        """conservative skill estimate mu - z * sigma"""
        return self.mu - z * self.sigma

    def __str__(self):
        return f'Rating(mu: {self.mu}, sigma: {self.sigma}, sigma_sq: {self.sigma_sq})'


class Outcome(Enum):
    """result of a two player match from the perspective of the first player"""

    WIN = 'win'
    LOSS = 'loss'
    DRAW = 'draw'

    @property
    def ranks(self):
        """ranks for [first player, second player], lower is better"""
        return _OUTCOME_RANKS[self]


_OUTCOME_RANKS = {
    Outcome.WIN: (1, 2),
    Outcome.LOSS: (2, 1),
    Outcome.DRAW: (1, 1),
}
