"""Weng/Lin Bayesian Online Rating system, Bradley Terry Edition, for ranked teams"""
import logging
import math
from typing import List, Sequence
import numpy as np
from bbt.core.base import TeamRatingSystem
from bbt.core.errors import ConfigurationInvalid, EmptyTeam, MismatchedTeamCount
from bbt.core.rating import Rating
from bbt.utils.constants import (
    DEFAULT_POINT_CENTER,
    DEFAULT_VARIANCE_FACTOR,
    DRAW_SCORE,
    KAPPA,
    LOSS_SCORE,
    WIN_SCORE,
)
from bbt.utils.math_utils import clip_scalar, sigmoid, sigmoid_scalar

logger = logging.getLogger(__name__)


class BradleyTerryRater(TeamRatingSystem):
    """
    The Bayesian Online Rating System introduced by Weng and Lin using the Bradley-Terry model
    with full pairing, every team is compared against every other team in the match.

    Attributes:
        point_center (float): center of the rating scale, also the mu of a new competitor
        variance_factor (float): beta, how much of a rank gap is explained by luck rather than skill
        max_points (float): upper bound for mu, 2 * point_center
        beta_sq (float): variance_factor squared
    """

    def __init__(
        self,
        point_center: float = DEFAULT_POINT_CENTER,
        variance_factor: float = DEFAULT_VARIANCE_FACTOR,
        update_method: str = 'iterative',
    ):
        if variance_factor > point_center:
            raise ConfigurationInvalid(variance_factor, point_center)
        self.point_center = point_center
        self.variance_factor = variance_factor
        self.max_points = 2.0 * point_center
        self.beta_sq = variance_factor**2.0
        self.two_beta_sq = 2.0 * self.beta_sq

        if update_method == 'iterative':
            self._update = self.iterative_update
        elif update_method == 'vectorized':
            self._update = self.vectorized_update
        else:
            raise ValueError(f'Got unsupported update_method: {update_method}')
        self.update_method = update_method

    def initial_rating(self) -> Rating:
        return Rating(mu=self.point_center, sigma=self.point_center / 3.0)

    def update_ratings(self, teams: Sequence[Sequence[Rating]], ranks: Sequence[float]) -> List[List[Rating]]:
        if len(teams) != len(ranks):
            raise MismatchedTeamCount(len(teams), len(ranks))
        for team_idx, team in enumerate(teams):
            if len(team) == 0:
                raise EmptyTeam(team_idx)
        logger.debug('rating match of %d teams, %d players', len(teams), sum(len(team) for team in teams))
        return self._update(teams, ranks)

    @staticmethod
    def score(rank, other_rank) -> float:
        """observed score of a team against another, lower rank is better"""
        if other_rank > rank:
            return WIN_SCORE
        elif other_rank == rank:
            return DRAW_SCORE
        else:
            return LOSS_SCORE

    def iterative_update(self, teams, ranks):
        """loop over every ordered pair of teams, no numpy overhead which suits small matches"""
        num_teams = len(teams)
        team_mus = [0.0] * num_teams
        team_sigma_sqs = [0.0] * num_teams
        team_omegas = [0.0] * num_teams
        team_deltas = [0.0] * num_teams

        # collect team skill and variance
        for team_idx, team in enumerate(teams):
            for player in team:
                team_mus[team_idx] += player.mu
                team_sigma_sqs[team_idx] += player.sigma_sq

        # accumulate the mean (omega) and variance (delta) updates of each team over all opponents
        for i in range(num_teams):
            for j in range(num_teams):
                if i == j:
                    continue
                combined_sigma_sq = team_sigma_sqs[i] + team_sigma_sqs[j] + self.two_beta_sq
                combined_dev = math.sqrt(combined_sigma_sq)
                # same as exp(mu_i / c) / (exp(mu_i / c) + exp(mu_j / c))
                prob = sigmoid_scalar((team_mus[i] - team_mus[j]) / combined_dev)
                outcome = self.score(ranks[i], ranks[j])

                team_omegas[i] += (team_sigma_sqs[i] / combined_dev) * (outcome - prob)
                gamma = math.sqrt(team_sigma_sqs[i]) / combined_dev
                team_deltas[i] += gamma * (team_sigma_sqs[i] / combined_sigma_sq) * prob * (1.0 - prob)

        # split each team update across its players in proportion to their variance
        new_teams = []
        for team_idx, team in enumerate(teams):
            new_team = []
            for player in team:
                weight = player.sigma_sq / team_sigma_sqs[team_idx]
                new_mu = clip_scalar(player.mu + weight * team_omegas[team_idx], 0.0, self.max_points)
                sigma_multiplier = max(1.0 - weight * team_deltas[team_idx], KAPPA)
                new_sigma = math.sqrt(player.sigma_sq * sigma_multiplier)
                new_team.append(Rating(mu=new_mu, sigma=new_sigma))
            new_teams.append(new_team)
        return new_teams

    def vectorized_update(self, teams, ranks):
        """compute all pairwise comparisons at once with numpy broadcasting, suits matches with many teams"""
        num_teams = len(teams)
        if num_teams == 0:
            return []
        team_sizes = np.array([len(team) for team in teams], dtype=np.int64)
        mus = np.array([player.mu for team in teams for player in team], dtype=np.float64)
        sigma_sqs = np.array([player.sigma_sq for team in teams for player in team], dtype=np.float64)
        team_idxs = np.repeat(np.arange(num_teams), team_sizes)

        team_mus = np.bincount(team_idxs, weights=mus, minlength=num_teams)
        team_sigma_sqs = np.bincount(team_idxs, weights=sigma_sqs, minlength=num_teams)

        combined_sigma_sqs = team_sigma_sqs[:, None] + team_sigma_sqs[None, :] + self.two_beta_sq
        combined_devs = np.sqrt(combined_sigma_sqs)
        probs = sigmoid((team_mus[:, None] - team_mus[None, :]) / combined_devs)
        # ranks are compared as given, a float cast would merge large distinct integer ranks
        outcomes = np.array(
            [[self.score(rank, other_rank) for other_rank in ranks] for rank in ranks],
            dtype=np.float64,
        )

        omegas = (team_sigma_sqs[:, None] / combined_devs) * (outcomes - probs)
        gammas = np.sqrt(team_sigma_sqs)[:, None] / combined_devs
        deltas = gammas * (team_sigma_sqs[:, None] / combined_sigma_sqs) * probs * (1.0 - probs)
        # a team is never compared against itself
        np.fill_diagonal(omegas, 0.0)
        np.fill_diagonal(deltas, 0.0)
        team_omegas = omegas.sum(axis=1)
        team_deltas = deltas.sum(axis=1)

        weights = sigma_sqs / team_sigma_sqs[team_idxs]
        new_mus = np.clip(mus + weights * team_omegas[team_idxs], 0.0, self.max_points)
        sigma_multipliers = np.maximum(1.0 - weights * team_deltas[team_idxs], KAPPA)
        new_sigmas = np.sqrt(sigma_sqs * sigma_multipliers)

        new_teams = []
        offset = 0
        for team_size in team_sizes:
            new_teams.append(
                [
                    Rating(mu=float(new_mus[idx]), sigma=float(new_sigmas[idx]))
                    for idx in range(offset, offset + team_size)
                ]
            )
            offset += team_size
        return new_teams

    def predict(self, teams: Sequence[Sequence[Rating]]) -> np.ndarray:
        team_mus = np.array([sum(player.mu for player in team) for team in teams], dtype=np.float64)
        team_sigma_sqs = np.array([sum(player.sigma_sq for player in team) for team in teams], dtype=np.float64)
        combined_devs = np.sqrt(team_sigma_sqs[:, None] + team_sigma_sqs[None, :] + self.two_beta_sq)
        probs = sigmoid((team_mus[:, None] - team_mus[None, :]) / combined_devs)
        np.fill_diagonal(probs, 0.5)
        return probs


Rater = BradleyTerryRater
