"""base class for team rating systems"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
import numpy as np
from tqdm import tqdm
from bbt.core.rating import Outcome, Rating
from bbt.utils.data_utils import MatchDataset

logger = logging.getLogger(__name__)


class TeamRatingSystem(ABC):
    """
    Base class for rating systems which update the ratings of players grouped into ranked teams.
    A rating system holds only its configuration, all match data is passed in and new ratings
    are returned, so a single instance can be shared freely.

    A match is an ordered sequence of teams, each an ordered non-empty sequence of Ratings,
    paired positionally with one rank per team. Lower ranks are better and equal ranks are ties.
    """

    @abstractmethod
    def initial_rating(self) -> Rating:
        """the prior rating for a competitor who has not played yet"""

    @abstractmethod
    def update_ratings(self, teams: Sequence[Sequence[Rating]], ranks: Sequence[float]) -> List[List[Rating]]:
        """
        Computes new ratings for every player after a single match.

        Parameters:
            teams (sequence of sequences of Rating): the players of each team
            ranks (sequence of numbers): placement of each team, lower is better and equal values tie

        Returns:
            list of lists of Rating with exactly the same shape and order as teams
        """
        raise NotImplementedError

    @abstractmethod
    def predict(self, teams: Sequence[Sequence[Rating]]) -> np.ndarray:
        """
        Pairwise win probabilities between teams.

        Returns:
            np.ndarray of shape (n,n): entry [i,j] is the probability that team i beats team j
        """
        raise NotImplementedError

    def duel(self, p1: Rating, p2: Rating, outcome: Outcome):
        """update two single player teams where outcome is from the perspective of p1"""
        new_ratings = self.update_ratings([[p1], [p2]], list(outcome.ranks))
        return new_ratings[0][0], new_ratings[1][0]

    def fit_dataset(
        self,
        dataset: MatchDataset,
        ratings: Optional[Dict[str, Rating]] = None,
        verbose: bool = False,
    ) -> Dict[str, Rating]:
        """
        Replays every match of a dataset in order.

        Parameters:
            dataset (MatchDataset): matches of competitor ids with ranks
            ratings (dict, optional): starting ratings by competitor, anyone missing starts at initial_rating()
            verbose (bool): show a progress bar

        Returns:
            dict of competitor to final Rating, the ratings argument is not modified
        """
        current = dict(ratings) if ratings else {}
        for competitor in dataset.competitors:
            if competitor not in current:
                current[competitor] = self.initial_rating()

        for team_ids, ranks in tqdm(dataset, disable=not verbose):
            teams = [[current[competitor] for competitor in team] for team in team_ids]
            new_teams = self.update_ratings(teams, ranks)
            for team, new_team in zip(team_ids, new_teams):
                for competitor, new_rating in zip(team, new_team):
                    current[competitor] = new_rating

        logger.info('replayed %d matches over %d competitors', len(dataset), len(current))
        return current

    def print_leaderboard(self, ratings: Dict[str, Rating], num_places: Optional[int] = None):
        """
        Prints the competitors sorted by their conservative ordinal rating.

        Parameters:
            ratings (dict): competitor to Rating
            num_places (int, optional): number of top places to display, defaults to all of them
        """
        ranked = sorted(ratings.items(), key=lambda item: item[1].ordinal(), reverse=True)
        if num_places is not None:
            ranked = ranked[:num_places]
        max_len = min(max([len(str(comp)) for comp in ratings] + [10]), 25)
        print(f'{"competitor": <{max_len}}\t{"mu": <12}\t{"sigma": <12}\t{"mu - (3 * sd)"}')
        for comp, rating in ranked:
            print(f'{str(comp): <{max_len}}\t{rating.mu: <12.6f}\t{rating.sigma: <12.6f}\t{rating.ordinal():.6f}')
