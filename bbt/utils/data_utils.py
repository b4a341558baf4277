"""Classes for working with sequences of multi-team matches"""

from typing import Iterable, List, Sequence, Tuple
import polars as pl
from bbt.core.errors import EmptyTeam, MismatchedTeamCount


Match = Tuple[Tuple[Tuple[str, ...], ...], Tuple[float, ...]]


class MatchDataset:
    """Ordered collection of matches, each one a tuple of teams of competitor ids and a tuple of ranks."""

    def __init__(
        self,
        df: pl.DataFrame,
        match_col: str,
        team_col: str,
        competitor_col: str,
        rank_col: str,
        verbose: bool = True,
    ):
        """
        Build from a long format dataframe with one row per competitor per match.
        Matches keep the order in which they first appear, as do teams within a match.
        The rank of a team is taken from its first row.
        """
        matches_df = (
            df.lazy()
            .select([
                pl.col(match_col).alias('match'),
                pl.col(team_col).alias('team'),
                pl.col(competitor_col).cast(pl.Utf8).alias('competitor'),
                pl.col(rank_col).alias('rank'),
            ])
            .group_by(['match', 'team'], maintain_order=True)
            .agg([pl.col('competitor'), pl.col('rank').first()])
            .group_by('match', maintain_order=True)
            .agg([pl.col('competitor').alias('teams'), pl.col('rank').alias('ranks')])
            .collect()
        )
        matches = zip(matches_df['teams'].to_list(), matches_df['ranks'].to_list())
        self._init_matches(matches)

        if verbose:
            self._print_stats()

    def _init_matches(self, matches: Iterable[Tuple[Sequence[Sequence[str]], Sequence[float]]]):
        self.matches: List[Match] = []
        for teams, ranks in matches:
            if len(teams) != len(ranks):
                raise MismatchedTeamCount(len(teams), len(ranks))
            for team_idx, team in enumerate(teams):
                if len(team) == 0:
                    raise EmptyTeam(team_idx)
            self.matches.append((tuple(tuple(team) for team in teams), tuple(ranks)))

        self.competitors = sorted({comp for teams, _ in self.matches for team in teams for comp in team})
        self.num_competitors = len(self.competitors)

    def _print_stats(self):
        print('Loaded dataset with:')
        print(f'{len(self)} matches')
        print(f'{self.num_competitors} unique competitors')

    def __len__(self):
        return len(self.matches)

    def __iter__(self):
        return iter(self.matches)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self.init_from_records(self.matches[key])
        raise ValueError('Only slice indexing supported')

    @classmethod
    def init_from_records(cls, matches: Iterable[Tuple[Sequence[Sequence[str]], Sequence[float]]]):
        """Factory method for creating datasets from (teams, ranks) pairs."""
        dataset = cls.__new__(cls)
        dataset._init_matches(matches)
        return dataset
