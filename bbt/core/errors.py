"""exceptions raised for invalid rater configuration or malformed matches"""


class RatingError(ValueError):
    """base class for all input validation errors raised by bbt"""


class ConfigurationInvalid(RatingError):
    """the rater was constructed with a variance factor larger than the point center"""

    def __init__(self, variance_factor: float, point_center: float):
        self.variance_factor = variance_factor
        self.point_center = point_center
        super().__init__(
            f'variance_factor ({variance_factor}) must not exceed point_center ({point_center})'
        )


class EmptyTeam(RatingError):
    """one of the teams in a match has no players"""

    def __init__(self, team_idx: int):
        self.team_idx = team_idx
        super().__init__(f'team at index {team_idx} contains no players')


class MismatchedTeamCount(RatingError):
    """the number of teams and the number of ranks differ"""

    def __init__(self, num_teams: int, num_ranks: int):
        self.num_teams = num_teams
        self.num_ranks = num_ranks
        super().__init__(f'got {num_teams} teams but {num_ranks} ranks')
