"""constants shared by the rating models, computed once here to avoid recomputation"""

# default rating scale
DEFAULT_POINT_CENTER = 25.0
DEFAULT_VARIANCE_FACTOR = DEFAULT_POINT_CENTER / 6.0
DEFAULT_MU = DEFAULT_POINT_CENTER
DEFAULT_SIGMA = DEFAULT_POINT_CENTER / 3.0

# floor on the multiplicative variance update so sigma never collapses to zero
KAPPA = 0.0001

# number of standard deviations subtracted for the conservative ordinal
ORDINAL_Z = 3.0

# score awarded to the first team of a comparison
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0
