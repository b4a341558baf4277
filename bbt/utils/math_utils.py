"""math utility functions for rating systems"""
import math
from scipy.special import expit


def sigmoid(x):
    """a little faster than implementing it in numpy for d < 100000"""
    return expit(x)


def sigmoid_scalar(x):
    """no need to use numpy on scalars"""
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    # mirrored form so math.exp never overflows for very negative inputs
    z = math.exp(x)
    return z / (1.0 + z)


def clip_scalar(x, low, high):
    """clamp a float into [low, high]"""
    if x < low:
        return low
    if x > high:
        return high
    return x
