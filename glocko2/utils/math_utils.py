"""math utility functions for rating systems"""
import math
from scipy.special import expit


def sigmoid(x):
    """a little faster than implementing it in numpy for d < 100000"""
    return expit(x)


def sigmoid_scalar(x):
    """no need to use numpy on scalars"""
    return 1.0 / (1.0 + math.exp(-x))


def sign(x):
    """-1.0, 0.0 or 1.0, unlike math.copysign this keeps zero at zero"""
    if x < 0.0:
        return -1.0
    elif x > 0.0:
        return 1.0
    return 0.0
