"""conversion between the display scale (r, rd) and the internal Glicko2 scale (mu, phi)"""
from glocko2.utils.constants import BASE_RATING, SCALE


def scale(r, rd):
    """
    Transforms a rating and deviation into Glicko2 units. Works on floats and numpy arrays.
    rd is expected to be non-negative, this is not checked.
    """
    mu = (r - BASE_RATING) / SCALE
    phi = rd / SCALE
    return mu, phi


def unscale(mu, phi):
    """the inverse of scale"""
    r = SCALE * mu + BASE_RATING
    rd = SCALE * phi
    return r, rd
