"""mathematical and algorithm constants computed once here to avoid recomputation"""
import math

# general math constants
PI2 = math.pi**2.0
THREE_OVER_PI_SQUARED = 3.0 / PI2

# glicko2 scale, 400 / ln(10)
SCALE = 173.7178
BASE_RATING = 1500.0

# defaults recommended in http://www.glicko.net/glicko/glicko2.pdf
DEFAULT_RD = 350.0
DEFAULT_SIGMA = 0.06
DEFAULT_TAU = 0.5

# volatility solver
EPSILON = 1e-6
MAX_ITERATIONS = 100
MAX_BRACKET_STEPS = 10_000
