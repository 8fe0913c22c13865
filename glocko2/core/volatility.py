"""
Step 5 of http://www.glicko.net/glicko/glicko2.pdf, the new volatility sigma'

sigma' is exp(x / 2) where x is the root of volatility_f. The root is bracketed first and then
narrowed with a false position method: every iteration halves the bracket and takes an accelerated
step from the midpoint, so neither endpoint can stall the way it does with plain regula falsi.
"""
import logging
import math
from glocko2.core.errors import BracketSearchExhausted, RootIterationExhausted
from glocko2.core.types import VolatilityParams
from glocko2.utils.constants import EPSILON, MAX_BRACKET_STEPS, MAX_ITERATIONS
from glocko2.utils.math_utils import sign

logger = logging.getLogger(__name__)


def volatility_f(x: float, params: VolatilityParams) -> float:
    """the function whose root is ln(sigma'^2)"""
    a = math.log(params.sigma**2.0)
    ex = math.exp(x)
    phi2 = params.phi**2.0
    phi2_v_ex = phi2 + params.v + ex
    num_1 = ex * (params.delta**2.0 - phi2 - params.v - ex)
    denom_1 = 2.0 * (phi2_v_ex**2.0)
    term_2 = (x - a) / (params.tau**2.0)
    return (num_1 / denom_1) - term_2


def find_lower_bracket(params: VolatilityParams, max_steps: int = MAX_BRACKET_STEPS) -> float:
    """
    Steps down from ln(sigma^2) in increments of tau until volatility_f is no longer negative.
    Only needed when delta^2 <= phi^2 + v, otherwise the bracket is known in closed form.
    """
    a = math.log(params.sigma**2.0)
    k = 1
    while volatility_f(a - k * params.tau, params) < 0.0:
        k += 1
        if k > max_steps:
            raise BracketSearchExhausted(
                f'no sign change within {max_steps} steps of size tau={params.tau} below ln(sigma^2)={a}',
                params=params,
                steps=max_steps,
            )
    return a - k * params.tau


def solve_volatility(
    params: VolatilityParams,
    epsilon: float = EPSILON,
    max_iterations: int = MAX_ITERATIONS,
    max_bracket_steps: int = MAX_BRACKET_STEPS,
) -> float:
    """
    Finds the player's new volatility sigma'.

    Parameters:
        params (VolatilityParams): prior sigma, scaled deviation phi, variance v, delta and tau
        epsilon (float): width of the bracket at which the root counts as found
        max_iterations (int): cap on narrowing iterations
        max_bracket_steps (int): cap on the initial bracket search

    Returns:
        float: sigma'

    Raises:
        BracketSearchExhausted: the initial bracket could not be found
        RootIterationExhausted: the bracket did not narrow to epsilon within max_iterations
    """
    delta2 = params.delta**2.0
    phi2_v = params.phi**2.0 + params.v
    A = math.log(params.sigma**2.0)
    if delta2 > phi2_v:
        B = math.log(delta2 - phi2_v)
    else:
        B = find_lower_bracket(params, max_bracket_steps)

    f_A = volatility_f(A, params)
    f_B = volatility_f(B, params)
    for iteration in range(max_iterations):
        if math.fabs(B - A) <= epsilon:
            logger.debug('volatility converged after %d iterations', iteration)
            return math.exp(A / 2.0)

        C = (A + B) * 0.5
        f_C = volatility_f(C, params)
        D = C + (C - A) * (sign(f_A - f_B) * f_C) / math.sqrt(f_C**2.0 - f_A * f_B)
        f_D = volatility_f(D, params)

        if sign(f_D) != sign(f_C):
            A, f_A = C, f_C
            B, f_B = D, f_D
        elif sign(f_D) != sign(f_A):
            B, f_B = D, f_D
        else:
            A, f_A = D, f_D

    raise RootIterationExhausted(
        f'volatility did not converge to within {epsilon} after {max_iterations} iterations',
        params=params,
        steps=max_iterations,
    )
