"""failures of the volatility solver"""


class ConvergenceError(ArithmeticError):
    """
    The volatility root finder gave up. This is not transient and retrying will not help:
    it means the inputs broke a precondition of the model, usually an absurd rating.

    Attributes:
        params (VolatilityParams): the inputs the solver was working on
        steps (int): how many steps were taken before giving up
    """

    def __init__(self, message, params, steps):
        super().__init__(message)
        self.params = params
        self.steps = steps


class BracketSearchExhausted(ConvergenceError):
    """no sign change found while stepping down from ln(sigma^2)"""


class RootIterationExhausted(ConvergenceError):
    """the bracket did not shrink below epsilon within the iteration cap"""
