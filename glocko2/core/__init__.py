"""the Glicko2 update pipeline: scaling, opponent projection, variance and delta, volatility, rating"""
