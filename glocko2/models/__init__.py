"""
Models Module
=============

Rating systems that keep state for a list of competitors across rating periods.

Included Rating Systems:
- Glicko2: Glickman's extension of Glicko with a per-competitor volatility.
"""
