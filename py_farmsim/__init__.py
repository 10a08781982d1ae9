"""
py-farmsim: synthetic geography, crop suitability and farm simulation
for the farm game.
"""

__version__ = "0.1.0"
