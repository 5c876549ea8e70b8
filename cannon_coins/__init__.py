"""
Cannon Coins - shoot the falling balls, collect coins, keep your lives.
"""

__version__ = "0.1.0"
