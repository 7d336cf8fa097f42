"""
FoodShare - surplus food redistribution backend.
"""

__version__ = "1.0.0"
