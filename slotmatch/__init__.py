"""Find common free time between two weekly availability rosters."""

__version__ = "0.1.0"
