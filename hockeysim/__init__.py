"""Data model for a hockey league simulation: players, teams, staff, contracts, stats and a game calendar."""

__version__ = "0.1.0"