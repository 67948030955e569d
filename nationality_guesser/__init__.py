"""Nationality Guesser - voice skill that guesses where a first name comes from."""

__version__ = "0.1.0"
__logo__ = "🌍"
