"""ABOUTME: Search result estimation for Gen 5 RNG searches.
ABOUTME: Predicts how many results a search will produce before it is launched."""

__version__ = "0.1.0"
