"""Randomness sources for the stock simulation."""
