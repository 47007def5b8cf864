"""Tests for the FakeStore HTTP adapter and the stock random source."""
