"""Catalog adapters for retrieving product records.

Implementations support:
- FakeStore REST API (fakestoreapi.com and compatible services)
"""
