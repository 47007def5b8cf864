"""Unit tests for pricing, models, ports and the catalog and cart services.

The product source and random source are replaced with in-memory fakes.
"""
