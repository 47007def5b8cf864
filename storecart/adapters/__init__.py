"""External adapters for the storecart pricing system.

This package contains all external dependencies (HTTP catalog client,
randomness, CLI) and provides implementations of the core port interfaces.

Adapter Organization:

- catalog/: Adapters for fetching product records (FakeStore API)
- stock/: Randomness sources for the stock simulation
- cli/: Command-line interface for cart operations
"""
