"""Fake/mock implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeProductSource: In-memory product records with failure injection
- ScriptedRandomSource: Replays a fixed sequence of stock draws
- FakeCatalog: Canned products and availability for cart tests
"""

from .catalog import FakeCatalog
from .product_source import FakeProductSource, make_record
from .random_source import ScriptedRandomSource

__all__ = [
    "FakeCatalog",
    "FakeProductSource",
    "ScriptedRandomSource",
    "make_record",
]
