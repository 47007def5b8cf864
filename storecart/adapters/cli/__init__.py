"""Command-line interface adapters.

Provides CLI commands for browsing the catalog and managing the cart:
- product / category / available: Catalog lookups
- add / items / summary / validate / clear: Cart operations
"""
