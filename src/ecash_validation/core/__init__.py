"""
Core domain models, decimal arithmetic, address codecs and contracts.

This module contains the foundational building blocks that are independent
of external systems (indexer APIs, wallet storage, UI).
"""
