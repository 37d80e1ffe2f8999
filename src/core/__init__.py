"""
Core domain models, pricing primitives, and contracts.

This module contains the quoting core's building blocks: pure functions
and immutable value objects, independent of venues, wallets and price feeds.
"""
