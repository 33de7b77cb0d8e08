"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks: the SI prefix
table, the unit catalog, Quantity and its formatter.
"""
