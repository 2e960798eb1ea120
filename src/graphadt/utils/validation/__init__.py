"""
Validation package for graphadt.

This package provides utilities for auditing graph integrity from outside a
graph, using nothing but its public contract.
"""

from .base import ValidationResult
from .integrity import GraphIntegrityValidator

__all__ = [
    "ValidationResult",
    "GraphIntegrityValidator",
]
