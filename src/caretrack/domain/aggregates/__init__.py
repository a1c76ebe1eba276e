"""Aggregates package.

All aggregates are defined in this package and re-exported here to provide a
single, convenient import path.
"""

from .patient import Patient

__all__ = ["Patient"]
