"""Patient repository adapters."""

from .memory import InMemoryPatientData, InMemoryPatientRepository
from .sqlalchemy import SqlAlchemyPatientRepository

__all__ = [
    "InMemoryPatientData",
    "InMemoryPatientRepository",
    "SqlAlchemyPatientRepository",
]
