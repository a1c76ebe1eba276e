"""CARETRACK

A command-line record keeper for caregivers. It tracks patients and the caring
sessions scheduled for them (date, time, care type and notes), refusing
sessions that would clash with one already on record.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
