"""Domain layer for CARETRACK.

Contains business rules: the patient aggregate, the caring-session and index
value objects, and domain errors. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `caretrack.adapters` or `caretrack.entrypoints`.
"""
