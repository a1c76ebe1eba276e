"""Service layer for CARETRACK.

Implements application use-cases: command handlers, orchestration, and
transaction boundaries. Calls domain objects and the interfaces they need.

Dependency rule: may import `caretrack.domain` and `caretrack.interfaces`, but
not `caretrack.adapters` or `caretrack.entrypoints`.
"""
