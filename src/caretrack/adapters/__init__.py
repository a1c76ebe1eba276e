"""Adapters (infrastructure) for CARETRACK.

Provide concrete implementations of the interfaces (patient storage, units of
work, clocks, ID generators), plus persistence mapping and related wiring
(engines, metadata, migrations).

Dependency rule: may import `caretrack.domain` and `caretrack.interfaces`; the
domain must not import this package.
"""
