"""Interfaces (application boundary) for CARETRACK.

Defines framework-free application contracts: ABCs and small errors shared by
the service layer and adapters (patient storage, units of work, clocks, ID
generators). Business rules stay out of this package.

Dependency rule: may import `caretrack.domain` types, nothing else from
`caretrack`. It may be imported by `caretrack.service_layer`,
`caretrack.adapters`, `caretrack.entrypoints` and `caretrack.bootstrap`.
"""
