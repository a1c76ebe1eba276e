"""Bootstrap (composition root) for CARETRACK.

Assembles the application at runtime: wires concrete adapters to service-layer
handlers, composes shared services (message bus, unit of work, displayed
patient list, clock) and reads configuration.

Import rules:
- Entry points import *this* package rather than adapters directly.
- This package may import: `caretrack.adapters`, `caretrack.service_layer`,
  `caretrack.interfaces`, `caretrack.domain`, and `caretrack.config`.
- Inner layers must not import `caretrack.bootstrap`.
"""
