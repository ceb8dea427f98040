"""schoolvault - tenant-scoped authorization and record lifecycle for schools.

Layers:
- core/: shared kernel (Result types, errors, config, container)
- domain/: entities, value objects, events and ports
- application/: command/query handlers and the authorization service
- infrastructure/: SQLAlchemy persistence, casbin policy, logging, event bus, jobs
"""

__version__ = "0.1.0"
