"""GiggleFest password-reset service.

Hexagonal layout:
- core/: shared kernel (Result, errors, config, container)
- domain/: entities, value objects, protocols, events
- application/: commands and handlers
- infrastructure/: adapters (database, security, email, logging, events)
- presentation/: FastAPI routers
"""
