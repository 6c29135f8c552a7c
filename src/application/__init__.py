"""Application layer - Use cases (CQRS commands and handlers).

Handlers orchestrate domain protocols; they import nothing from
infrastructure. Expected failures are returned as Result values and
reported as domain events.

Structure:
- commands/: Command dataclasses (user intent)
- commands/handlers/: One async handler per command
- services/: Logic shared by several handlers
"""
