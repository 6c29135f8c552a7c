"""Domain layer: entities, value objects, errors, events and protocols.

Pure business rules with no framework dependencies (pydantic is used only
for Annotated boundary types).
"""
