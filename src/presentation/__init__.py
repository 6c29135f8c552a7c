"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. It is thin:
it builds commands from request bodies, dispatches them to the application
layer and translates Result values to HTTP responses.

Structure:
- routers/system.py: Non-versioned root and health endpoints
- routers/api/v1/: Password reset resources
- routers/api/middleware/: Request tracing
"""
