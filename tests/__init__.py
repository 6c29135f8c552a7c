"""Test suite for the GiggleFest password reset service.

Test structure follows the test pyramid:
- unit/: Unit tests - Handlers, value objects and adapters in isolation
- integration/: Integration tests - Real bcrypt, PyJWT and SQLite database
- api/: API endpoint tests - HTTP request/response cycle with stub handlers
"""
