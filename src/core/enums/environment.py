"""Application environment types.

Environments:
- DEVELOPMENT: Local development, console logging, stub email delivery
- TESTING: Automated test execution with isolated database
- CI: Continuous integration environment
- PRODUCTION: Real SMTP delivery, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
