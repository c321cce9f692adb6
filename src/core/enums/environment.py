"""Application environment types.

Selects environment-specific behavior such as the log renderer.

Environments:
- DEVELOPMENT: local run against the Firebase emulator or a dev project
- TESTING: automated test execution
- CI: continuous integration
- PRODUCTION: deployed service (Railway / Cloud Run)
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
