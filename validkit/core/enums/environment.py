"""Runtime environment types.

Used by Settings to pick the log renderer:
- DEVELOPMENT: human-readable console output
- TESTING / CI: JSON output
- PRODUCTION: JSON output
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
