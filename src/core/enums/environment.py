"""Application environment types.

Selects environment-specific behavior in Settings and in the logger factory
(human-readable console logs in development, JSON everywhere else).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
