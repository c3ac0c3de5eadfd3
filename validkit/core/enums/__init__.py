"""Core enums."""

from validkit.core.enums.environment import Environment
from validkit.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
