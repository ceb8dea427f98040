"""Core enums package.

Usage:
    from schoolvault.core.enums import ErrorCode, Environment
"""

from schoolvault.core.enums.environment import Environment
from schoolvault.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
