# tierengine/core/errors.py
"""
Exceptions raised by the engine.

Both are programmer errors coming from malformed call sites, so nothing
inside the engine catches them. Defects inside an administrator-edited tier
table are not exceptions: they come back as ValidationIssue values.
"""
from __future__ import annotations


class TierEngineError(Exception):
    """Base class for every error raised by tierengine."""


class ConfigurationError(TierEngineError, ValueError):
    """Empty or malformed tier / milestone table."""


class InvalidInputError(TierEngineError, ValueError):
    """Out-of-domain numeric argument (negative amount, multiplier below 1)."""
