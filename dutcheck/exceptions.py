"""
Exception hierarchy for the conformance engine

Checksum mismatches and gated (valid_in=False) events are recorded data
outcomes and never raised. The classes below cover caller contract
violations and misconfiguration only.
"""
from typing import Optional


class ConformanceError(Exception):
    """
    Base exception for all conformance-engine errors.

    Lets callers catch every engine error with a single except clause.
    """
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# Boundary contract violations

class DomainError(ConformanceError):
    """
    Input outside the engine's declared domain.

    Raised at the engine boundary instead of silently coercing the value.
    """
    pass


class InvalidSymbolError(DomainError):
    """Symbol is not a single character in the byte range 0x00-0xFF."""
    def __init__(self, message: str, symbol: object = None):
        super().__init__(message, {"symbol": repr(symbol)})
        self.symbol = symbol


class InvalidChecksumError(DomainError):
    """Checksum argument is not a string."""
    pass


# Configuration errors

class ConfigurationError(ConformanceError):
    """
    Invalid generator or engine parameters.

    Examples: probability outside [0, 1], empty alphabet, a sentinel
    checksum that collides with a real one.
    """
    pass


class AutoRunError(ConformanceError):
    """Invalid auto-run scheduler usage."""
    pass


class InvariantViolation(ConformanceError):
    """
    Internal invariant violated.

    Indicates a bug in the engine or an injected collaborator.
    """
    pass
