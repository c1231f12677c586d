"""
Custom exceptions for singleton construction and pattern selection.
"""

from typing import Any, Dict, Iterable, Optional


class PatternError(Exception):
    """Base exception for pattern errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConstructionError(PatternError):
    """
    Raised when a singleton's factory fails.

    The original exception is available as ``__cause__``. The guard is left
    uninitialized so a later call can retry.
    """

    def __init__(self, name: str, reason: str, attempt: Optional[int] = None):
        self.name = name
        self.reason = reason
        self.attempt = attempt
        super().__init__(
            message=f"Failed to construct singleton '{name}': {reason}",
            details={"name": name, "reason": reason, "attempt": attempt},
        )


class DirectConstructionError(PatternError, TypeError):
    """Raised when a singleton class is instantiated directly."""

    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(
            message=(
                f"{class_name} is a singleton; use {class_name}.get_instance() "
                f"instead of calling the class"
            ),
            details={"class_name": class_name},
        )


class UnknownVariantError(PatternError, ValueError):
    """Raised when a factory is asked for a key it does not know."""

    def __init__(self, kind: str, key: str, choices: Iterable[str]):
        self.kind = kind
        self.key = key
        self.choices = sorted(choices)
        super().__init__(
            message=f"Unknown {kind} '{key}'. Valid options: {', '.join(self.choices)}",
            details={"kind": kind, "key": key, "choices": self.choices},
        )


__all__ = [
    "PatternError",
    "ConstructionError",
    "DirectConstructionError",
    "UnknownVariantError",
]
