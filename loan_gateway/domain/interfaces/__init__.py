"""Domain interfaces for external collaborators."""

from .identity import IdentityCodeValidator

__all__ = [
    "IdentityCodeValidator",
]
