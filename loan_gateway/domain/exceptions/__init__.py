"""Domain Exceptions - Collaborator failures and domain errors."""

from .base import DomainException
from .identity import IdentityCodeParseException

__all__ = [
    "DomainException",
    "IdentityCodeParseException",
]
