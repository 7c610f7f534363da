"""Personal code validators."""

from .estonian_validator import EstonianPersonalCodeValidator

__all__ = [
    "EstonianPersonalCodeValidator",
]
