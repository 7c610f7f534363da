"""Personal code related domain exceptions."""

from .base import DomainException


class IdentityCodeParseException(DomainException):
    """Raised when information cannot be extracted from a personal code."""

    def __init__(self, personal_code: str, reason: str = "malformed personal code"):
        super().__init__(
            message=f"Cannot parse personal code {personal_code!r}: {reason}",
            code="IDENTITY_CODE_PARSE_ERROR",
        )
        self.personal_code = personal_code
