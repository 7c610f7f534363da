"""Personal code validator interface."""

from abc import ABC, abstractmethod
from datetime import date


class IdentityCodeValidator(ABC):
    """
    Abstract validator for national personal codes.

    Syntax checking and birth date extraction are delegated to an
    implementation; the decision engine treats both as black boxes.
    """

    @abstractmethod
    def is_valid(self, personal_code: str) -> bool:
        """
        Check whether a personal code is syntactically valid.

        Args:
            personal_code: The code to check

        Returns:
            True if the code is well-formed (length, checksum, birth date)
        """
        ...

    @abstractmethod
    def get_age(self, personal_code: str, today: date) -> int:
        """
        Get the age in whole years of the code's holder.

        Args:
            personal_code: The code to parse
            today: The date to compute the age at

        Returns:
            Age in completed years

        Raises:
            IdentityCodeParseException: If no birth date can be parsed
        """
        ...
