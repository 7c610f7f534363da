"""Estonian personal code (isikukood) implementation of IdentityCodeValidator."""

from datetime import date

import structlog
from stdnum.ee import ik
from stdnum.exceptions import InvalidFormat, ValidationError

from loan_gateway.domain.exceptions import IdentityCodeParseException
from loan_gateway.domain.interfaces import IdentityCodeValidator

logger = structlog.get_logger(__name__)


class EstonianPersonalCodeValidator(IdentityCodeValidator):
    """
    Validates Estonian personal codes.

    The code is 11 digits: century/gender digit, YYMMDD birth date,
    a 3-digit serial and a check digit. Applicants from every supported
    country are identified with this format.
    """

    def is_valid(self, personal_code: str) -> bool:
        if not isinstance(personal_code, str):
            return False
        # ik.is_valid compacts first; only the bare 11-digit form is accepted.
        if ik.compact(personal_code) != personal_code:
            return False
        return ik.is_valid(personal_code)

    def get_age(self, personal_code: str, today: date) -> int:
        try:
            if ik.compact(personal_code) != personal_code:
                raise InvalidFormat()
            birth_date = ik.get_birth_date(personal_code)
        except (ValidationError, ValueError, IndexError) as e:
            logger.debug(
                "personal_code_parse_failed",
                error_type=type(e).__name__,
            )
            raise IdentityCodeParseException(personal_code, "no valid birth date") from e

        return _full_years_between(birth_date, today)


def _full_years_between(birth_date: date, today: date) -> int:
    """Completed years from birth_date to today."""
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years
