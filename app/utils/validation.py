import re
from typing import Any

from app.core.constants import EMAIL_PATTERN
from app.core.exceptions import BadRequestException

_email_re = re.compile(EMAIL_PATTERN)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(message: str, **fields: Any) -> None:
    """Raise a 400 with ``message`` when any of ``fields`` is missing or blank.

    The names of the missing fields are returned in ``details``.
    """
    missing = [name for name, value in fields.items() if is_blank(value)]
    if missing:
        raise BadRequestException(message, details={"missing_fields": missing})


def is_valid_email(email: str) -> bool:
    return bool(_email_re.fullmatch(email))


def validate_rating(rating: int) -> None:
    if rating < 1 or rating > 5:
        raise BadRequestException("Rating must be between 1 and 5")
