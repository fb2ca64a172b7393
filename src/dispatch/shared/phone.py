"""Phone number normalization for SMS recipients.

Canonical form is the 10-digit local format ``0XXXXXXXXX``. International
(``+254…``/``254…``) input and 9-digit numbers missing the leading zero are
normalized to it. Gateways that need the international form use
:func:`to_international_format`.
"""

import re

from dispatch.exceptions import InvalidPhoneNumber

COUNTRY_CODE = "254"

_ALLOWED = re.compile(r"^\+?[\d\s\-()]+$")
_LOCAL = re.compile(r"^0\d{9}$")
_LOCAL_MOBILE = re.compile(r"^07\d{8}$")


def format_phone_number(raw: str) -> str:
    """Normalize ``raw`` to ``0XXXXXXXXX`` or raise :class:`InvalidPhoneNumber`."""
    if raw is None or not str(raw).strip():
        raise InvalidPhoneNumber("Phone number is required")

    value = str(raw).strip()
    if not _ALLOWED.match(value):
        raise InvalidPhoneNumber(_format_error(value))

    digits = re.sub(r"\D", "", value)

    if digits.startswith(COUNTRY_CODE) and len(digits) == len(COUNTRY_CODE) + 9:
        digits = "0" + digits[len(COUNTRY_CODE) :]
    elif len(digits) == 9 and not digits.startswith("0"):
        digits = "0" + digits

    if not _LOCAL.match(digits):
        raise InvalidPhoneNumber(_format_error(value))

    return digits


def validate_phone_number(raw: str) -> bool:
    try:
        format_phone_number(raw)
    except InvalidPhoneNumber:
        return False
    return True


def to_international_format(phone: str) -> str:
    """Convert a local mobile number ``07XXXXXXXX`` to ``2547XXXXXXXX``."""
    normalized = format_phone_number(phone)
    if not _LOCAL_MOBILE.match(normalized):
        raise InvalidPhoneNumber(
            f"to_international_format requires normalized mobile 07XXXXXXXX. Received: {phone}"
        )
    return COUNTRY_CODE + normalized[1:]


def _format_error(value: str) -> str:
    return f"Invalid phone number format. Expected 0XXXXXXXXX (10 digits starting with 0). Received: {value}"
