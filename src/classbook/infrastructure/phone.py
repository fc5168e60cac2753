"""Phone numbers compared as the line they dial, not as typed."""

import phonenumbers


def normalize_phone(raw: str, default_region: str | None = None) -> str | None:
    """Return the E.164 form of a typed number, or None when it cannot be dialled.

    A number without a leading + is read as local to default_region, so
    "9123 4567" under "SG" becomes "+6591234567". With no region such a number
    has no country and gives None.
    """
    text = str(raw or "").strip()
    if not text:
        return None
    try:
        number = phonenumbers.parse(text, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(number):
        return None
    return phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.E164)


def phones_match(first: str, second: str, default_region: str | None = None) -> bool:
    """True if both numbers dial the same line.

    Numbers that cannot be normalized (no country code and no region, or too
    short to be a real line) are compared digit for digit instead.
    """
    first_e164 = normalize_phone(first, default_region)
    second_e164 = normalize_phone(second, default_region)
    if first_e164 is not None and second_e164 is not None:
        return first_e164 == second_e164
    return _digits(first) == _digits(second)


def _digits(raw: str) -> str:
    return "".join(ch for ch in str(raw or "") if ch.isdigit())
