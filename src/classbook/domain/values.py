"""Validated value types held by a Person: Name, Phone, Email, Address, Tag."""

import re
from dataclasses import dataclass

from classbook.exceptions import InvalidValueError

_ALNUM = "A-Za-z0-9"
_NAME_RE = re.compile(rf"[{_ALNUM}][{_ALNUM} ]*")
_PHONE_RE = re.compile(r"\+?\d{3,}")
_PHONE_SEPARATORS_RE = re.compile(r"[\s\-]")
_EMAIL_LOCAL = rf"[{_ALNUM}]+(?:[+_.\-][{_ALNUM}]+)*"
_EMAIL_LABEL = rf"[{_ALNUM}]+(?:-[{_ALNUM}]+)*"
_EMAIL_LAST_LABEL = rf"[{_ALNUM}](?:-?[{_ALNUM}])+"
_EMAIL_RE = re.compile(rf"{_EMAIL_LOCAL}@(?:{_EMAIL_LABEL}\.)*{_EMAIL_LAST_LABEL}")
_ADDRESS_RE = re.compile(r"\S.*", re.DOTALL)
_TAG_RE = re.compile(rf"[{_ALNUM}]+")


def _require_str(value: object, type_name: str) -> str:
    if not isinstance(value, str):
        raise InvalidValueError(f"{type_name} must be text, got {type(value).__name__}.")
    return value


@dataclass(frozen=True)
class Name:
    """A person's name. Weak identity key of a Person."""

    MESSAGE = "Names should only contain alphanumeric characters and spaces, and it should not be blank."

    value: str

    def __post_init__(self):
        value = _require_str(self.value, "Name").strip()
        if not _NAME_RE.fullmatch(value):
            raise InvalidValueError(self.MESSAGE)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    """A phone number as typed. Spaces and dashes are dropped."""

    MESSAGE = "Phone numbers should only contain digits, and it should be at least 3 digits long."

    value: str

    def __post_init__(self):
        value = _PHONE_SEPARATORS_RE.sub("", _require_str(self.value, "Phone"))
        if not _PHONE_RE.fullmatch(value):
            raise InvalidValueError(self.MESSAGE)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    """An email address of the form local-part@domain."""

    MESSAGE = (
        "Emails should be of the format local-part@domain. The local-part should only "
        "contain alphanumeric characters and +_.- and should not start or end with a "
        "special character. The domain is made of labels separated by periods; each "
        "label starts and ends with an alphanumeric character and the last one is at "
        "least 2 characters long."
    )

    value: str

    def __post_init__(self):
        value = _require_str(self.value, "Email").strip()
        if not _EMAIL_RE.fullmatch(value):
            raise InvalidValueError(self.MESSAGE)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    """A postal address. Anything goes as long as it does not start blank."""

    MESSAGE = "Addresses can take any values, and it should not be blank."

    value: str

    def __post_init__(self):
        if not _ADDRESS_RE.fullmatch(_require_str(self.value, "Address")):
            raise InvalidValueError(self.MESSAGE)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Tag:
    """A single-word label attached to a Person."""

    MESSAGE = "Tag names should be alphanumeric."

    name: str

    def __post_init__(self):
        if not _TAG_RE.fullmatch(_require_str(self.name, "Tag")):
            raise InvalidValueError(self.MESSAGE)

    def __str__(self) -> str:
        return f"[{self.name}]"
