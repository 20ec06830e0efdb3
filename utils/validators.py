import re
from typing import Optional

# ASCII alphanumerics only; names and tags never accept accented letters.
_ALNUM = "A-Za-z0-9"

NAME_PATTERN = re.compile(rf"[{_ALNUM}][{_ALNUM} ]*")
TAG_PATTERN = re.compile(rf"[{_ALNUM}]+")
PHONE_PATTERN = re.compile(r"\d{3,}")
ADDRESS_PATTERN = re.compile(r"\S.*", re.DOTALL)

_LOCAL_PART = rf"[{_ALNUM}]+([+_.\-][{_ALNUM}]+)*"
_DOMAIN_LABEL = rf"[{_ALNUM}]+(-[{_ALNUM}]+)*"
EMAIL_PATTERN = re.compile(
    rf"{_LOCAL_PART}@({_DOMAIN_LABEL}\.)*[{_ALNUM}]{{2,}}(-[{_ALNUM}]+)*"
)


class NameValidator:
    """Patron name rule: letters, digits and spaces, starting with a letter or digit."""

    MAX_LENGTH = 256
    MESSAGE = ("Names should only contain alphanumeric characters and spaces, "
               "and it should not be blank")

    @staticmethod
    def is_valid_name(candidate: str) -> bool:
        if candidate is None:
            raise TypeError("name candidate must not be None")
        if len(candidate) > NameValidator.MAX_LENGTH:
            return False
        return NAME_PATTERN.fullmatch(candidate) is not None


class TagValidator:
    MESSAGE = "Tags names should be alphanumeric"

    @staticmethod
    def is_valid_tag(label: Optional[str]) -> bool:
        if not label:
            return False
        return TAG_PATTERN.fullmatch(label) is not None


class PhoneValidator:
    MESSAGE = "Phone numbers should only contain numbers, and it should be at least 3 digits long"

    @staticmethod
    def is_valid_phone(raw: Optional[str]) -> bool:
        if raw is None:
            return False
        return PHONE_PATTERN.fullmatch(raw) is not None


class EmailValidator:
    """Emails take the form local-part@domain.

    The local part holds alphanumerics and the special characters ``+_.-``
    but may not start or end with a special character. The domain is one or
    more labels separated by periods; each label starts and ends with an
    alphanumeric, may contain inner hyphens, and the last label is at least
    two characters long.
    """

    MESSAGE = ("Emails should be of the format local-part@domain, where the local part "
               "contains only alphanumerics and +_.- and the domain is made of labels "
               "separated by periods")

    @staticmethod
    def is_valid_email(raw: Optional[str]) -> bool:
        if raw is None:
            return False
        return EMAIL_PATTERN.fullmatch(raw) is not None


class TextValidator:
    """Very basic text validations."""

    ADDRESS_MESSAGE = "Addresses can take any values, and it should not be blank"

    @staticmethod
    def is_valid_address(text: Optional[str]) -> bool:
        if text is None:
            return False
        return ADDRESS_PATTERN.fullmatch(text) is not None

    @staticmethod
    def is_blank(text: Optional[str]) -> bool:
        return text is None or not text.strip()
