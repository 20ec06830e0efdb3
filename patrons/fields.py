"""Value types for a patron's contact details.

Each type checks its own format when constructed, so a ``Person`` only ever
receives values that are already known to be well formed.
"""
from __future__ import annotations

from typing import Callable

from patrons.exceptions import PersonValidationError
from utils.validators import EmailValidator, PhoneValidator, TextValidator


class _ContactField:
    MESSAGE = ""
    # Subclasses set this to the predicate from utils.validators.
    VALIDATOR: Callable[[str], bool]

    def __init__(self, value: str) -> None:
        if value is None:
            raise PersonValidationError(f"{type(self).__name__} is required.")
        if not self.is_valid(value):
            raise PersonValidationError(self.MESSAGE)
        self._value = value

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return cls.VALIDATOR(value)

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))


class Phone(_ContactField):
    MESSAGE = PhoneValidator.MESSAGE
    VALIDATOR = staticmethod(PhoneValidator.is_valid_phone)


class Email(_ContactField):
    MESSAGE = EmailValidator.MESSAGE
    VALIDATOR = staticmethod(EmailValidator.is_valid_email)


class Address(_ContactField):
    MESSAGE = TextValidator.ADDRESS_MESSAGE
    VALIDATOR = staticmethod(TextValidator.is_valid_address)
