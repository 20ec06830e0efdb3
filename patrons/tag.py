from __future__ import annotations

from patrons.exceptions import PersonValidationError
from utils.validators import TagValidator


class Tag:
    """A short alphanumeric label attached to a patron (e.g. ``friends``)."""

    __slots__ = ("_label",)

    def __init__(self, label: str) -> None:
        if label is None:
            raise PersonValidationError("Tag label is required.")
        if not TagValidator.is_valid_tag(label):
            raise PersonValidationError(TagValidator.MESSAGE)
        self._label = label

    @property
    def label(self) -> str:
        return self._label

    def __str__(self) -> str:
        return self._label

    def __repr__(self) -> str:
        return f"Tag({self._label!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self._label == other._label

    def __hash__(self) -> int:
        return hash(self._label)
