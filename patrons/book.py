from __future__ import annotations

from patrons.exceptions import PersonValidationError
from utils.validators import TextValidator


class Book:
    """A reference to a catalogue book, identified by its title and author."""

    __slots__ = ("_title", "_author")

    def __init__(self, title: str, author: str) -> None:
        if TextValidator.is_blank(title) or TextValidator.is_blank(author):
            raise PersonValidationError("Book title and author must not be blank.")
        self._title = title.strip()
        self._author = author.strip()

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    def display(self) -> str:
        return f"{self._title} | {self._author}"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Book({self._title!r}, {self._author!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return (self._title, self._author) == (other._title, other._author)

    def __hash__(self) -> int:
        return hash((self._title, self._author))

    def to_dict(self) -> dict:
        return {"title": self._title, "author": self._author}

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(title=data["title"], author=data["author"])
