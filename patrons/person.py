"""The Person entity: a library patron and the books they currently hold."""
from __future__ import annotations

from collections.abc import Set
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from patrons.book import Book
from patrons.exceptions import PersonValidationError, UnsupportedModificationError
from patrons.fields import Address, Email, Phone
from patrons.tag import Tag
from utils.validators import NameValidator


class TagView(Set):
    """Read-only window onto a patron's tags.

    Supports membership, iteration, ``len`` and the usual set comparisons.
    Every mutating method raises ``UnsupportedModificationError``.
    """

    __slots__ = ("_tags",)

    def __init__(self, tags: Dict[Tag, None]) -> None:
        self._tags = tags

    @classmethod
    def _from_iterable(cls, it: Iterable[Tag]) -> frozenset:
        return frozenset(it)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagView({list(self._tags)!r})"

    def _reject(self, *args: Any, **kwargs: Any) -> None:
        raise UnsupportedModificationError("Patron tags cannot be modified through this view.")

    add = remove = discard = pop = clear = update = _reject
    __ior__ = __iand__ = __isub__ = __ixor__ = _reject


class Person:
    """A library patron.

    Identity fields are fixed at construction. Borrowed books change over the
    patron's lifetime and are not part of ``==`` or ``hash``.
    """

    def __init__(self, name: str, phone: Phone, email: Email, address: Address,
                 tags: Iterable[Tag] = ()) -> None:
        for field_name, value in (("name", name), ("phone", phone), ("email", email),
                                  ("address", address), ("tags", tags)):
            if value is None:
                raise PersonValidationError(f"Patron {field_name} is required.")
        for field_name, value, expected in (("phone", phone, Phone), ("email", email, Email),
                                            ("address", address, Address)):
            if not isinstance(value, expected):
                raise PersonValidationError(
                    f"Patron {field_name} must be a {expected.__name__}, got {type(value).__name__}.")
        tags = list(tags)
        if not all(isinstance(tag, Tag) for tag in tags):
            raise PersonValidationError("Patron tags must all be Tag values.")
        if not isinstance(name, str):
            raise PersonValidationError(f"Patron name must be a str, got {type(name).__name__}.")
        if not Person.is_valid_person(name):
            raise PersonValidationError(NameValidator.MESSAGE)

        self._name = name
        self._phone = phone
        self._email = email
        self._address = address
        self._tags: Dict[Tag, None] = dict.fromkeys(tags)
        self._borrowed_books: Dict[Book, None] = {}

    @staticmethod
    def is_valid_person(candidate: str) -> bool:
        """Return True if ``candidate`` is an acceptable patron name.

        Raises TypeError for ``None``: a missing name is a caller bug, not an
        invalid name.
        """
        return NameValidator.is_valid_name(candidate)

    # ------------------------- Accessors ------------------------- #
    @property
    def name(self) -> str:
        return self._name

    @property
    def phone(self) -> Phone:
        return self._phone

    @property
    def email(self) -> Email:
        return self._email

    @property
    def address(self) -> Address:
        return self._address

    @property
    def tags(self) -> TagView:
        return TagView(self._tags)

    @property
    def borrowed_books(self) -> Tuple[Book, ...]:
        return tuple(self._borrowed_books)

    # ------------------------- Identity ------------------------- #
    def is_same_person(self, other: Optional["Person"]) -> bool:
        """Weaker than equality: two patrons are the same if their names match exactly."""
        if other is self:
            return True
        return isinstance(other, Person) and other.name == self._name

    def _identity_fields(self) -> tuple:
        return (self._name, self._phone, self._email, self._address, frozenset(self._tags))

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Person):
            return False
        return self._identity_fields() == other._identity_fields()

    def __hash__(self) -> int:
        return hash(self._identity_fields())

    # ------------------------- Borrowing ------------------------- #
    def borrow_book(self, book: Book) -> None:
        if book is None:
            raise PersonValidationError("Book is required.")
        self._borrowed_books.setdefault(book, None)

    def return_book(self, book: Book) -> None:
        self._borrowed_books.pop(book, None)

    def has_borrowed_book(self, book: Book) -> bool:
        return book in self._borrowed_books

    # ------------------------- Helpers ------------------------- #
    def edited(self, **changes: Any) -> "Person":
        """Copy of this patron with some identity fields replaced.

        Accepts ``name``, ``phone``, ``email``, ``address`` and ``tags``.
        Borrowed books are carried over to the copy.
        """
        allowed = {"name", "phone", "email", "address", "tags"}
        unknown = set(changes) - allowed
        if unknown:
            raise TypeError(f"Unknown patron fields: {', '.join(sorted(unknown))}")
        fields = {
            "name": self._name,
            "phone": self._phone,
            "email": self._email,
            "address": self._address,
            "tags": list(self._tags),
        }
        fields.update(changes)
        copy = Person(**fields)
        for book in self._borrowed_books:
            copy.borrow_book(book)
        return copy

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "phone": str(self._phone),
            "email": str(self._email),
            "address": str(self._address),
            "tags": [tag.label for tag in self._tags],
            "borrowed_books": [book.to_dict() for book in self._borrowed_books],
        }

    def __str__(self) -> str:
        # Book displays are joined as-is, without a separator.
        books = "".join(book.display() for book in self._borrowed_books)
        labels: List[str] = [tag.label for tag in self._tags]
        return (f"{self._name}; Phone: {self._phone}; Email: {self._email}; "
                f"Address: {self._address}; Books: {books}; Tags: [{', '.join(labels)}]")

    def __repr__(self) -> str:
        return f"Person(name={self._name!r})"
