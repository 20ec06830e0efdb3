from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, Iterator, List, Optional

from patrons.book import Book
from patrons.exceptions import DuplicatePersonError, PersonNotFoundError, PersonValidationError
from patrons.fields import Address, Email, Phone
from patrons.person import Person
from patrons.tag import Tag

logger = logging.getLogger(__name__)


def changes_from_text(name: Optional[str] = None, phone: Optional[str] = None,
                      email: Optional[str] = None, address: Optional[str] = None,
                      tags: Optional[List[str]] = None) -> Dict[str, Any]:
    """Turn raw field text into keyword changes for ``Person.edited``; None means unchanged."""
    changes: Dict[str, Any] = {}
    if name is not None:
        changes["name"] = name
    if phone is not None:
        changes["phone"] = Phone(phone)
    if email is not None:
        changes["email"] = Email(email)
    if address is not None:
        changes["address"] = Address(address)
    if tags is not None:
        changes["tags"] = [Tag(label) for label in tags]
    return changes


class PatronRegistry:
    """Manages the patrons of one library session.

    Patrons are kept unique by ``Person.is_same_person``; no two registered
    patrons share a name.
    """

    def __init__(self, patrons: Optional[List[Person]] = None) -> None:
        self._patrons: List[Person] = []
        for person in patrons or []:
            self.add(person)

    # ------------------------- Core operations ------------------------- #
    def contains(self, person: Person) -> bool:
        return any(existing.is_same_person(person) for existing in self._patrons)

    def add(self, person: Person) -> None:
        """Register a patron. Prevent duplicates by name."""
        if self.contains(person):
            raise DuplicatePersonError(f"Patron {person.name} already exists.")
        self._patrons.append(person)
        logger.info(f"Patron added: {person.name}")

    def find(self, name: str) -> Optional[Person]:
        for person in self._patrons:
            if person.name == name:
                return person
        return None

    def get(self, name: str) -> Person:
        person = self.find(name)
        if person is None:
            raise PersonNotFoundError(f"Patron {name} not found.")
        return person

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited``, keeping its position."""
        index = self._index_of(target)
        if not target.is_same_person(edited) and self.contains(edited):
            raise DuplicatePersonError(f"Patron {edited.name} already exists.")
        self._patrons[index] = edited
        logger.info(f"Patron updated: {target.name} -> {edited.name}")

    def edit(self, name: str, /, **changes: Any) -> Person:
        """Replace the named patron with a copy carrying ``changes``. Returns the new patron."""
        if not changes:
            raise PersonValidationError("Nothing to edit. Provide at least one field.")
        target = self.get(name)
        edited = target.edited(**changes)
        self.set_person(target, edited)
        return edited

    def remove(self, person: Person) -> None:
        index = self._index_of(person)
        del self._patrons[index]
        logger.info(f"Patron removed: {person.name}")

    def list_patrons(self) -> List[Person]:
        return list(self._patrons)

    # ------------------------- Borrowing ------------------------- #
    def borrow(self, name: str, book: Book) -> Person:
        person = self.get(name)
        person.borrow_book(book)
        logger.info(f"{name} borrowed {book.display()}")
        return person

    def return_book(self, name: str, book: Book) -> Person:
        person = self.get(name)
        if not person.has_borrowed_book(book):
            logger.warning(f"{name} returned {book.display()} without holding it")
        person.return_book(book)
        return person

    def statistics(self) -> Dict[str, Any]:
        tag_counts = Counter(tag.label for person in self._patrons for tag in person.tags)
        return {
            "total_patrons": len(self._patrons),
            "borrowed_books": sum(len(person.borrowed_books) for person in self._patrons),
            "tags": dict(tag_counts),
        }

    # ------------------------- Helpers ------------------------- #
    def _index_of(self, person: Person) -> int:
        for index, existing in enumerate(self._patrons):
            if existing == person:
                return index
        raise PersonNotFoundError(f"Patron {person.name} not found.")

    def __contains__(self, person: object) -> bool:
        return isinstance(person, Person) and self.contains(person)

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._patrons))

    def __len__(self) -> int:
        return len(self._patrons)
