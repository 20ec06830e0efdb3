"""Patron Ledger - Core Package

This package contains the patron domain modules including:
- Person entity (person.py)
- Phone, email and address value types (fields.py)
- Tags and book references (tag.py, book.py)
- In-memory patron registry (registry.py)
- Sample patrons used to seed a session (sample_data.py)
"""

from patrons.book import Book
from patrons.exceptions import (
    DuplicatePersonError,
    PatronError,
    PersonNotFoundError,
    PersonValidationError,
    UnsupportedModificationError,
)
from patrons.fields import Address, Email, Phone
from patrons.person import Person, TagView
from patrons.registry import PatronRegistry
from patrons.tag import Tag

__all__ = [
    "Address",
    "Book",
    "DuplicatePersonError",
    "Email",
    "PatronError",
    "PatronRegistry",
    "Person",
    "PersonNotFoundError",
    "PersonValidationError",
    "Phone",
    "Tag",
    "TagView",
    "UnsupportedModificationError",
]
