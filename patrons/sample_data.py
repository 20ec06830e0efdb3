"""Sample patrons and books used to seed a fresh session."""
from typing import List

from patrons.book import Book
from patrons.fields import Address, Email, Phone
from patrons.person import Person
from patrons.registry import PatronRegistry
from patrons.tag import Tag

A_GAME_OF_THRONES = ("A Game of Thrones", "George RR Martin")
BELOVED = ("Beloved", "Toni Morrison")
THE_HOBBIT = ("The Hobbit", "J R R Tolkien")


def sample_books() -> List[Book]:
    return [Book(*A_GAME_OF_THRONES), Book(*BELOVED), Book(*THE_HOBBIT)]


def _person(name: str, phone: str, email: str, address: str, *tags: str) -> Person:
    return Person(name, Phone(phone), Email(email), Address(address), [Tag(t) for t in tags])


def sample_patrons() -> List[Person]:
    alice = _person("Alice Pauline", "94351253", "alice@example.com",
                    "123, Jurong West Ave 6, #08-111", "friends")
    benson = _person("Benson Meier", "98765432", "johnd@example.com",
                     "311, Clementi Ave 2, #02-25", "owesMoney", "friends")
    carl = _person("Carl Kurz", "95352563", "heinz@example.com", "wall street")
    daniel = _person("Daniel Meier", "87652533", "cornelia@example.com", "10th street", "friends")
    books = sample_books()
    alice.borrow_book(books[0])
    benson.borrow_book(books[1])
    return [alice, benson, carl, daniel]


def build_sample_registry() -> PatronRegistry:
    return PatronRegistry(sample_patrons())
