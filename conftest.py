import pytest

from patrons import Address, Book, Email, PatronRegistry, Person, Phone, Tag

VALID_NAME_BOB = "Bob Choo"
VALID_PHONE_BOB = "22222222"
VALID_EMAIL_BOB = "bob@example.com"
VALID_ADDRESS_BOB = "Block 123, Bobby Street 3"
VALID_TAG_HUSBAND = "husband"
VALID_TAG_FRIEND = "friend"


def build_person(name="Alice Pauline", phone="94351253", email="alice@example.com",
                 address="123, Jurong West Ave 6, #08-111", tags=("friends",)) -> Person:
    """Build a patron from plain strings; defaults describe Alice."""
    return Person(name, Phone(phone), Email(email), Address(address), [Tag(t) for t in tags])


@pytest.fixture
def make_person():
    return build_person


@pytest.fixture
def alice():
    return build_person()


@pytest.fixture
def bob():
    return build_person(VALID_NAME_BOB, VALID_PHONE_BOB, VALID_EMAIL_BOB, VALID_ADDRESS_BOB,
                        (VALID_TAG_HUSBAND, VALID_TAG_FRIEND))


@pytest.fixture
def a_game_of_thrones():
    return Book("A Game of Thrones", "George RR Martin")


@pytest.fixture
def beloved():
    return Book("Beloved", "Toni Morrison")


@pytest.fixture
def registry(alice, bob):
    return PatronRegistry([alice, bob])
