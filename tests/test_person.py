import pytest

from conftest import (
    VALID_ADDRESS_BOB,
    VALID_EMAIL_BOB,
    VALID_NAME_BOB,
    VALID_PHONE_BOB,
    VALID_TAG_HUSBAND,
    build_person,
)
from patrons import (
    Address,
    Book,
    Email,
    Person,
    PersonValidationError,
    Phone,
    Tag,
    UnsupportedModificationError,
)
from utils.validators import NameValidator


def test_fields_read_back_exactly():
    phone, email, address = Phone("94351253"), Email("alice@example.com"), Address("wall street")
    tags = [Tag("friends"), Tag("colleagues")]
    person = Person("Alice Pauline", phone, email, address, tags)

    assert person.name == "Alice Pauline"
    assert person.phone is phone
    assert person.email is email
    assert person.address is address
    assert set(person.tags) == set(tags)
    assert person.borrowed_books == ()


@pytest.mark.parametrize("missing", ["name", "phone", "email", "address", "tags"])
def test_missing_field_rejected(missing):
    fields = {
        "name": "Alice Pauline",
        "phone": Phone("94351253"),
        "email": Email("alice@example.com"),
        "address": Address("wall street"),
        "tags": [],
    }
    fields[missing] = None
    with pytest.raises(PersonValidationError, match=missing):
        Person(**fields)


def test_invalid_name_rejected():
    with pytest.raises(PersonValidationError, match="alphanumeric"):
        build_person(name="peter*")


def test_invalid_name_is_a_value_error():
    with pytest.raises(ValueError):
        build_person(name="")


def test_tags_view_rejects_modification(alice):
    with pytest.raises(UnsupportedModificationError):
        alice.tags.remove(Tag("friends"))
    with pytest.raises(UnsupportedModificationError):
        alice.tags.add(Tag("colleagues"))
    with pytest.raises(UnsupportedModificationError):
        alice.tags.clear()
    assert Tag("friends") in alice.tags
    assert len(alice.tags) == 1


def test_tags_view_set_operations_return_copies(alice):
    union = alice.tags | {Tag("colleagues")}
    assert isinstance(union, frozenset)
    assert len(alice.tags) == 1


def test_tags_property_cannot_be_replaced(alice):
    with pytest.raises(AttributeError):
        alice.tags = {Tag("colleagues")}


def test_is_same_person(alice, bob):
    # same object -> returns true
    assert alice.is_same_person(alice)

    # None -> returns false
    assert not alice.is_same_person(None)

    # same name, all other attributes different -> returns true
    edited_alice = build_person(phone=VALID_PHONE_BOB, email=VALID_EMAIL_BOB,
                                address=VALID_ADDRESS_BOB, tags=(VALID_TAG_HUSBAND,))
    assert alice.is_same_person(edited_alice)

    # different name, all other attributes same -> returns false
    assert not alice.is_same_person(alice.edited(name=VALID_NAME_BOB))

    # name differs in case -> returns false
    assert not bob.is_same_person(bob.edited(name=VALID_NAME_BOB.lower()))

    # name has trailing spaces -> returns false
    assert not bob.is_same_person(bob.edited(name=VALID_NAME_BOB + " "))


def test_equals(alice, bob):
    assert alice == build_person()
    assert alice == alice
    assert alice != None  # noqa: E711
    assert alice != 5
    assert alice != "Alice Pauline"
    assert alice != bob

    assert alice != alice.edited(name=VALID_NAME_BOB)
    assert alice != alice.edited(phone=Phone(VALID_PHONE_BOB))
    assert alice != alice.edited(email=Email(VALID_EMAIL_BOB))
    assert alice != alice.edited(address=Address(VALID_ADDRESS_BOB))
    assert alice != alice.edited(tags=[Tag(VALID_TAG_HUSBAND)])


def test_equals_ignores_tag_order_and_borrowed_books(a_game_of_thrones):
    first = build_person(tags=("friends", "neighbours"))
    second = build_person(tags=("neighbours", "friends"))
    first.borrow_book(a_game_of_thrones)

    assert first == second
    assert hash(first) == hash(second)


def test_hashcode(alice, bob):
    assert hash(alice) == hash(alice)
    assert hash(alice) == hash(build_person())
    assert hash(alice) != hash(bob)


def test_hash_stable_while_borrowing(alice, a_game_of_thrones):
    patrons = {alice}
    alice.borrow_book(a_game_of_thrones)
    assert alice in patrons


def test_borrow_book(alice, a_game_of_thrones):
    alice.borrow_book(a_game_of_thrones)
    assert alice.has_borrowed_book(a_game_of_thrones)


def test_borrow_book_twice_is_noop(alice, a_game_of_thrones):
    alice.borrow_book(a_game_of_thrones)
    alice.borrow_book(Book("A Game of Thrones", "George RR Martin"))
    assert alice.borrowed_books == (a_game_of_thrones,)


def test_borrow_none_rejected(alice):
    with pytest.raises(PersonValidationError):
        alice.borrow_book(None)


def test_return_book(alice, a_game_of_thrones):
    alice.borrow_book(a_game_of_thrones)
    alice.return_book(a_game_of_thrones)
    assert not alice.has_borrowed_book(a_game_of_thrones)


def test_return_unborrowed_book_is_noop(alice, a_game_of_thrones, beloved):
    alice.borrow_book(a_game_of_thrones)
    alice.return_book(beloved)
    assert alice.borrowed_books == (a_game_of_thrones,)


def test_has_borrowed_book(alice, a_game_of_thrones, beloved):
    alice.borrow_book(a_game_of_thrones)
    assert alice.has_borrowed_book(a_game_of_thrones)
    assert alice.has_borrowed_book(Book("A Game of Thrones", "George RR Martin"))
    assert not alice.has_borrowed_book(beloved)


def test_is_valid_person():
    # None is a caller bug
    with pytest.raises(TypeError):
        Person.is_valid_person(None)

    # invalid names
    assert not Person.is_valid_person("")  # empty string
    assert not Person.is_valid_person(" ")  # spaces only
    assert not Person.is_valid_person("^")  # only non-alphanumeric characters
    assert not Person.is_valid_person("peter*")  # contains non-alphanumeric characters

    # valid names
    assert Person.is_valid_person("peter jack")  # alphabets only
    assert Person.is_valid_person("12345")  # numbers only
    assert Person.is_valid_person("peter the 2nd")  # alphanumeric characters
    assert Person.is_valid_person("Capital Tan")  # with capital letters
    assert Person.is_valid_person("David Roger Jackson Ray Jr 2nd")  # long names


def test_is_valid_person_rejects_overlong_names():
    assert not Person.is_valid_person("a" * 300)


def test_to_string(alice, bob, a_game_of_thrones, beloved):
    assert str(alice) == str(build_person())
    assert str(alice) != str(bob)

    alice.borrow_book(a_game_of_thrones)
    alice.borrow_book(beloved)
    assert str(alice) == ("Alice Pauline; Phone: 94351253; Email: alice@example.com;"
                          " Address: 123, Jurong West Ave 6, #08-111; Books: A Game of Thrones | George RR Martin"
                          "Beloved | Toni Morrison; Tags: [friends]")


def test_to_string_changes_with_books_but_equality_does_not(alice, beloved):
    before = str(alice)
    alice.borrow_book(beloved)
    assert str(alice) != before
    assert alice == build_person()


def test_to_string_lists_tags_in_insertion_order():
    person = build_person(tags=("friends", "neighbours"))
    assert str(person).endswith("; Tags: [friends, neighbours]")


def test_edited_keeps_borrowed_books(alice, beloved):
    alice.borrow_book(beloved)
    moved = alice.edited(address=Address("wall street"))
    assert moved.has_borrowed_book(beloved)
    assert moved.is_same_person(alice)
    assert moved != alice


def test_edited_rejects_unknown_fields(alice):
    with pytest.raises(TypeError):
        alice.edited(age=30)


def test_to_dict(alice, beloved):
    alice.borrow_book(beloved)
    assert alice.to_dict() == {
        "name": "Alice Pauline",
        "phone": "94351253",
        "email": "alice@example.com",
        "address": "123, Jurong West Ave 6, #08-111",
        "tags": ["friends"],
        "borrowed_books": [{"title": "Beloved", "author": "Toni Morrison"}],
    }


@pytest.mark.parametrize("field,raw", [("phone", "94351253"), ("email", "alice@example.com"),
                                       ("address", "wall street"), ("phone", ""), ("address", "")])
def test_plain_strings_rejected_for_contact_fields(field, raw):
    fields = {
        "name": "Alice Pauline",
        "phone": Phone("94351253"),
        "email": Email("alice@example.com"),
        "address": Address("wall street"),
        "tags": [],
    }
    fields[field] = raw
    with pytest.raises(PersonValidationError, match=f"{field} must be a"):
        Person(**fields)


def test_plain_string_tags_rejected():
    with pytest.raises(PersonValidationError, match="Tag"):
        Person("Alice Pauline", Phone("94351253"), Email("alice@example.com"),
               Address("wall street"), ["friends"])


def test_non_string_name_rejected():
    with pytest.raises(PersonValidationError, match="name must be a str"):
        Person(12345, Phone("94351253"), Email("alice@example.com"), Address("wall street"))


def test_tags_may_be_any_iterable_of_tags():
    person = Person("Alice Pauline", Phone("94351253"), Email("alice@example.com"),
                    Address("wall street"), (Tag(t) for t in ("friends", "neighbours")))
    assert [tag.label for tag in person.tags] == ["friends", "neighbours"]


def test_name_length_boundary():
    assert Person.is_valid_person("a" * NameValidator.MAX_LENGTH)
    assert not Person.is_valid_person("a" * (NameValidator.MAX_LENGTH + 1))


def test_tags_view_rejects_discard_and_pop(alice):
    with pytest.raises(UnsupportedModificationError):
        alice.tags.discard(Tag("friends"))
    with pytest.raises(UnsupportedModificationError):
        alice.tags.pop()
    with pytest.raises(UnsupportedModificationError):
        alice.tags.update({Tag("colleagues")})
    assert len(alice.tags) == 1


def test_tags_view_rejects_in_place_operators(alice):
    view = alice.tags
    with pytest.raises(UnsupportedModificationError):
        view |= {Tag("colleagues")}
    with pytest.raises(UnsupportedModificationError):
        view -= {Tag("friends")}
    with pytest.raises(UnsupportedModificationError):
        view &= set()
    with pytest.raises(UnsupportedModificationError):
        view ^= {Tag("friends")}
    assert [tag.label for tag in alice.tags] == ["friends"]


@pytest.mark.parametrize("other", ["Alice Pauline", 5, object()])
def test_is_same_person_with_non_person(alice, other):
    assert not alice.is_same_person(other)
