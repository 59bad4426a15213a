# tests/test_book.py
from datetime import date

import pytest

from contactbook.commands import ContactBook, Status, parse_confirmation
from contactbook.models import Contact
from contactbook.storage import encode_contacts, load_contacts, save_contacts

FIXED_TODAY = date(2026, 10, 18)

VALID = {"name": "Ada", "phone": "+441234567890", "email": "ada@example.org"}


def _reload(config):
    return load_contacts(config.data_path).contacts


def test_add_contact_flushes_to_disk(book, config):
    result = book.add_contact(**VALID, birthday="10/12/1815", notes="first programmer")

    assert result.status is Status.OK
    assert result.saved
    assert result.contact.category == "Personal"
    assert _reload(config) == book.list_contacts()


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"name": ""}, "name"),
        ({"phone": "0123456789"}, "phone"),
        ({"email": "ada@"}, "email"),
        ({"birthday": "29/02/2023"}, "birthday"),
        ({"birthday": "01/01/2027"}, "birthday"),
        ({"category": "Friends"}, "category"),
    ],
)
def test_add_contact_rejects_invalid_fields(book, config, overrides, field):
    result = book.add_contact(**{**VALID, **overrides})

    assert result.status is Status.VALIDATION_ERROR
    assert result.field == field
    assert result.message
    assert book.list_contacts() == []
    assert not config.data_path.exists()


def test_birthday_check_follows_injected_clock(config):
    past = ContactBook.open(config, today=lambda: date(2020, 1, 1))
    assert past.add_contact(**VALID, birthday="01/01/2021").field == "birthday"
    assert past.add_contact(**VALID, birthday="01/01/2020").ok


def test_search_is_substring_case_sensitive_ordered(book):
    for name in ("Alice", "bob", "Alicia"):
        book.add_contact(name=name, phone="+14155550100", email="x@example.com")

    assert [c.name for c in book.search("Ali")] == ["Alice", "Alicia"]
    assert book.search("ALI") == []


def test_delete_requires_confirmation(book, config):
    book.add_contact(**VALID, notes="first")
    book.add_contact(**VALID, notes="second")

    cancelled = book.delete_contact("Ada", confirmed=parse_confirmation("n"))
    assert cancelled.status is Status.CANCELLED
    assert len(book.list_contacts()) == 2

    deleted = book.delete_contact("Ada", confirmed=parse_confirmation("y"))
    assert deleted.status is Status.OK
    assert deleted.contact.notes == "first"
    assert [c.notes for c in _reload(config)] == ["second"]


def test_parse_confirmation():
    assert parse_confirmation("y")
    assert parse_confirmation("Y")
    for answer in ("n", "", "yes", " y", "N"):
        assert not parse_confirmation(answer)


def test_delete_not_found(book):
    assert book.delete_contact("Ada", confirmed=True).status is Status.NOT_FOUND
    book.add_contact(**VALID)
    assert book.delete_contact("Grace", confirmed=True).status is Status.NOT_FOUND


def test_edit_keeps_empty_fields(book, config):
    book.add_contact(**VALID, address="London")

    result = book.edit_contact("Ada", name="", phone="+12125550123", email="", category="Work")

    assert result.status is Status.OK
    stored = _reload(config)[0]
    assert stored.name == "Ada"
    assert stored.phone == "+12125550123"
    assert stored.email == "ada@example.org"
    assert stored.address == "London"
    assert stored.category == "Work"


def test_edit_can_rename(book, config):
    book.add_contact(**VALID)

    result = book.edit_contact("Ada", name="Ada Lovelace")

    assert result.status is Status.OK
    assert result.contact.name == "Ada Lovelace"
    assert book.find("Ada") is None
    assert [c.name for c in _reload(config)] == ["Ada Lovelace"]


def test_edit_revalidates_new_values(book):
    book.add_contact(**VALID)

    result = book.edit_contact("Ada", phone="+12125550123", email="not-an-email")

    assert result.status is Status.VALIDATION_ERROR
    assert result.field == "email"
    contact = book.find("Ada")
    assert contact.phone == VALID["phone"]
    assert contact.email == VALID["email"]


def test_edit_not_found(book):
    assert book.edit_contact("Ada", phone="+12125550123").status is Status.NOT_FOUND
    book.add_contact(**VALID)
    assert book.edit_contact("ada", phone="+12125550123").status is Status.NOT_FOUND


def test_edit_unknown_field_is_a_programming_error(book):
    book.add_contact(**VALID)
    with pytest.raises(ValueError):
        book.edit_contact("Ada", nickname="Countess")


def test_sort_by_name_flushes(book, config):
    for name in ("bob", "Alice", "Carol"):
        book.add_contact(name=name, phone="+14155550100", email="x@example.com")

    assert book.sort_by_name().ok
    assert [c.name for c in _reload(config)] == ["Alice", "Carol", "bob"]


def test_filter_by_category(book):
    book.add_contact(**VALID, category="Work")
    book.add_contact(name="Grace", phone="+12125550123", email="grace@example.com")

    assert [c.name for c in book.filter_by_category("Work")] == ["Ada"]
    assert [c.name for c in book.filter_by_category("Personal")] == ["Grace"]


def test_export_csv_default_and_explicit_path(book, config, tmp_path):
    book.add_contact(**VALID)

    assert book.export_csv().ok
    assert config.csv_path.read_text(encoding="utf-8").startswith("Name,Category,")

    other = tmp_path / "other.csv"
    assert book.export_csv(other).ok
    assert other.exists()


def test_export_csv_io_error(book, tmp_path):
    result = book.export_csv(tmp_path / "no" / "such" / "dir.csv")
    assert result.status is Status.IO_ERROR


def test_failed_flush_keeps_change_in_memory(config):
    config.data_path.mkdir()
    book = ContactBook(config, today=lambda: FIXED_TODAY)

    result = book.add_contact(**VALID)

    assert result.status is Status.OK
    assert not result.saved
    assert "may not have been saved" in result.message
    assert len(book.list_contacts()) == 1


def test_open_loads_existing_file(config, sample_contacts):
    save_contacts(config.data_path, sample_contacts)
    book = ContactBook.open(config)
    assert book.list_contacts() == sample_contacts
    assert not book.load_result.corrupted


def test_open_recovers_from_corrupt_file(config, sample_contacts):
    data = encode_contacts(sample_contacts)[:-3]
    config.data_path.write_bytes(data)

    book = ContactBook.open(config)

    assert book.list_contacts() == []
    assert book.load_result.corrupted
    assert config.backup_path.read_bytes() == data


def test_context_manager_flushes_on_exit(config):
    with ContactBook.open(config, today=lambda: FIXED_TODAY) as book:
        book.store.add(Contact(name="Unsaved", phone="+14155550100", email="u@example.com"))

    assert [c.name for c in _reload(config)] == ["Unsaved"]
