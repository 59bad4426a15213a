# tests/test_csv_export.py
import csv

from contactbook.models import Contact
from contactbook.storage import CSV_HEADER, export_csv


def test_header_and_plain_rows_match_original_format(tmp_path):
    path = tmp_path / "contacts.csv"
    contacts = [
        Contact(name="Alice", phone="+14155550100", email="alice@example.com", birthday="01/02/1990", category="Work"),
        Contact(name="bob", phone="+447911123456", email="bob@example.com", notes="met at PyCon"),
    ]

    result = export_csv(path, contacts)

    assert result.ok
    assert result.count == 2
    assert path.read_text(encoding="utf-8") == (
        "Name,Category,Phone,Email,Address,Birthday,Notes\n"
        "Alice,Work,+14155550100,alice@example.com,,01/02/1990,\n"
        "bob,Personal,+447911123456,bob@example.com,,,met at PyCon\n"
    )


def test_embedded_commas_and_newlines_are_quoted(tmp_path):
    path = tmp_path / "contacts.csv"
    contact = Contact(
        name="Alicia",
        phone="+33142685300",
        email="alicia@example.fr",
        address="12 Rue de la Paix, Paris",
        notes='said "hi"\nthen left',
    )

    export_csv(path, [contact])

    with open(path, encoding="utf-8", newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == CSV_HEADER
    assert rows[1] == ["Alicia", "Personal", "+33142685300", "alicia@example.fr", "12 Rue de la Paix, Paris", "", 'said "hi"\nthen left']


def test_empty_store_writes_header_only(tmp_path):
    path = tmp_path / "contacts.csv"
    export_csv(path, [])
    assert path.read_text(encoding="utf-8") == "Name,Category,Phone,Email,Address,Birthday,Notes\n"


def test_unwritable_target_reports_error(tmp_path):
    result = export_csv(tmp_path / "missing" / "contacts.csv", [])
    assert not result.ok
    assert result.error
