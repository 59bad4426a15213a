# tests/conftest.py
"""
Shared fixtures: every test gets its own data directory under tmp_path and a
fixed clock so birthday validation does not depend on the day the suite runs.
"""

from datetime import date

import pytest

from contactbook.commands import ContactBook
from contactbook.config import BookConfig
from contactbook.models import Contact

FIXED_TODAY = date(2026, 10, 18)


@pytest.fixture
def config(tmp_path):
    return BookConfig(
        data_path=tmp_path / "contacts.dat",
        csv_path=tmp_path / "contacts.csv",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def book(config):
    return ContactBook.open(config, today=lambda: FIXED_TODAY)


def make_contact(name, **overrides):
    fields = {
        "name": name,
        "phone": "+14155550100",
        "email": f"{name.lower().replace(' ', '.')}@example.com",
        "address": "",
        "birthday": "",
        "notes": "",
        "category": "Personal",
    }
    fields.update(overrides)
    return Contact(**fields)


@pytest.fixture
def sample_contacts():
    return [
        make_contact("Alice", category="Work", birthday="01/02/1990"),
        make_contact("bob", phone="+447911123456", notes="met at PyCon"),
        make_contact("Alicia", category="Family", address="12 Rue de la Paix, Paris"),
    ]


@pytest.fixture
def contact_factory():
    return make_contact
