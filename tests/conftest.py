from datetime import date

import pytest

from librarydb import create_app
from librarydb.config import TestConfig
from librarydb.extensions import db
from librarydb.models.author import Author
from librarydb.models.book import Book
from librarydb.models.category import Category
from librarydb.models.member import Member


@pytest.fixture
def app():
    # fresh in-memory database per test
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def category(app):
    c = Category(category_name="Fiction")
    db.session.add(c)
    db.session.commit()
    return c


@pytest.fixture
def book(app, category):
    b = Book(title="Ulysses", isbn="9780199535675", category_id=category.category_id,
             published_year=1922, total_copies=3)
    db.session.add(b)
    db.session.commit()
    return b


@pytest.fixture
def author(app):
    a = Author(first_name="James", last_name="Joyce")
    db.session.add(a)
    db.session.commit()
    return a


@pytest.fixture
def member(app):
    m = Member(first_name="Ada", last_name="Lovelace", email="ada@example.com",
               phone="555-0100", join_date=date(2024, 1, 15))
    db.session.add(m)
    db.session.commit()
    return m
