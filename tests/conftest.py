import pytest

from ledger import create_app
from ledger.config import TestConfig
from ledger.extensions import db
from ledger.services.book_service import BookService
from ledger.services.reader_service import ReaderService


@pytest.fixture
def app():
    # fresh in-memory schema for every test
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def book(app):
    return BookService.create_book("Dune", "Herbert")


@pytest.fixture
def reader(app):
    return ReaderService.create_reader("Ana", "555-0001")
