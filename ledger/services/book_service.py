from flask import current_app
from sqlalchemy.exc import IntegrityError

from ledger.errors import ConflictError, NotFoundError, ValidationError
from ledger.models.book import Book, BOOK_AVAILABLE
from ledger.repositories.book_repo import BookRepo
from ledger.repositories.loan_repo import LoanRepo
from ledger.services.changes import BookChanges


class BookService:
    @staticmethod
    def get_book(book_id: int = None):
        if book_id is None:
            return BookRepo.list_all()

        book = BookRepo.get(book_id)
        if not book:
            raise NotFoundError("book not found")
        return book

    @staticmethod
    def create_book(title: str, author: str):
        if title is None or author is None:
            raise ValidationError("title and author are required")

        book = BookRepo.create(Book(title=title, author=author, status=BOOK_AVAILABLE))
        current_app.logger.info(f"[book_service] book created id={book.id}")
        return book

    @staticmethod
    def update_book(book_id: int, changes: BookChanges):
        book = BookService.get_book(book_id)
        changes.apply_to(book)
        BookRepo.update()
        return book

    @staticmethod
    def delete_book(book_id: int):
        book = BookService.get_book(book_id)

        if LoanRepo.exists_for_book(book_id):
            current_app.logger.warning(f"[book_service] delete rejected, book {book_id} is on loan")
            raise ConflictError("book is on loan")

        try:
            BookRepo.delete(book)
        except IntegrityError:
            # a borrow slipped in between the check and the delete; the Book.loan
            # backref nulls loans.book_id first, which the NOT NULL column rejects
            BookRepo.rollback()
            raise ConflictError("book is on loan")

        current_app.logger.info(f"[book_service] book deleted id={book_id}")
