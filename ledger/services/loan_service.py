from datetime import datetime, timedelta

from flask import current_app
from sqlalchemy.exc import IntegrityError

from ledger.errors import ConflictError, LedgerError, NotFoundError
from ledger.models.book import BOOK_AVAILABLE, BOOK_LOANED
from ledger.models.loan import Loan
from ledger.repositories.book_repo import BookRepo
from ledger.repositories.loan_repo import LoanRepo
from ledger.repositories.reader_repo import ReaderRepo

LOAN_PERIOD_DAYS = 7


class LoanService:
    @staticmethod
    def list_loans():
        return LoanRepo.list_all()

    @staticmethod
    def get_loan_for_book(book_id: int):
        return LoanRepo.get_by_book(book_id)

    @staticmethod
    def borrow(book_id: int, reader_id: int):
        """
        Checks and writes run in one transaction:
        - the book row is locked while the checks run
        - loan insert + status change are committed together
        - if a concurrent borrow wins anyway, the unique indexes on
          loans.book_id / loans.reader_id reject this insert
        """
        try:
            book = BookRepo.get_for_update(book_id)
            if not book:
                raise NotFoundError("book not found")
            if not ReaderRepo.get(reader_id):
                raise NotFoundError("reader not found")

            if LoanRepo.exists_for_reader(reader_id):
                raise ConflictError("reader already has an active loan")

            if book.status == BOOK_LOANED:
                current = LoanRepo.get_by_book(book_id)
                if current:
                    raise ConflictError(f"book already loaned, due on {current.due_date_display}")
                raise ConflictError("book already loaned")

            start = datetime.utcnow()
            loan = Loan(
                book_id=book_id,
                reader_id=reader_id,
                start_date=start,
                due_date=start + timedelta(days=LOAN_PERIOD_DAYS),
            )
            LoanRepo.add(loan)
            book.status = BOOK_LOANED

            # single commit point
            LoanRepo.commit()

        except IntegrityError:
            LoanRepo.rollback()
            current_app.logger.warning(
                f"[loan_service] borrow lost a race book={book_id} reader={reader_id}"
            )
            raise ConflictError("book or reader already has an active loan")
        except LedgerError as e:
            # release the row lock
            LoanRepo.rollback()
            current_app.logger.warning(f"[loan_service] borrow rejected book={book_id} reader={reader_id}: {e}")
            raise

        current_app.logger.info(
            f"[loan_service] book {book_id} loaned to reader {reader_id}, due {loan.due_date_display}"
        )
        return loan

    @staticmethod
    def return_book(book_id: int) -> bool:
        """Returns True when a loan was closed. No active loan is a silent success."""
        loan = LoanRepo.get_by_book(book_id)
        reader_id = loan.reader_id if loan else None
        if loan:
            LoanRepo.remove(loan)
        else:
            current_app.logger.info(f"[loan_service] return: book {book_id} has no active loan")

        book = BookRepo.get(book_id)
        if book:
            book.status = BOOK_AVAILABLE

        LoanRepo.commit()

        if loan:
            current_app.logger.info(f"[loan_service] book {book_id} returned by reader {reader_id}")
        return loan is not None
