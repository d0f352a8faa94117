from ledger.models.loan import Loan
from ledger.extensions import db


class LoanRepo:
    @staticmethod
    def list_all():
        return Loan.query.order_by(Loan.id.asc()).all()

    @staticmethod
    def get_by_book(book_id: int):
        return Loan.query.filter_by(book_id=book_id).first()

    @staticmethod
    def exists_for_book(book_id: int) -> bool:
        return Loan.query.filter_by(book_id=book_id).first() is not None

    @staticmethod
    def exists_for_reader(reader_id: int) -> bool:
        return Loan.query.filter_by(reader_id=reader_id).first() is not None

    # add/remove do not commit: the loan service commits loan + book status together
    @staticmethod
    def add(loan: Loan):
        db.session.add(loan)
        return loan

    @staticmethod
    def remove(loan: Loan):
        db.session.delete(loan)

    @staticmethod
    def commit():
        db.session.commit()

    @staticmethod
    def rollback():
        db.session.rollback()
