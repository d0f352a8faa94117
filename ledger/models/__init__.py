from ledger.models.book import Book, BOOK_AVAILABLE, BOOK_LOANED
from ledger.models.reader import Reader
from ledger.models.loan import Loan

__all__ = ["Book", "Reader", "Loan", "BOOK_AVAILABLE", "BOOK_LOANED"]
