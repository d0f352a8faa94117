from ledger.extensions import db

BOOK_AVAILABLE = "AVAILABLE"
BOOK_LOANED = "LOANED"


class Book(db.Model):
    __tablename__ = "books"

    id = db.Column(db.Integer, primary_key=True)
    # same title/author may repeat: every copy is its own row
    title = db.Column(db.String(255), nullable=False, index=True)
    author = db.Column(db.String(255), nullable=False, index=True)

    status = db.Column(
        db.String(50), nullable=False, default=BOOK_AVAILABLE, server_default=BOOK_AVAILABLE
    )  # AVAILABLE/LOANED

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "status": self.status,
        }
