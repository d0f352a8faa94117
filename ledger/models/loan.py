from ledger.extensions import db

DISPLAY_DATE_FORMAT = "%d/%m/%Y"


class Loan(db.Model):
    __tablename__ = "loans"

    id = db.Column(db.Integer, primary_key=True)

    # one loan per book and one per reader; the unique indexes also settle racing borrows
    book_id = db.Column(db.Integer, db.ForeignKey("books.id"), nullable=False, unique=True, index=True)
    reader_id = db.Column(db.Integer, db.ForeignKey("readers.id"), nullable=False, unique=True, index=True)

    start_date = db.Column(db.DateTime, nullable=False)
    due_date = db.Column(db.DateTime, nullable=False)

    book = db.relationship("Book", backref=db.backref("loan", uselist=False))
    reader = db.relationship("Reader", backref=db.backref("loan", uselist=False))

    @property
    def due_date_display(self) -> str:
        return self.due_date.strftime(DISPLAY_DATE_FORMAT)

    def to_dict(self):
        return {
            "id": self.id,
            "book_id": self.book_id,
            "book_title": self.book.title if self.book else None,
            "reader_id": self.reader_id,
            "reader_name": self.reader.name if self.reader else None,
            "start_date": self.start_date.isoformat(),
            "due_date": self.due_date.isoformat(),
            "due_date_display": self.due_date_display,
        }
