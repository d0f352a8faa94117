from ledger.models.reader import Reader
from ledger.extensions import db


class ReaderRepo:
    @staticmethod
    def list_all():
        return Reader.query.order_by(Reader.id.asc()).all()

    @staticmethod
    def get(reader_id: int):
        return db.session.get(Reader, reader_id)

    @staticmethod
    def name_taken(name: str, exclude_id: int = None) -> bool:
        q = Reader.query.filter(Reader.name == name)
        if exclude_id is not None:
            q = q.filter(Reader.id != exclude_id)
        return q.first() is not None

    @staticmethod
    def create(reader: Reader):
        db.session.add(reader)
        db.session.commit()
        return reader

    @staticmethod
    def update():
        db.session.commit()

    @staticmethod
    def delete(reader: Reader):
        db.session.delete(reader)
        db.session.commit()

    @staticmethod
    def rollback():
        db.session.rollback()
