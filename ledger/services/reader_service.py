from flask import current_app
from sqlalchemy.exc import IntegrityError

from ledger.errors import ConflictError, DuplicateError, NotFoundError, ValidationError
from ledger.models.reader import Reader
from ledger.repositories.loan_repo import LoanRepo
from ledger.repositories.reader_repo import ReaderRepo
from ledger.services.changes import ReaderChanges


class ReaderService:
    @staticmethod
    def get_reader(reader_id: int = None):
        if reader_id is None:
            return ReaderRepo.list_all()

        reader = ReaderRepo.get(reader_id)
        if not reader:
            raise NotFoundError("reader not found")
        return reader

    @staticmethod
    def create_reader(name: str, phone: str = None):
        if name is None:
            raise ValidationError("name is required")

        if ReaderRepo.name_taken(name):
            raise DuplicateError("reader is already registered")

        try:
            reader = ReaderRepo.create(Reader(name=name, phone=phone))
        except IntegrityError:
            ReaderRepo.rollback()
            raise DuplicateError("reader is already registered")

        current_app.logger.info(f"[reader_service] reader created id={reader.id}")
        return reader

    @staticmethod
    def update_reader(reader_id: int, changes: ReaderChanges):
        reader = ReaderService.get_reader(reader_id)

        if changes.name is not None and ReaderRepo.name_taken(changes.name, exclude_id=reader_id):
            raise DuplicateError("a reader with this name already exists")

        changes.apply_to(reader)
        try:
            ReaderRepo.update()
        except IntegrityError:
            # rollback expires the instance, so the row reloads unchanged
            ReaderRepo.rollback()
            raise DuplicateError("a reader with this name already exists")
        return reader

    @staticmethod
    def delete_reader(reader_id: int):
        reader = ReaderService.get_reader(reader_id)

        if LoanRepo.exists_for_reader(reader_id):
            current_app.logger.warning(f"[reader_service] delete rejected, reader {reader_id} has an active loan")
            raise ConflictError("reader has an active loan")

        try:
            ReaderRepo.delete(reader)
        except IntegrityError:
            ReaderRepo.rollback()
            raise ConflictError("reader has an active loan")

        current_app.logger.info(f"[reader_service] reader deleted id={reader_id}")
