class LedgerError(Exception):
    """Base for rejected ledger operations. Carries the HTTP status used by the controllers."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LedgerError):
    status_code = 400


class NotFoundError(LedgerError):
    status_code = 404


class DuplicateError(LedgerError):
    status_code = 409


class ConflictError(LedgerError):
    status_code = 409
