from flask import Blueprint, request, jsonify
from ledger.services.loan_service import LoanService
from ledger.utils.decorators import json_error, ledger_errors

loan_bp = Blueprint("loans", __name__)


@loan_bp.get("/")
def list_loans():
    loans = LoanService.list_loans()
    return jsonify({"success": True, "data": [x.to_dict() for x in loans]})


@loan_bp.post("/")
@ledger_errors
def borrow_book():
    data = request.get_json(silent=True) or {}
    try:
        book_id = int(data["book_id"])
        reader_id = int(data["reader_id"])
    except (KeyError, TypeError, ValueError):
        return json_error("book_id and reader_id are required", 400)

    loan = LoanService.borrow(book_id, reader_id)
    return jsonify({
        "success": True,
        "loan_id": loan.id,
        "due_date": loan.due_date_display,
        "data": loan.to_dict(),
    }), 201


@loan_bp.post("/return/<int:book_id>")
@ledger_errors
def return_book(book_id: int):
    returned = LoanService.return_book(book_id)
    return jsonify({"success": True, "returned": returned})
