# ledger/controllers/book_controller.py

from flask import Blueprint, request, jsonify
from ledger.services.book_service import BookService
from ledger.services.changes import BookChanges
from ledger.utils.decorators import json_error, ledger_errors

book_bp = Blueprint("books", __name__)


@book_bp.get("/")
def list_books():
    books = BookService.get_book()
    return jsonify({"success": True, "data": [b.to_dict() for b in books]})


@book_bp.get("/<int:book_id>")
@ledger_errors
def get_book(book_id: int):
    b = BookService.get_book(book_id)
    return jsonify({"success": True, "data": b.to_dict()})


@book_bp.post("/")
@ledger_errors
def create_book():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return json_error("request body must be a JSON object", 400)
    b = BookService.create_book(data.get("title"), data.get("author"))
    return jsonify({"success": True, "id": b.id, "data": b.to_dict()}), 201


@book_bp.route("/<int:book_id>", methods=["PUT", "PATCH"])
@ledger_errors
def update_book(book_id: int):
    data = request.get_json(silent=True) or {}
    b = BookService.update_book(book_id, BookChanges.from_payload(data))
    return jsonify({"success": True, "data": b.to_dict()})


@book_bp.delete("/<int:book_id>")
@ledger_errors
def delete_book(book_id: int):
    BookService.delete_book(book_id)
    return jsonify({"success": True})
