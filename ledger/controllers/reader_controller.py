from flask import Blueprint, request, jsonify
from ledger.services.reader_service import ReaderService
from ledger.services.changes import ReaderChanges
from ledger.utils.decorators import json_error, ledger_errors

reader_bp = Blueprint("readers", __name__)


@reader_bp.get("/")
def list_readers():
    readers = ReaderService.get_reader()
    return jsonify({"success": True, "data": [r.to_dict() for r in readers]})


@reader_bp.get("/<int:reader_id>")
@ledger_errors
def get_reader(reader_id: int):
    r = ReaderService.get_reader(reader_id)
    return jsonify({"success": True, "data": r.to_dict()})


@reader_bp.post("/")
@ledger_errors
def create_reader():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return json_error("request body must be a JSON object", 400)
    r = ReaderService.create_reader(data.get("name"), data.get("phone"))
    return jsonify({"success": True, "id": r.id, "data": r.to_dict()}), 201


@reader_bp.route("/<int:reader_id>", methods=["PUT", "PATCH"])
@ledger_errors
def update_reader(reader_id: int):
    data = request.get_json(silent=True) or {}
    r = ReaderService.update_reader(reader_id, ReaderChanges.from_payload(data))
    return jsonify({"success": True, "data": r.to_dict()})


@reader_bp.delete("/<int:reader_id>")
@ledger_errors
def delete_reader(reader_id: int):
    ReaderService.delete_reader(reader_id)
    return jsonify({"success": True})
