from flask import Flask, jsonify
from ledger.config import Config
from ledger.extensions import db, migrate
from ledger.db_objects_mssql import ensure_db_objects_mssql


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # db first: the SQL Server objects below need db.engine
    db.init_app(app)

    # models must be imported before migrate / create_all see the metadata
    from ledger import models  # noqa: F401

    if app.config.get("ENSURE_DB_OBJECTS"):
        ensure_db_objects_mssql(app)

    migrate.init_app(app, db)

    from ledger.controllers.book_controller import book_bp
    from ledger.controllers.reader_controller import reader_bp
    from ledger.controllers.loan_controller import loan_bp
    app.register_blueprint(book_bp, url_prefix="/books")
    app.register_blueprint(reader_bp, url_prefix="/readers")
    app.register_blueprint(loan_bp, url_prefix="/loans")

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    return app
