from flask import Flask

from librarydb.config import Config
from librarydb.extensions import db, enforce_foreign_keys, migrate


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # models must be imported before the metadata is used
    from librarydb.models import author, category, book, book_author, member, loan  # noqa: F401

    # 1) db init (db.engine / db.session need it)
    db.init_app(app)
    with app.app_context():
        enforce_foreign_keys(db.engine)

    # 2) tables; after db init, before anything touches the session
    if app.config.get("LIBRARY_AUTO_CREATE_SCHEMA"):
        from librarydb.ddl import ensure_schema
        ensure_schema(app)

    # 3) migrations
    migrate.init_app(app, db)

    # 4) CLI
    from librarydb.cli import init_db_command, drop_db_command, dump_schema_command
    app.cli.add_command(init_db_command)
    app.cli.add_command(drop_db_command)
    app.cli.add_command(dump_schema_command)

    return app
