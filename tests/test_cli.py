from sqlalchemy import inspect

from librarydb.extensions import db


def test_dump_schema_defaults_to_mysql(app):
    result = app.test_cli_runner().invoke(args=["dump-schema"])
    assert result.exit_code == 0
    assert result.output.startswith("CREATE DATABASE LibraryDB;")
    assert "ENUM('borrowed','returned','overdue')" in result.output


def test_dump_schema_sqlite(app):
    result = app.test_cli_runner().invoke(args=["dump-schema", "--dialect", "sqlite"])
    assert result.exit_code == 0
    assert "CREATE TABLE loans" in result.output
    assert "CREATE DATABASE" not in result.output


def test_dump_schema_rejects_unknown_dialect(app):
    result = app.test_cli_runner().invoke(args=["dump-schema", "--dialect", "oracle"])
    assert result.exit_code != 0


def test_drop_then_init_db(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["drop-db", "--yes"])
    assert result.exit_code == 0
    assert inspect(db.engine).get_table_names() == []

    result = runner.invoke(args=["init-db"])
    assert result.exit_code == 0
    assert "Schema ready." in result.output
    assert len(inspect(db.engine).get_table_names()) == 6


def test_drop_db_aborts_without_confirmation(app):
    result = app.test_cli_runner().invoke(args=["drop-db"], input="n\n")
    assert result.exit_code != 0
    assert len(inspect(db.engine).get_table_names()) == 6
