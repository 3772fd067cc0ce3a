import pytest

from librarydb.ddl import render_schema_sql


def test_mysql_script_starts_with_database_preamble(app):
    sql = render_schema_sql("mysql", "LibraryDB")
    assert sql.startswith("CREATE DATABASE LibraryDB;\n\nUSE LibraryDB;")


def test_mysql_script_tables_in_dependency_order(app):
    sql = render_schema_sql("mysql")
    positions = [sql.index(f"CREATE TABLE {t} ") for t in
                 ("authors", "categories", "members", "books", "book_authors", "loans")]
    assert sql.index("CREATE TABLE categories ") < sql.index("CREATE TABLE books ")
    assert sql.index("CREATE TABLE books ") < sql.index("CREATE TABLE book_authors ")
    assert sql.index("CREATE TABLE authors ") < sql.index("CREATE TABLE book_authors ")
    assert sql.index("CREATE TABLE members ") < sql.index("CREATE TABLE loans ")
    assert len(positions) == 6


def test_mysql_script_column_types(app):
    sql = render_schema_sql("mysql")
    assert "AUTO_INCREMENT" in sql
    assert "ENUM('borrowed','returned','overdue')" in sql
    assert "YEAR" in sql
    assert "PRIMARY KEY (book_id, author_id)" in sql
    assert "UNIQUE (isbn)" in sql
    assert "UNIQUE (email)" in sql
    assert "UNIQUE (category_name)" in sql
    assert "FOREIGN KEY(category_id) REFERENCES categories (category_id)" in sql


def test_mysql_script_declares_every_index(app):
    sql = render_schema_sql("mysql")
    for name in ("idx_authors_last_name", "idx_title", "idx_category",
                 "idx_author_id", "idx_members_last_name",
                 "idx_status", "idx_member_id", "idx_book_id"):
        assert f"CREATE INDEX {name} ON" in sql


def test_sqlite_script_has_no_preamble_and_checks_status(app):
    sql = render_schema_sql("sqlite")
    assert "CREATE DATABASE" not in sql
    assert "USE " not in sql
    assert "CONSTRAINT loan_status CHECK" in sql


def test_custom_database_name(app):
    sql = render_schema_sql("mssql", "Branch42")
    assert sql.startswith("CREATE DATABASE Branch42;")


def test_unknown_dialect_rejected(app):
    with pytest.raises(ValueError, match="unsupported dialect"):
        render_schema_sql("oracle")


def test_missing_database_name_rejected(app):
    with pytest.raises(ValueError):
        render_schema_sql("mysql", "")
