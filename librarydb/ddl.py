from sqlalchemy.dialects import mssql, mysql, sqlite
from sqlalchemy.schema import CreateIndex, CreateTable

from librarydb.extensions import db

DIALECTS = {
    "mysql": mysql.dialect,
    "sqlite": sqlite.dialect,
    "mssql": mssql.dialect,
}

# engines where the script starts with CREATE DATABASE / USE
SERVER_DIALECTS = ("mysql", "mssql")


def render_schema_sql(dialect_name="mysql", database="LibraryDB"):
    """
    Render the whole schema as a SQL script for the given dialect.

    Tables come in dependency order (referenced tables first), each followed
    by its CREATE INDEX statements. MySQL and SQL Server scripts get a
    CREATE DATABASE / USE preamble for `database`.
    """
    if dialect_name not in DIALECTS:
        raise ValueError(
            f"unsupported dialect '{dialect_name}', expected one of: {', '.join(sorted(DIALECTS))}"
        )
    if dialect_name in SERVER_DIALECTS and not database:
        raise ValueError("database name required for CREATE DATABASE preamble")

    dialect = DIALECTS[dialect_name]()
    statements = []

    if dialect_name in SERVER_DIALECTS:
        statements.append(f"CREATE DATABASE {database};")
        statements.append(f"USE {database};")

    for table in db.metadata.sorted_tables:
        statements.append(str(CreateTable(table).compile(dialect=dialect)).strip() + ";")
        for index in sorted(table.indexes, key=lambda i: i.name):
            statements.append(str(CreateIndex(index).compile(dialect=dialect)).strip() + ";")

    return "\n\n".join(statements) + "\n"


def ensure_schema(app):
    with app.app_context():
        try:
            db.create_all()
            app.logger.info(
                f"[ddl] schema ensured ({len(db.metadata.sorted_tables)} tables) on {db.engine.url.render_as_string(hide_password=True)}"
            )
        except Exception as e:
            db.session.rollback()
            app.logger.error(f"[ddl] schema creation failed: {e}")
            raise


def drop_schema(app):
    with app.app_context():
        try:
            db.drop_all()
            app.logger.info("[ddl] schema dropped")
        except Exception as e:
            db.session.rollback()
            app.logger.error(f"[ddl] schema drop failed: {e}")
            raise
