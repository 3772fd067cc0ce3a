import click
from flask import current_app
from flask.cli import with_appcontext

from librarydb.ddl import DIALECTS, drop_schema, ensure_schema, render_schema_sql


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create any missing tables."""
    ensure_schema(current_app)
    click.echo("Schema ready.")


@click.command("drop-db")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@with_appcontext
def drop_db_command(yes):
    """Drop every table of the schema."""
    if not yes:
        click.confirm("Drop all library tables?", abort=True)
    drop_schema(current_app)
    click.echo("Schema dropped.")


@click.command("dump-schema")
@click.option("--dialect", "dialect_name", type=click.Choice(sorted(DIALECTS)), default="mysql", show_default=True)
@click.option("--database", default=None, help="Database name for the CREATE DATABASE / USE preamble.")
@with_appcontext
def dump_schema_command(dialect_name, database):
    """Print the schema as a SQL script."""
    database = database or current_app.config.get("LIBRARY_DATABASE_NAME", "LibraryDB")
    click.echo(render_schema_sql(dialect_name, database), nl=False)
