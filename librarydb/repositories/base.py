from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from librarydb.extensions import db


def _rollback(tag: str, e: SQLAlchemyError):
    db.session.rollback()
    current_app.logger.warning(f"[{tag}] rolled back: {e}")


def commit(tag: str):
    """Commit the session; on failure roll back, log and re-raise."""
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        _rollback(tag, e)
        raise


def execute_and_commit(stmt, tag: str):
    # execute() flushes the statement right away, so it fails before commit()
    try:
        db.session.execute(stmt)
        db.session.commit()
    except SQLAlchemyError as e:
        _rollback(tag, e)
        raise


def save(obj, tag: str):
    db.session.add(obj)
    commit(tag)
    return obj


def remove(obj, tag: str):
    db.session.delete(obj)
    commit(tag)
