from librarydb.extensions import db
from librarydb.models.author import Author
from librarydb.repositories.base import save, remove


class AuthorRepo:
    @staticmethod
    def get(author_id: int):
        return db.session.get(Author, author_id)

    @staticmethod
    def list_all():
        return Author.query.order_by(Author.last_name, Author.first_name).all()

    @staticmethod
    def list_by_last_name(last_name: str):
        return Author.query.filter_by(last_name=last_name).order_by(Author.first_name).all()

    @staticmethod
    def create(author: Author):
        return save(author, "author_repo")

    @staticmethod
    def delete(author: Author):
        remove(author, "author_repo")
