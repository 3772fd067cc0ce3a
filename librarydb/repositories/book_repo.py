from sqlalchemy import insert

from librarydb.extensions import db
from librarydb.models.author import Author
from librarydb.models.book import Book
from librarydb.models.book_author import BookAuthor
from librarydb.repositories.base import execute_and_commit, save, remove


class BookRepo:
    @staticmethod
    def get(book_id: int):
        return db.session.get(Book, book_id)

    @staticmethod
    def get_by_isbn(isbn: str):
        return Book.query.filter_by(isbn=isbn).first()

    @staticmethod
    def list_all():
        return Book.query.order_by(Book.title).all()

    @staticmethod
    def list_by_category(category_id: int):
        return Book.query.filter_by(category_id=category_id).order_by(Book.title).all()

    @staticmethod
    def search_by_title(fragment: str):
        return Book.query.filter(Book.title.icontains(fragment, autoescape=True)).order_by(Book.title).all()

    @staticmethod
    def list_by_author_last_name(last_name: str):
        """Books linked to any author with this last name, each book once."""
        return (
            Book.query
            .join(BookAuthor, BookAuthor.book_id == Book.book_id)
            .join(Author, Author.author_id == BookAuthor.author_id)
            .filter(Author.last_name == last_name)
            .distinct()
            .order_by(Book.title)
            .all()
        )

    @staticmethod
    def create(book: Book):
        return save(book, "book_repo")

    @staticmethod
    def link_author(book_id: int, author_id: int):
        # Core insert, not session.add: a repeated pair has to reach the
        # engine and fail on the primary key instead of the identity map.
        execute_and_commit(insert(BookAuthor).values(book_id=book_id, author_id=author_id), "book_repo")

    @staticmethod
    def delete(book: Book):
        remove(book, "book_repo")
