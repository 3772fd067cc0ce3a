from librarydb.extensions import db


class BookAuthor(db.Model):
    """Link row between a book and one of its authors.

    The (book_id, author_id) pair is the primary key, so a pair can only be
    linked once.
    """
    __tablename__ = "book_authors"
    __table_args__ = (
        db.Index("idx_author_id", "author_id"),
    )

    book_id = db.Column(db.Integer, db.ForeignKey("books.book_id"), primary_key=True, autoincrement=False)
    author_id = db.Column(db.Integer, db.ForeignKey("authors.author_id"), primary_key=True, autoincrement=False)

    def __repr__(self):
        return f"BookAuthor(book_id = {self.book_id}, author_id = {self.author_id})"
