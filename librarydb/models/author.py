from librarydb.extensions import db


class Author(db.Model):
    __tablename__ = "authors"
    __table_args__ = (
        db.Index("idx_authors_last_name", "last_name"),
    )

    author_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)

    # written through BookAuthor rows
    books = db.relationship(
        "Book",
        secondary="book_authors",
        viewonly=True,
        order_by="Book.title",
    )

    def __repr__(self):
        return f"Author(id = {self.author_id}, name = {self.first_name} {self.last_name})"
