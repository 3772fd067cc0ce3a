from sqlalchemy.dialects import mysql

from librarydb.extensions import db


class Book(db.Model):
    __tablename__ = "books"
    __table_args__ = (
        db.Index("idx_title", "title"),
        db.Index("idx_category", "category_id"),
    )

    book_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(100), nullable=False)
    isbn = db.Column(db.String(20), nullable=False, unique=True)

    category_id = db.Column(db.Integer, db.ForeignKey("categories.category_id"), nullable=False)

    # YEAR on MySQL, plain small integer everywhere else
    published_year = db.Column(db.SmallInteger().with_variant(mysql.YEAR(), "mysql"))
    total_copies = db.Column(db.Integer, nullable=False)

    category = db.relationship("Category", back_populates="books")
    authors = db.relationship(
        "Author",
        secondary="book_authors",
        viewonly=True,
        order_by="Author.last_name",
    )
    loans = db.relationship("Loan", back_populates="book", passive_deletes="all")

    def __repr__(self):
        return f"Book(id = {self.book_id}, title = {self.title}, isbn = {self.isbn})"
