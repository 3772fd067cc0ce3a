from librarydb.extensions import db


class Category(db.Model):
    __tablename__ = "categories"

    category_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    category_name = db.Column(db.String(50), nullable=False, unique=True)

    # passive_deletes="all": a category with books can't be deleted, the FK rejects it
    books = db.relationship("Book", back_populates="category", passive_deletes="all")

    def __repr__(self):
        return f"Category(id = {self.category_id}, name = {self.category_name})"
