from librarydb.extensions import db
from librarydb.models.category import Category
from librarydb.repositories.base import save, remove


class CategoryRepo:
    @staticmethod
    def get(category_id: int):
        return db.session.get(Category, category_id)

    @staticmethod
    def get_by_name(name: str):
        return Category.query.filter_by(category_name=name).first()

    @staticmethod
    def list_all():
        return Category.query.order_by(Category.category_name).all()

    @staticmethod
    def create(category: Category):
        return save(category, "category_repo")

    @staticmethod
    def delete(category: Category):
        remove(category, "category_repo")
