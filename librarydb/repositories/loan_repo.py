from librarydb.extensions import db
from librarydb.models.loan import Loan
from librarydb.repositories.base import save, remove


class LoanRepo:
    @staticmethod
    def get(loan_id: int):
        return db.session.get(Loan, loan_id)

    @staticmethod
    def list_all():
        return Loan.query.order_by(Loan.loan_id.desc()).all()

    @staticmethod
    def list_by_status(status: str):
        return Loan.query.filter_by(status=status).order_by(Loan.loan_id).all()

    @staticmethod
    def list_by_member(member_id: int):
        return Loan.query.filter_by(member_id=member_id).order_by(Loan.loan_id.desc()).all()

    @staticmethod
    def list_by_book(book_id: int):
        return Loan.query.filter_by(book_id=book_id).order_by(Loan.loan_id.desc()).all()

    @staticmethod
    def create(loan: Loan):
        return save(loan, "loan_repo")

    @staticmethod
    def delete(loan: Loan):
        remove(loan, "loan_repo")
