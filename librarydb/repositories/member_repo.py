from librarydb.extensions import db
from librarydb.models.member import Member
from librarydb.repositories.base import save, remove


class MemberRepo:
    @staticmethod
    def get(member_id: int):
        return db.session.get(Member, member_id)

    @staticmethod
    def get_by_email(email: str):
        return Member.query.filter_by(email=email).first()

    @staticmethod
    def list_all():
        return Member.query.order_by(Member.last_name, Member.first_name).all()

    @staticmethod
    def list_by_last_name(last_name: str):
        return Member.query.filter_by(last_name=last_name).order_by(Member.first_name).all()

    @staticmethod
    def create(member: Member):
        return save(member, "member_repo")

    @staticmethod
    def delete(member: Member):
        remove(member, "member_repo")
