from librarydb.extensions import db


class Member(db.Model):
    __tablename__ = "members"
    __table_args__ = (
        db.Index("idx_members_last_name", "last_name"),
    )

    member_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(100), nullable=False, unique=True)
    phone = db.Column(db.String(20))
    join_date = db.Column(db.Date, nullable=False)  # no default, callers must set it

    loans = db.relationship("Loan", back_populates="member", passive_deletes="all")

    def __repr__(self):
        return f"Member(id = {self.member_id}, email = {self.email})"
