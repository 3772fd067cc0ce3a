from librarydb.extensions import db

LOAN_STATUSES = ("borrowed", "returned", "overdue")


class Loan(db.Model):
    __tablename__ = "loans"
    __table_args__ = (
        db.Index("idx_status", "status"),
        db.Index("idx_member_id", "member_id"),
        db.Index("idx_book_id", "book_id"),
    )

    loan_id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    book_id = db.Column(db.Integer, db.ForeignKey("books.book_id"), nullable=False)
    member_id = db.Column(db.Integer, db.ForeignKey("members.member_id"), nullable=False)

    loan_date = db.Column(db.Date, nullable=False)
    due_date = db.Column(db.Date, nullable=False)
    return_date = db.Column(db.Date, nullable=True)

    # native ENUM on MySQL, CHECK (status IN (...)) elsewhere.
    # Transitions between statuses are not enforced.
    status = db.Column(
        db.Enum(*LOAN_STATUSES, name="loan_status", create_constraint=True),
        nullable=False,
    )

    book = db.relationship("Book", back_populates="loans")
    member = db.relationship("Member", back_populates="loans")

    def __repr__(self):
        return f"Loan(id = {self.loan_id}, book_id = {self.book_id}, member_id = {self.member_id}, status = {self.status})"
