"""
Annual income records by tax year.
"""

from app import db
from datetime import datetime


class IncomeRecord(db.Model):
    """Income a user reported for one tax year."""

    __tablename__ = 'income'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    primary_income = db.Column(db.Float, nullable=False)
    additional_income = db.Column(db.Float, nullable=False, default=0.0)
    year = db.Column(db.Integer, nullable=False, index=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # No unique (user_id, year) constraint: lookups take the earliest record.

    @property
    def total_income(self) -> float:
        """Primary plus additional income."""
        return (self.primary_income or 0.0) + (self.additional_income or 0.0)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'userId': self.user_id,
            'primaryIncome': self.primary_income,
            'additionalIncome': self.additional_income,
            'year': self.year,
            'createdAt': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self) -> str:
        return f'<IncomeRecord user_id={self.user_id} year={self.year} income=${self.total_income:,.0f}>'
