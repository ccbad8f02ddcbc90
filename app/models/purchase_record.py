"""
Itemized purchases that feed the purchase deduction.
"""
from app import db
from datetime import datetime

DEFAULT_CATEGORY = 'General'


class PurchaseRecord(db.Model):
    """A single purchase made by a user on a given date"""
    __tablename__ = 'purchases'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    amount = db.Column(db.Float, nullable=False)
    category = db.Column(db.String(80), nullable=False, default=DEFAULT_CATEGORY)
    description = db.Column(db.Text, nullable=False, default='')
    purchase_date = db.Column(db.Date, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'userId': self.user_id,
            'amount': self.amount,
            'category': self.category,
            'description': self.description,
            'purchaseDate': self.purchase_date.isoformat(),
            'createdAt': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<PurchaseRecord user_id={self.user_id} date={self.purchase_date} amount={self.amount}>'
