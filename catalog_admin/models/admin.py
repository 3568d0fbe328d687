"""
Admin Model
"""

from datetime import datetime

from catalog_admin.extensions import db


class Admin(db.Model):
    """Back-office account allowed to manage the catalog"""
    __tablename__ = 'admins'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(100))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    products = db.relationship('Product', backref='admin', lazy=True)

    def __repr__(self):
        return f'<Admin {self.email}>'
