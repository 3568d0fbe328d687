"""
Authenticated admin projection carried by the session cookie.
"""

from flask_login import UserMixin


class AdminIdentity(UserMixin):
    """Minimal view of an Admin: never holds the password hash."""

    role = 'admin'

    def __init__(self, id, email, name=None):
        self.id = id
        self.email = email
        self.name = name

    @classmethod
    def from_model(cls, admin):
        return cls(id=admin.id, email=admin.email, name=admin.name)

    @classmethod
    def from_dict(cls, data):
        if data.get('role') != cls.role:
            raise ValueError('not an admin projection')
        return cls(id=data['id'], email=data['email'], name=data.get('name'))

    def to_dict(self):
        return {'id': self.id, 'email': self.email, 'name': self.name, 'role': self.role}

    @property
    def display_name(self):
        return self.name or self.email

    def __eq__(self, other):
        if not isinstance(other, AdminIdentity):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f'<AdminIdentity {self.email}>'
