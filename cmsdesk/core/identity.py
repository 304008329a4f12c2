"""
Identity
========

The acting admin as seen by the collection core. Credentials are never
checked here; an identity arrives from the dashboard login or from the
host's identity provider and is kept in the Flask session.
"""

import hashlib

from flask import session

from .entities import ROLES

SESSION_KEYS = ('admin_id', 'admin_email', 'admin_name', 'admin_role')


def hash_password(password):
    """Simple password hashing"""
    return hashlib.sha256(password.encode()).hexdigest()


class Identity:
    """Opaque user identity plus role claim"""

    def __init__(self, id, display_name, email, role='editor'):
        if role not in ROLES:
            role = 'editor'
        self.id = str(id)
        self.display_name = display_name or 'User'
        self.email = email or ''
        self.role = role

    def __repr__(self):
        return f"<Identity {self.email} ({self.role})>"

    def __eq__(self, other):
        return isinstance(other, Identity) and self.to_dict() == other.to_dict()

    def to_dict(self):
        return {
            'id': self.id,
            'display_name': self.display_name,
            'email': self.email,
            'role': self.role,
        }

    @classmethod
    def from_provider(cls, user_id, email, full_name=None, first_name=None):
        """Build an identity from an identity-provider profile"""
        return cls(user_id, full_name or first_name or 'User', email, role_for_email(email or ''))


def role_for_email(email):
    """Role claim derived from the account address"""
    email = email.lower()
    if 'admin' in email:
        return 'super_admin'
    if 'manager' in email:
        return 'admin'
    return 'editor'


def can_manage_users(identity):
    """Only super admins see the user management screen"""
    return identity is not None and identity.role == 'super_admin'


def login_identity(identity):
    session['admin_id'] = identity.id
    session['admin_email'] = identity.email
    session['admin_name'] = identity.display_name
    session['admin_role'] = identity.role


def logout_identity():
    for key in SESSION_KEYS:
        session.pop(key, None)


def current_identity():
    """Identity stored in the session, or None when nobody is signed in"""
    if 'admin_id' not in session:
        return None
    return Identity(
        session['admin_id'],
        session.get('admin_name'),
        session.get('admin_email'),
        session.get('admin_role', 'editor'),
    )
