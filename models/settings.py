"""
Settings Model

Contains the Settings model for application-wide settings storage. The
household profile, freezer capacity and calendar fingerprint are kept here
as JSON documents.
"""

import json

from .base import db


class Settings(db.Model):
    """Key-value storage for application settings."""
    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(50), unique=True, nullable=False)
    value = db.Column(db.Text)

    @classmethod
    def get_json(cls, key, default=None):
        row = cls.query.filter_by(key=key).first()
        if row is None or not row.value:
            return default
        return json.loads(row.value)

    @classmethod
    def set_json(cls, key, data):
        """Stage a JSON value; the caller commits."""
        row = cls.query.filter_by(key=key).first()
        if row is None:
            row = cls(key=key)
            db.session.add(row)
        row.value = json.dumps(data, sort_keys=True)
        return row
