"""
Database Base Module

Creates the SQLAlchemy instance shared by the catalog, cart, calendar and
settings tables. Kept apart from app.py to avoid circular imports.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app with db.init_app() in app.py
db = SQLAlchemy()
