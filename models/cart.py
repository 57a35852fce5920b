"""
Cart Models

Contains the CartItem and PickupItem models for the yearly delivery plan
and the boxes moved to in-store pickup.
"""

from constants import SOURCE_OPTIMIZED
from .base import db


class CartItem(db.Model):
    """Cart line: box count for each of the four deliveries."""
    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.String(50), db.ForeignKey('catalog_product.id', ondelete='CASCADE'), nullable=False, unique=True)
    q1 = db.Column(db.Integer, default=0)
    q2 = db.Column(db.Integer, default=0)
    q3 = db.Column(db.Integer, default=0)
    q4 = db.Column(db.Integer, default=0)
    # Source tracking: 'optimized' (built by the planner), 'manual' (user edited)
    source = db.Column(db.String(20), default=SOURCE_OPTIMIZED)
    product = db.relationship('CatalogProduct')

    @property
    def quantities(self):
        return {1: self.q1 or 0, 2: self.q2 or 0, 3: self.q3 or 0, 4: self.q4 or 0}

    def to_record(self):
        return {
            'product_id': self.product_id,
            'quantities': {str(k): v for k, v in self.quantities.items()},
            'source': self.source or SOURCE_OPTIMIZED,
        }

    @classmethod
    def from_line(cls, line):
        return cls(
            product_id=line.product.id,
            q1=line.quantities.get(1, 0),
            q2=line.quantities.get(2, 0),
            q3=line.quantities.get(3, 0),
            q4=line.quantities.get(4, 0),
            source=line.source,
        )


class PickupItem(db.Model):
    """One box moved from a delivery to in-store pickup (freezer overflow)."""
    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.String(50), db.ForeignKey('catalog_product.id', ondelete='CASCADE'), nullable=False, index=True)
    delivery_index = db.Column(db.Integer, nullable=True)
    product = db.relationship('CatalogProduct')
