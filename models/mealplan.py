"""
Meal Calendar Model

Contains the CalendarEntry model: one row per day of the yearly meal
calendar, with lock support.
"""

from models.planning import CalendarDay
from .base import db


class CalendarEntry(db.Model):
    """Calendar day; locked days are preserved during regeneration."""
    id = db.Column(db.Integer, primary_key=True)
    day_index = db.Column(db.Integer, nullable=False, index=True)  # 0-364 from plan start
    date = db.Column(db.Date, nullable=False, unique=True)
    product_id = db.Column(db.String(50), db.ForeignKey('catalog_product.id', ondelete='SET NULL'), nullable=True, index=True)
    is_delivery_day = db.Column(db.Boolean, default=False)
    delivery_index = db.Column(db.Integer, nullable=True)
    is_free_day = db.Column(db.Boolean, default=False)
    locked = db.Column(db.Boolean, default=False)  # Manually swapped days
    product = db.relationship('CatalogProduct')

    def to_day(self, catalog):
        return CalendarDay(
            date=self.date,
            meal=catalog.get(self.product_id),
            is_delivery_day=bool(self.is_delivery_day),
            delivery_index=self.delivery_index,
            is_free_day=bool(self.is_free_day),
            locked=bool(self.locked),
        )

    @classmethod
    def from_day(cls, day_index, day):
        return cls(
            day_index=day_index,
            date=day.date,
            product_id=day.meal.id if day.meal else None,
            is_delivery_day=day.is_delivery_day,
            delivery_index=day.delivery_index,
            is_free_day=day.is_free_day,
            locked=day.locked,
        )
