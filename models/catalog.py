"""
Catalog Model

Contains the CatalogProduct model: the butcher catalog the planner picks
products from.
"""

from constants import CONSUMPTION_STAPLE
from models.planning import Product
from .base import db


class CatalogProduct(db.Model):
    """
    Purchasable box of a product.

    package_weight_grams is the total packaged weight of one box; price is the
    box price and sale_price, when set, overrides it.
    """
    __tablename__ = 'catalog_product'

    id = db.Column(db.String(50), primary_key=True)
    sku = db.Column(db.String(50), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    price = db.Column(db.Float, default=0.0)
    sale_price = db.Column(db.Float, nullable=True)
    category = db.Column(db.String(50), default='Other', index=True)

    # 'staple' (weekdays), 'quick' (Friday/Saturday) or 'roast' (Sunday)
    consumption_type = db.Column(db.String(20), default=CONSUMPTION_STAPLE)
    texture = db.Column(db.String(30), default='')
    package_weight_grams = db.Column(db.Float, default=0.0)

    is_available = db.Column(db.Boolean, default=True)
    is_premium = db.Column(db.Boolean, default=False)
    is_appetizer = db.Column(db.Boolean, default=False)
    is_breakfast = db.Column(db.Boolean, default=False)

    def to_product(self):
        return Product(
            id=self.id,
            sku=self.sku,
            name=self.name,
            price=self.price or 0.0,
            sale_price=self.sale_price or None,
            category=self.category or '',
            consumption_type=self.consumption_type or CONSUMPTION_STAPLE,
            texture=self.texture or '',
            package_weight_grams=self.package_weight_grams or 0.0,
            is_available=bool(self.is_available),
            is_premium=bool(self.is_premium),
            is_appetizer=bool(self.is_appetizer),
            is_breakfast=bool(self.is_breakfast),
        )

    def update_from_record(self, record):
        """Copy the fields of a cleaned product record onto this row."""
        product = Product.from_dict(record)
        for key, value in product.to_dict().items():
            if key != 'id':
                setattr(self, key, value)
        return self
